from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any, List, Optional


class TeamCreate(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    id: str
    name: str
    captain: str
    members: Optional[List[Any]] = None
    invites: Optional[List[Any]] = None

    @field_validator("id", "name", "captain")
    @classmethod
    def not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value


class TeamInvite(BaseModel):
    email: Optional[str] = None

    def normalized_email(self) -> str:
        return (self.email or "").strip().lower()
