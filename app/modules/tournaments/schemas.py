import math
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, Optional


class TournamentCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    max_teams: int = Field(alias="maxTeams")
    start_date: Optional[str] = Field(default=None, alias="startDate")

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("max_teams")
    @classmethod
    def max_teams_not_zero(cls, value: int) -> int:
        if not value:
            raise ValueError("must not be zero")
        return value


class TournamentUpdate(BaseModel):
    """
    Partial update. Values are accepted loosely and filtered by to_updates(),
    so a field with an unusable value is skipped instead of failing the request.
    """
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    max_teams: Any = Field(default=None, alias="maxTeams")
    start_date: Any = Field(default=None, alias="startDate")
    status: Any = None
    winner: Any = None
    bracket: Any = None

    def to_updates(self) -> Dict[str, Any]:
        """Column updates for the fields present in the request body"""
        updates: Dict[str, Any] = {}
        if isinstance(self.name, str) and self.name.strip():
            updates["name"] = self.name.strip()
        if is_number(self.max_teams):
            updates["max_teams"] = self.max_teams
        if "start_date" in self.model_fields_set:
            updates["start_date"] = self.start_date or None
        for column in ("status", "winner", "bracket"):
            value = getattr(self, column)
            if value:
                updates[column] = value
        return updates


def is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)
