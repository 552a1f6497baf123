from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class RegistrationCreate(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    team_id: Optional[str] = Field(default=None, alias="teamId")
