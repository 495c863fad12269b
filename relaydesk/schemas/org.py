from datetime import datetime

from pydantic import BaseModel, ConfigDict


class OrgIn(BaseModel):
    name: str


class OrgOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: datetime
    updated_at: datetime
