from pydantic import BaseModel, Field
from typing import Optional


class Department(BaseModel):
    uid: int
    staff_uid: Optional[int] = Field(None, validation_alias="staff")
    position_title: str = ""
    position_description: Optional[str] = None

    class Config:
        from_attributes = True
        populate_by_name = True


class DepartmentOut(BaseModel):
    uid: int
    staff_uid: Optional[int] = None
    position_title: str
    position_description: Optional[str] = None

    class Config:
        from_attributes = True
