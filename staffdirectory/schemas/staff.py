from pydantic import BaseModel
from typing import Optional


class Staff(BaseModel):
    uid: int
    staff_name: str = ""
    description: Optional[str] = None

    class Config:
        from_attributes = True


class StaffOut(BaseModel):
    uid: int
    staff_name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True
