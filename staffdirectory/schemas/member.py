from pydantic import BaseModel, computed_field
from typing import List, Optional

from staffdirectory.core.constants import GENDERS
from staffdirectory.schemas.staff import Staff


# -------------------------
# BUSINESS OBJECT
# -------------------------
class Member(BaseModel):
    """A staff-directory entry assembled from a member row and its person.

    All fields are passed in one constructor call. ``staffs`` stays empty until
    ``MemberRepository.load_staffs`` is called for this member.
    """

    uid: int
    person_uid: Optional[int] = None

    position_function: Optional[str] = None
    title: Optional[str] = None
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    address: str = ""
    postal_code: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None

    telephone: Optional[str] = None
    fax: Optional[str] = None
    email: Optional[str] = None
    email2: Optional[str] = None
    mobile_phone: Optional[str] = None
    website: Optional[str] = None

    gender: Optional[int] = None
    image: Optional[str] = None

    staffs: List[Staff] = []


# -------------------------
# OUTPUT
# -------------------------
class MemberOut(Member):

    @computed_field
    @property
    def gender_label(self) -> Optional[str]:
        return GENDERS.get(self.gender)

    class Config:
        from_attributes = True
