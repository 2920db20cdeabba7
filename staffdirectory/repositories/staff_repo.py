from sqlalchemy.orm import Session
from sqlalchemy import select
from typing import List

from staffdirectory.db.models.department import Department
from staffdirectory.db.models.member import Member
from staffdirectory.db.models.staff import Staff as StaffRecord
from staffdirectory.schemas.staff import Staff


class StaffRepository:

    def __init__(self, db: Session):
        self.db = db

    # -------------------------
    # GET BY UID
    # -------------------------
    def find_by_uid(self, uid: int) -> Staff | None:
        stmt = select(StaffRecord).where(
            StaffRecord.uid == uid,
            StaffRecord.deleted == 0,
            StaffRecord.hidden == 0,
        )
        staff = self.db.execute(stmt).scalars().first()
        return Staff.model_validate(staff) if staff else None

    # -------------------------
    # STAFFS OF A PERSON
    # -------------------------
    def find_by_person(self, member) -> List[Staff]:
        """Staffs the member's person belongs to through any membership."""
        stmt = (
            select(StaffRecord)
            .join(Department, Department.staff == StaffRecord.uid)
            .join(Member, Member.department == Department.uid)
            .where(
                Member.feuser_id == member.person_uid,
                Member.deleted == 0,
                Member.hidden == 0,
                Department.deleted == 0,
                Department.hidden == 0,
                StaffRecord.deleted == 0,
                StaffRecord.hidden == 0,
            )
            .distinct()
            .order_by(StaffRecord.uid.asc())
        )
        return [
            Staff.model_validate(staff)
            for staff in self.db.execute(stmt).scalars().all()
        ]
