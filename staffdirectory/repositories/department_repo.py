from sqlalchemy.orm import Session
from sqlalchemy import select
from typing import List

from staffdirectory.db.models.department import Department as DepartmentRecord
from staffdirectory.schemas.department import Department


class DepartmentRepository:

    def __init__(self, db: Session):
        self.db = db

    # Get department by uid
    def find_by_uid(self, uid: int) -> Department | None:
        stmt = select(DepartmentRecord).where(
            DepartmentRecord.uid == uid,
            DepartmentRecord.deleted == 0,
            DepartmentRecord.hidden == 0,
        )
        department = self.db.execute(stmt).scalars().first()
        return Department.model_validate(department) if department else None

    # Departments of a staff, in backend sorting order
    def find_by_staff(self, staff_uid: int) -> List[Department]:
        stmt = (
            select(DepartmentRecord)
            .where(
                DepartmentRecord.staff == staff_uid,
                DepartmentRecord.deleted == 0,
                DepartmentRecord.hidden == 0,
            )
            .order_by(
                DepartmentRecord.sorting.asc(),
                DepartmentRecord.uid.asc(),
            )
        )
        return [
            Department.model_validate(department)
            for department in self.db.execute(stmt).scalars().all()
        ]
