from fastapi import HTTPException
from typing import List

from staffdirectory.core.logger import get_logger
from staffdirectory.db.session import SessionLocal
from staffdirectory.repositories.department_repo import DepartmentRepository
from staffdirectory.repositories.staff_repo import StaffRepository
from staffdirectory.schemas.department import Department
from staffdirectory.schemas.staff import Staff

logger = get_logger("staffdirectory.staff_service")


class StaffService:

    @staticmethod
    def get_staff(staff_uid: int) -> Staff:
        db = SessionLocal()
        try:
            staff = StaffRepository(db).find_by_uid(staff_uid)
            if not staff:
                logger.info("Staff %s not found", staff_uid)
                raise HTTPException(status_code=404, detail="Staff not found")
            return staff
        finally:
            db.close()

    @staticmethod
    def list_departments(staff_uid: int) -> List[Department]:
        db = SessionLocal()
        try:
            if not StaffRepository(db).find_by_uid(staff_uid):
                raise HTTPException(status_code=404, detail="Staff not found")
            return DepartmentRepository(db).find_by_staff(staff_uid)
        finally:
            db.close()
