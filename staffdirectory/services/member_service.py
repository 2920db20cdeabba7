from fastapi import HTTPException
from typing import List

from staffdirectory.core.logger import get_logger
from staffdirectory.db.session import SessionLocal
from staffdirectory.repositories.attachment_resolver import FileReferenceResolver
from staffdirectory.repositories.department_repo import DepartmentRepository
from staffdirectory.repositories.member_dao import MemberDao
from staffdirectory.repositories.member_repo import MemberRepository
from staffdirectory.repositories.staff_repo import StaffRepository
from staffdirectory.schemas.member import Member

logger = get_logger("staffdirectory.member_service")


def build_member_repository(db) -> MemberRepository:
    return MemberRepository(
        dao=MemberDao(db),
        attachment_resolver=FileReferenceResolver(db),
        staff_repository=StaffRepository(db),
    )


class MemberService:

    # -------------------------
    # LIST members
    # -------------------------
    @staticmethod
    def list_members() -> List[Member]:
        db = SessionLocal()
        try:
            return build_member_repository(db).find_all()
        finally:
            db.close()

    # -------------------------
    # GET member by uid
    # -------------------------
    @staticmethod
    def get_member(member_uid: int, with_staffs: bool = False) -> Member:
        db = SessionLocal()
        try:
            repo = build_member_repository(db)
            member = repo.find_by_uid(member_uid)
            if not member:
                logger.info("Member %s not found", member_uid)
                raise HTTPException(status_code=404, detail="Member not found")

            if with_staffs:
                repo.load_staffs(member)
            return member
        finally:
            db.close()

    # -------------------------
    # GET member by person
    # -------------------------
    @staticmethod
    def get_member_by_person(person_uid: int) -> Member:
        db = SessionLocal()
        try:
            member = build_member_repository(db).find_one_by_person_uid(person_uid)
            if not member:
                logger.info("No member for person %s", person_uid)
                raise HTTPException(status_code=404, detail="Member not found")
            return member
        finally:
            db.close()

    # -------------------------
    # SKELETON member from person
    # -------------------------
    @staticmethod
    def instantiate_member(person_uid: int) -> Member:
        db = SessionLocal()
        try:
            member = build_member_repository(db).instantiate_from_person_uid(person_uid)
            if not member:
                logger.info("Person %s not found", person_uid)
                raise HTTPException(status_code=404, detail="Person not found")
            return member
        finally:
            db.close()

    # -------------------------
    # LIST members of staffs
    # -------------------------
    @staticmethod
    def list_members_by_staffs(staffs: str) -> List[Member]:
        db = SessionLocal()
        try:
            return build_member_repository(db).find_by_staffs(staffs)
        finally:
            db.close()

    # -------------------------
    # LIST members of a department
    # -------------------------
    @staticmethod
    def list_members_by_department(department_uid: int) -> List[Member]:
        db = SessionLocal()
        try:
            department = DepartmentRepository(db).find_by_uid(department_uid)
            if not department:
                logger.info("Department %s not found", department_uid)
                raise HTTPException(status_code=404, detail="Department not found")

            return build_member_repository(db).find_by_department(department)
        finally:
            db.close()
