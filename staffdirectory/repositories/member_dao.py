from sqlalchemy.orm import Session
from sqlalchemy import Integer, String, func, literal, select
from typing import List

from staffdirectory.db.models.department import Department
from staffdirectory.db.models.fe_user import FrontendUser
from staffdirectory.db.models.member import Member
from staffdirectory.db.models.staff import Staff


# fe_users columns shared by member rows and skeleton rows
_PERSON_COLUMNS = (
    FrontendUser.title,
    FrontendUser.name,
    FrontendUser.first_name,
    FrontendUser.last_name,
    FrontendUser.address,
    FrontendUser.zip,
    FrontendUser.city,
    FrontendUser.country,
    FrontendUser.telephone,
    FrontendUser.fax,
    FrontendUser.email,
    FrontendUser.www,
    FrontendUser.image,
    FrontendUser.tx_staffdirectory_gender,
    FrontendUser.tx_staffdirectory_mobilephone,
    FrontendUser.tx_staffdirectory_email2,
)


def parse_uid_list(value: str | None) -> List[int]:
    """Turns ``"1, 2,x,3"`` into ``[1, 2, 3]``; anything non-numeric is skipped."""
    uids = []
    for part in (value or "").split(","):
        part = part.strip()
        if part.isdigit():
            uids.append(int(part))
    return uids


class MemberDao:
    """Raw member rows, one flat dict per row, for MemberRepository."""

    def __init__(self, db: Session):
        self.db = db

    # -------------------------
    # QUERY HELPERS
    # -------------------------
    @staticmethod
    def _visible():
        return (
            Member.deleted == 0,
            Member.hidden == 0,
            Department.deleted == 0,
            Department.hidden == 0,
            FrontendUser.deleted == 0,
            FrontendUser.disable == 0,
        )

    @classmethod
    def _select_members(cls):
        return (
            select(
                Member.uid.label("uid"),
                Member.feuser_id.label("person_id"),
                Member.position_function,
                *_PERSON_COLUMNS,
            )
            .join(FrontendUser, FrontendUser.uid == Member.feuser_id)
            .join(Department, Department.uid == Member.department)
            .where(*cls._visible())
        )

    def _fetch(self, stmt) -> List[dict]:
        return [dict(row) for row in self.db.execute(stmt).mappings().all()]

    # -------------------------
    # LIST ALL (one row per person)
    # -------------------------
    def get_members(self) -> List[dict]:
        first_uids = (
            select(func.min(Member.uid))
            .join(FrontendUser, FrontendUser.uid == Member.feuser_id)
            .join(Department, Department.uid == Member.department)
            .where(*self._visible())
            .group_by(Member.feuser_id)
        )

        stmt = (
            self._select_members()
            .where(Member.uid.in_(first_uids))
            .order_by(
                FrontendUser.last_name.asc(),
                FrontendUser.first_name.asc(),
                Member.uid.asc(),
            )
        )
        return self._fetch(stmt)

    # -------------------------
    # GET BY UID
    # -------------------------
    def get_member_by_uid(self, uid: int) -> dict | None:
        rows = self._fetch(self._select_members().where(Member.uid == uid))
        return rows[0] if rows else None

    # -------------------------
    # GET BY PERSON
    # -------------------------
    def get_members_by_person_uid(self, person_uid: int) -> List[dict]:
        stmt = (
            self._select_members()
            .where(Member.feuser_id == person_uid)
            .order_by(Member.uid.asc())
        )
        return self._fetch(stmt)

    # -------------------------
    # SKELETON (not persisted)
    # -------------------------
    def instantiate_member_by_person_uid(self, person_uid: int) -> dict | None:
        stmt = (
            select(
                literal(0, Integer).label("uid"),
                FrontendUser.uid.label("person_id"),
                literal("", String).label("position_function"),
                *_PERSON_COLUMNS,
            )
            .where(
                FrontendUser.uid == person_uid,
                FrontendUser.deleted == 0,
                FrontendUser.disable == 0,
            )
        )
        rows = self._fetch(stmt)
        return rows[0] if rows else None

    # -------------------------
    # BY STAFFS (comma-separated uids)
    # -------------------------
    def get_members_by_staffs(self, staffs: str) -> List[dict]:
        staff_uids = parse_uid_list(staffs)
        if not staff_uids:
            return []

        stmt = (
            self._select_members()
            .join(Staff, Staff.uid == Department.staff)
            .where(
                Staff.uid.in_(staff_uids),
                Staff.deleted == 0,
                Staff.hidden == 0,
            )
            .order_by(
                Department.sorting.asc(),
                Department.uid.asc(),
                Member.sorting.asc(),
                Member.uid.asc(),
            )
        )
        return self._fetch(stmt)

    # -------------------------
    # BY DEPARTMENT
    # -------------------------
    def get_members_by_department(self, department_uid: int) -> List[dict]:
        stmt = (
            self._select_members()
            .where(Member.department == department_uid)
            .order_by(
                Member.sorting.asc(),
                Member.uid.asc(),
            )
        )
        return self._fetch(stmt)
