from typing import Iterable, List

from staffdirectory.core.logger import get_logger
from staffdirectory.repositories.attachment_resolver import AttachmentResolver
from staffdirectory.repositories.staff_repo import StaffRepository
from staffdirectory.schemas.department import Department
from staffdirectory.schemas.member import Member

logger = get_logger("staffdirectory.member_repo")


def has_image(value) -> bool:
    """fe_users.image holds a reference count; None, "" and "0" mean no image."""
    return value not in (None, "", "0", 0)


class MemberRepository:
    """Member lookups on top of a MemberDao.

    Every lookup returns freshly assembled ``Member`` objects; nothing is
    cached between calls. Absence is reported as ``None`` or an empty list,
    errors from the collaborators propagate unchanged.
    """

    def __init__(
        self,
        dao,
        attachment_resolver: AttachmentResolver,
        staff_repository: StaffRepository,
    ):
        self.dao = dao
        self.attachment_resolver = attachment_resolver
        self.staff_repository = staff_repository

    # -------------------------
    # LIST ALL (without duplicated persons)
    # -------------------------
    def find_all(self) -> List[Member]:
        return self.dao_to_business(self.dao.get_members())

    # -------------------------
    # GET BY UID
    # -------------------------
    def find_by_uid(self, uid: int) -> Member | None:
        row = self.dao.get_member_by_uid(uid)
        if row:
            return self.dao_to_business([row])[0]
        return None

    # -------------------------
    # GET BY PERSON
    # -------------------------
    def find_one_by_person_uid(self, person_uid: int) -> Member | None:
        # several memberships may share a person; the first row wins
        rows = self.dao.get_members_by_person_uid(person_uid)
        if rows:
            return self.dao_to_business(rows)[0]
        return None

    def instantiate_from_person_uid(self, person_uid: int) -> Member | None:
        row = self.dao.instantiate_member_by_person_uid(person_uid)
        if row:
            return self.dao_to_business([row])[0]
        return None

    # -------------------------
    # BY STAFFS / DEPARTMENT
    # -------------------------
    def find_by_staffs(self, staffs: str) -> List[Member]:
        """``staffs`` is a comma-separated list of staff uids, parsed by the DAO."""
        return self.dao_to_business(self.dao.get_members_by_staffs(staffs))

    def find_by_department(self, department: Department) -> List[Member]:
        return self.dao_to_business(self.dao.get_members_by_department(department.uid))

    # -------------------------
    # STAFFS (explicit enrichment)
    # -------------------------
    def load_staffs(self, member: Member) -> None:
        member.staffs = list(self.staff_repository.find_by_person(member))

    # -------------------------
    # ROW -> MEMBER
    # -------------------------
    def dao_to_business(self, rows: Iterable[dict]) -> List[Member]:
        members = []
        for data in rows:
            image = None
            if has_image(data.get("image")):
                image = self.attachment_resolver.resolve_image(data["person_id"])
                if image is None:
                    logger.debug(
                        "No image reference found for person %s", data["person_id"]
                    )

            members.append(
                Member(
                    uid=data["uid"],
                    person_uid=data.get("person_id"),
                    position_function=data.get("position_function"),
                    title=data.get("title"),
                    name=data.get("name"),
                    first_name=data.get("first_name"),
                    last_name=data.get("last_name"),
                    # only the address is trimmed
                    address=(data.get("address") or "").strip(),
                    postal_code=data.get("zip"),
                    city=data.get("city"),
                    country=data.get("country"),
                    telephone=data.get("telephone"),
                    fax=data.get("fax"),
                    email=data.get("email"),
                    website=data.get("www"),
                    gender=data.get("tx_staffdirectory_gender"),
                    mobile_phone=data.get("tx_staffdirectory_mobilephone"),
                    email2=data.get("tx_staffdirectory_email2"),
                    image=image,
                )
            )

        logger.debug("Assembled %d member(s)", len(members))
        return members
