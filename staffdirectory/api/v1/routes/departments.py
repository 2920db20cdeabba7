from fastapi import APIRouter
from typing import List

from staffdirectory.schemas.common import MessageResponse
from staffdirectory.schemas.member import MemberOut
from staffdirectory.services.member_service import MemberService

router = APIRouter()


# LIST members of a department
@router.get("/{department_uid}/members", response_model=MessageResponse[List[MemberOut]])
def list_department_members(department_uid: int):
    members = MemberService.list_members_by_department(department_uid)
    return {
        "message": "Members fetched successfully",
        "data": members,
    }
