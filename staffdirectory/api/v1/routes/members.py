from fastapi import APIRouter, Query
from typing import List

from staffdirectory.schemas.common import MessageResponse
from staffdirectory.schemas.member import MemberOut
from staffdirectory.services.member_service import MemberService

router = APIRouter()


# -------------------------
# LIST members (one per person)
# -------------------------
@router.get("", response_model=MessageResponse[List[MemberOut]])
def list_members():
    members = MemberService.list_members()
    return {
        "message": "Members fetched successfully",
        "data": members,
    }


# -------------------------
# LIST members of staffs
# -------------------------
@router.get("/by-staffs", response_model=MessageResponse[List[MemberOut]])
def list_members_by_staffs(
    staffs: str = Query(..., description="comma-separated staff uids"),
):
    members = MemberService.list_members_by_staffs(staffs)
    return {
        "message": "Members fetched successfully",
        "data": members,
    }


# -------------------------
# GET member by person
# -------------------------
@router.get("/by-person/{person_uid}", response_model=MessageResponse[MemberOut])
def get_member_by_person(person_uid: int):
    member = MemberService.get_member_by_person(person_uid)
    return {
        "message": "Member fetched successfully",
        "data": member,
    }


# -------------------------
# SKELETON member from person
# -------------------------
@router.get("/skeleton/{person_uid}", response_model=MessageResponse[MemberOut])
def instantiate_member(person_uid: int):
    member = MemberService.instantiate_member(person_uid)
    return {
        "message": "Member instantiated successfully",
        "data": member,
    }


# -------------------------
# GET member by uid
# -------------------------
@router.get("/{member_uid}", response_model=MessageResponse[MemberOut])
def get_member(member_uid: int, with_staffs: bool = False):
    member = MemberService.get_member(member_uid, with_staffs=with_staffs)
    return {
        "message": "Member fetched successfully",
        "data": member,
    }
