from fastapi import APIRouter
from typing import List

from staffdirectory.schemas.common import MessageResponse
from staffdirectory.schemas.department import DepartmentOut
from staffdirectory.schemas.staff import StaffOut
from staffdirectory.services.staff_service import StaffService

router = APIRouter()


# GET staff by uid
@router.get("/{staff_uid}", response_model=MessageResponse[StaffOut])
def get_staff(staff_uid: int):
    staff = StaffService.get_staff(staff_uid)
    return {
        "message": "Staff fetched successfully",
        "data": staff,
    }


# LIST departments of a staff
@router.get("/{staff_uid}/departments", response_model=MessageResponse[List[DepartmentOut]])
def list_staff_departments(staff_uid: int):
    departments = StaffService.list_departments(staff_uid)
    return {
        "message": "Departments fetched successfully",
        "data": departments,
    }
