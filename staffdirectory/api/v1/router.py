from fastapi import APIRouter
from staffdirectory.api.v1.routes import (
    health,
    members,
    departments,
    staffs,
    labels,
)

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(health.router, tags=["Health"])
v1_router.include_router(members.router, prefix="/members", tags=["Members"])
v1_router.include_router(departments.router, prefix="/departments", tags=["Departments"])
v1_router.include_router(staffs.router, prefix="/staffs", tags=["Staffs"])
v1_router.include_router(labels.router, prefix="/labels", tags=["Labels"])
