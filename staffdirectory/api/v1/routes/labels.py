from fastapi import APIRouter

from staffdirectory.schemas.label import LabelOut, LabelRequest
from staffdirectory.tca.fe_user import get_label

router = APIRouter()


# Backend label of a fe_users row; the incoming title is kept when no row is sent
@router.post("/fe-user", response_model=LabelOut)
def fe_user_label(payload: LabelRequest):
    params = payload.model_dump()
    get_label(params)
    return {"title": params["title"]}
