from pydantic import BaseModel
from typing import Any, Dict, Optional


class LabelRequest(BaseModel):
    row: Optional[Dict[str, Any]] = None
    title: Optional[str] = None


class LabelOut(BaseModel):
    title: Optional[str] = None
