from typing import Optional, Dict, Any, List
from pydantic import BaseModel

from .services.messages import KinMessage


class KinData(BaseModel):
    kin: Optional[int] = None
    seal: Optional[str] = None
    tone: Optional[str] = None
    seal_number: Optional[int] = None
    tone_number: Optional[int] = None
    color: Optional[str] = None
    is_hunab_ku: bool = False
    display_text: str
    seal_image: Optional[str] = None
    messages: Optional[KinMessage] = None
    date: Optional[str] = None


class KinResponse(BaseModel):
    success: bool
    data: Optional[KinData] = None
    error: Optional[str] = None
    detail: Optional[Dict[str, Any]] = None


class YearsResponse(BaseModel):
    years: List[int]
