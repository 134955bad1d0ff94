from pydantic import BaseModel
from typing import Dict


class HttpRequest(BaseModel):
    url: str
    method: str = "POST"
    headers: Dict[str, str] = {}
    body: str = ""


class HttpResponse(BaseModel):
    status_code: int
    body: str = ""
