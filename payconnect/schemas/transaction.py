from typing import Optional
from pydantic import BaseModel


class StatusData(BaseModel):
    status: str
    transaction_id: str


class StatusResponse(BaseModel):
    ok: bool = True
    data: StatusData


class CancelRequest(BaseModel):
    reason: Optional[str] = None


class MessageResponse(BaseModel):
    ok: bool = True
    message: str


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
