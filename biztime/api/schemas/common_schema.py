from pydantic import BaseModel


class StatusResponse(BaseModel):
    status: str


class ErrorDetail(BaseModel):
    message: str
    status: int


class ErrorResponse(BaseModel):
    error: ErrorDetail
