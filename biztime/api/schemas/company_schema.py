from pydantic import BaseModel, field_validator
from typing import Any, List, Optional


class CompanyCreate(BaseModel):
    name: str
    description: Optional[str] = None


class CompanyUpdate(BaseModel):
    # Both are required, but a missing company must still answer 404,
    # so presence is checked by the directory after the lookup.
    name: Optional[str] = None
    description: Optional[str] = None


class CompanySummary(BaseModel):
    code: str
    name: str

    class Config:
        from_attributes = True


class CompanyOut(CompanySummary):
    description: Optional[str] = None


class CompanyDetail(CompanyOut):
    invoices: List[int] = []

    @field_validator("invoices", mode="before")
    @classmethod
    def _invoice_ids(cls, value: Any) -> List[Any]:
        return [getattr(inv, "id", inv) for inv in value or []]


class CompanyListResponse(BaseModel):
    companies: List[CompanySummary]


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail
