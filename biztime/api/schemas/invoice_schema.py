from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt
from typing import List, Optional, Union
from datetime import datetime

from biztime.api.schemas.company_schema import CompanyOut


# ============================================================
# Request bodies
# ============================================================
# JSON numbers only; "100" or true are not amounts
Amount = Union[StrictInt, StrictFloat]


class InvoiceCreate(BaseModel):
    comp_code: str
    amt: Amount


class InvoiceUpdate(BaseModel):
    amt: Amount
    paid: StrictBool


# ============================================================
# OUT Schemas
# ============================================================
class InvoiceSummary(BaseModel):
    id: int
    comp_code: str

    class Config:
        from_attributes = True


class InvoiceOut(InvoiceSummary):
    amt: float
    paid: bool
    add_date: datetime
    paid_date: Optional[datetime] = None


class InvoiceDetail(BaseModel):
    """Invoice joined with the company that owns it."""

    id: int
    amt: float
    paid: bool
    add_date: datetime
    paid_date: Optional[datetime] = None
    company: CompanyOut

    class Config:
        from_attributes = True


class InvoiceListResponse(BaseModel):
    invoices: List[InvoiceSummary]


class InvoiceResponse(BaseModel):
    invoice: InvoiceOut


class InvoiceDetailResponse(BaseModel):
    invoice: InvoiceDetail
