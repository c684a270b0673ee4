from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from biztime.api.core.db import get_db
from biztime.api.schemas.common_schema import StatusResponse
from biztime.api.schemas.invoice_schema import (
    InvoiceCreate,
    InvoiceDetail,
    InvoiceDetailResponse,
    InvoiceListResponse,
    InvoiceOut,
    InvoiceResponse,
    InvoiceSummary,
    InvoiceUpdate,
)
from biztime.api.services.invoice_service import InvoiceLedger

router = APIRouter()


def get_ledger(db: Session = Depends(get_db)) -> InvoiceLedger:
    return InvoiceLedger(db)


@router.get("", response_model=InvoiceListResponse, include_in_schema=False)
@router.get("/", response_model=InvoiceListResponse)
def list_invoices(ledger: InvoiceLedger = Depends(get_ledger)):
    invoices = ledger.list()
    return InvoiceListResponse(
        invoices=[InvoiceSummary.model_validate(i) for i in invoices]
    )


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
def get_invoice(invoice_id: int, ledger: InvoiceLedger = Depends(get_ledger)):
    invoice = ledger.get(invoice_id)
    return InvoiceDetailResponse(invoice=InvoiceDetail.model_validate(invoice))


@router.post("", response_model=InvoiceResponse, include_in_schema=False)
@router.post("/", response_model=InvoiceResponse)
def create_invoice(payload: InvoiceCreate, ledger: InvoiceLedger = Depends(get_ledger)):
    invoice = ledger.create(payload.comp_code, payload.amt)
    return InvoiceResponse(invoice=InvoiceOut.model_validate(invoice))


@router.put("/{invoice_id}", response_model=InvoiceResponse)
def update_invoice(
    invoice_id: int,
    payload: InvoiceUpdate,
    ledger: InvoiceLedger = Depends(get_ledger),
):
    invoice = ledger.update(invoice_id, payload.amt, payload.paid)
    return InvoiceResponse(invoice=InvoiceOut.model_validate(invoice))


@router.delete("/{invoice_id}", response_model=StatusResponse)
def delete_invoice(invoice_id: int, ledger: InvoiceLedger = Depends(get_ledger)):
    return ledger.delete(invoice_id)
