from __future__ import annotations

import logging
import math
from typing import Any, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.sql import func

from biztime.api.core.exceptions import NotFoundError, ValidationError
from biztime.api.models.invoice_model import Invoice

logger = logging.getLogger(__name__)


def paid_date_after(paid: bool):
    """
    SQL value for invoices.paid_date once the update lands.

    Paying an unpaid invoice stamps now(), paying a paid one keeps the
    stored date, and anything unpaid has no date. Because the store reads
    the previous paid_date inside the UPDATE itself, there is no window
    between looking at the row and writing it.
    """
    if paid:
        return func.coalesce(Invoice.paid_date, func.now())
    return None


def _validate_amount(amt: Any) -> float:
    if isinstance(amt, bool) or not isinstance(amt, (int, float)):
        raise ValidationError(f"amt must be a number, got {amt!r}")
    if not math.isfinite(amt):
        raise ValidationError(f"amt must be a finite number, got {amt!r}")
    return float(amt)


def _validate_paid(paid: Any) -> bool:
    if not isinstance(paid, bool):
        raise ValidationError(f"paid must be true or false, got {paid!r}")
    return paid


# invoices.id is a signed 64-bit integer in the store
MAX_INVOICE_ID = 2**63 - 1


def _fits_id_column(invoice_id: int) -> bool:
    return -MAX_INVOICE_ID - 1 <= invoice_id <= MAX_INVOICE_ID


class InvoiceLedger:
    """
    Invoices and their payment state.

    An invoice starts unpaid. Each update names the wanted paid flag;
    paid_date tracks the last transition into paid, so marking an
    invoice paid again does not move it.
    """

    def __init__(self, db: Session):
        self.db = db

    # ------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------
    def list(self) -> List[Invoice]:
        return self.db.query(Invoice).order_by(Invoice.id).all()

    def get(self, invoice_id: int) -> Invoice:
        """Invoice with its owning company loaded in the same query."""
        if not _fits_id_column(invoice_id):
            raise NotFoundError(f"Cannot find invoice with id of {invoice_id}")

        invoice = (
            self.db.query(Invoice)
            .options(joinedload(Invoice.company))
            .filter(Invoice.id == invoice_id)
            .first()
        )
        if invoice is None:
            raise NotFoundError(f"Cannot find invoice with id of {invoice_id}")
        return invoice

    # ------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------
    def create(self, comp_code: str, amt: Any) -> Invoice:
        amount = _validate_amount(amt)

        invoice = Invoice(comp_code=comp_code, amt=amount, paid=False, paid_date=None)
        self.db.add(invoice)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Rejected invoice for unknown company %r", comp_code)
            raise ValidationError(f"No company with code {comp_code}")

        self.db.refresh(invoice)
        logger.info("Created invoice %s for %s", invoice.id, comp_code)
        return invoice

    def update(self, invoice_id: int, amt: Any, paid: bool) -> Invoice:
        """
        Set amount and paid flag in one UPDATE.

        | was paid | paid requested | paid_date |
        |----------|----------------|-----------|
        | no       | yes            | now()     |
        | yes      | yes            | unchanged |
        | any      | no             | NULL      |
        """
        amount = _validate_amount(amt)
        paid = _validate_paid(paid)
        if not _fits_id_column(invoice_id):
            raise NotFoundError(f"Cannot find invoice with id: {invoice_id}")

        matched = (
            self.db.query(Invoice)
            .filter(Invoice.id == invoice_id)
            .update(
                {
                    Invoice.amt: amount,
                    Invoice.paid: paid,
                    Invoice.paid_date: paid_date_after(paid),
                },
                synchronize_session=False,
            )
        )
        if not matched:
            raise NotFoundError(f"Cannot find invoice with id: {invoice_id}")

        self.db.commit()
        invoice = self.db.get(Invoice, invoice_id, populate_existing=True)
        logger.info(
            "Updated invoice %s: amt=%s paid=%s paid_date=%s",
            invoice_id,
            amount,
            paid,
            invoice.paid_date,
        )
        return invoice

    def delete(self, invoice_id: int) -> dict:
        if not _fits_id_column(invoice_id):
            raise NotFoundError(f"Cannot find invoice with id: {invoice_id}")

        deleted = self.db.query(Invoice).filter(Invoice.id == invoice_id).delete()
        if not deleted:
            raise NotFoundError(f"Cannot find invoice with id: {invoice_id}")

        self.db.commit()
        logger.info("Deleted invoice %s", invoice_id)
        return {"status": "deleted"}
