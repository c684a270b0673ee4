"""
Sample companies and invoices for local development and tests.
Installed as the ``biztime-seed`` console script.
"""

import logging

from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from biztime.api.core.db import SessionLocal, init_db
from biztime.api.core.logging_config import configure_logging
from biztime.api.models.company_model import Company
from biztime.api.models.invoice_model import Invoice

logger = logging.getLogger(__name__)

SAMPLE_COMPANIES = [
    {"code": "apple", "name": "Apple", "description": "Maker of OSX."},
    {"code": "ibm", "name": "IBM", "description": "Big blue."},
]

# (comp_code, amt, paid)
SAMPLE_INVOICES = [
    ("apple", 100, False),
    ("apple", 200, True),
    ("apple", 300, False),
    ("ibm", 400, False),
]


def seed_sample_data(db: Session) -> None:
    """Wipe both tables and load the sample rows."""
    db.query(Invoice).delete()
    db.query(Company).delete()

    db.add_all(Company(**row) for row in SAMPLE_COMPANIES)
    db.flush()

    for comp_code, amt, paid in SAMPLE_INVOICES:
        db.add(
            Invoice(
                comp_code=comp_code,
                amt=amt,
                paid=paid,
                paid_date=func.now() if paid else None,
            )
        )

    db.commit()


def main():
    configure_logging()
    init_db()
    db = SessionLocal()
    try:
        seed_sample_data(db)
    finally:
        db.close()
    logger.info(
        "Seeded %d companies and %d invoices",
        len(SAMPLE_COMPANIES),
        len(SAMPLE_INVOICES),
    )


if __name__ == "__main__":
    main()
