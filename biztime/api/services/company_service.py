from __future__ import annotations

import logging
import re
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from biztime.api.core.exceptions import ConflictError, NotFoundError, ValidationError
from biztime.api.models.company_model import Company

logger = logging.getLogger(__name__)


def slugify(name: str) -> str:
    """
    Company code for a display name: lower-cased, every run of
    non-alphanumerics collapsed into one hyphen.
    "Apple Computer" -> "apple-computer"
    """
    value = (name or "").strip().lower()
    value = re.sub(r"[^a-z0-9]+", "-", value)
    value = value.strip("-")
    if not value:
        raise ValidationError(f"Cannot derive a company code from name {name!r}")
    return value


class CompanyDirectory:
    """CRUD over companies. Codes are slugs derived once, on create."""

    def __init__(self, db: Session):
        self.db = db

    def list(self) -> List[Company]:
        return self.db.query(Company).order_by(Company.name).all()

    def get(self, code: str) -> Company:
        company = (
            self.db.query(Company)
            .options(selectinload(Company.invoices))
            .filter(Company.code == code)
            .first()
        )
        if company is None:
            raise NotFoundError(f"Can't find company with code of {code}")
        return company

    def create(self, name: str, description: Optional[str] = None) -> Company:
        code = slugify(name)
        if self.db.get(Company, code) is not None:
            logger.warning("Rejected company %r: code %r is taken", name, code)
            raise ConflictError(f"Company with code {code} already exists")

        company = Company(code=code, name=name, description=description)
        self.db.add(company)
        try:
            self.db.commit()
        except IntegrityError:
            # lost a race with another insert of the same code
            self.db.rollback()
            logger.warning("Rejected company %r: code %r is taken", name, code)
            raise ConflictError(f"Company with code {code} already exists")

        self.db.refresh(company)
        logger.info("Created company %s", code)
        return company

    def update(
        self,
        code: str,
        name: Optional[str],
        description: Optional[str],
    ) -> Company:
        company = self.db.query(Company).filter(Company.code == code).first()
        if company is None:
            raise NotFoundError(f"Cannot find company with code {code}")

        missing = [
            field
            for field, value in (("name", name), ("description", description))
            if value is None
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        company.name = name
        company.description = description
        self.db.commit()
        self.db.refresh(company)
        logger.info("Updated company %s", code)
        return company

    def delete(self, code: str) -> dict:
        # Single statement; dependent invoices go with it via ON DELETE CASCADE
        deleted = (
            self.db.query(Company)
            .filter(Company.code == code)
            .delete()
        )
        if not deleted:
            raise NotFoundError(f"Cannot find company with code {code}")

        self.db.commit()
        logger.info("Deleted company %s", code)
        return {"status": "deleted"}
