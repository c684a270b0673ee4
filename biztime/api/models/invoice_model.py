from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression, func
from biztime.api.core.db import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, autoincrement=True)

    comp_code = Column(
        String,
        ForeignKey("companies.code", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    amt = Column(Float, nullable=False)

    # --- Payment state ---
    # paid_date is set on the transition into paid and cleared on the way out
    paid = Column(Boolean, nullable=False, default=False, server_default=expression.false())
    paid_date = Column(DateTime, nullable=True)

    # --- Timestamps ---
    add_date = Column(DateTime, nullable=False, server_default=func.now())

    # Relationship back to the company
    company = relationship("Company", back_populates="invoices")
