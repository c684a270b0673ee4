from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from biztime.api.core.db import Base


class Company(Base):
    __tablename__ = "companies"

    # Slug of the name at creation time; never rewritten
    code = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)

    # Relationship: one-to-many (companies → invoices).
    # Rows go away through ON DELETE CASCADE in the store.
    invoices = relationship(
        "Invoice",
        back_populates="company",
        order_by="Invoice.id",
        passive_deletes=True,
    )
