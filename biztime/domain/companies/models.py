from sqlalchemy.orm import mapped_column, Mapped, relationship
from sqlalchemy import Text
from biztime.core.database import Base
from biztime.domain.associations import companies_industries


class Company(Base):
    __tablename__ = "companies"

    code: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    invoices: Mapped[list['Invoice']] = relationship(
        back_populates="company",
        lazy="selectin",
        order_by="Invoice.id",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    industries: Mapped[list['Industry']] = relationship(
        secondary=companies_industries,
        order_by=companies_industries.c.id,
        lazy="selectin",
        viewonly=True
    )
