from datetime import date
from sqlalchemy.orm import mapped_column, Mapped, relationship
from sqlalchemy import Identity, Text, ForeignKey, Boolean, Date, Float, CheckConstraint, func, text
from biztime.core.database import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id: Mapped[int] = mapped_column(Identity(always=True), primary_key=True)
    comp_code: Mapped[str] = mapped_column(Text,
                                           ForeignKey("companies.code", ondelete="CASCADE"),
                                           nullable=False,
                                           index=True)
    amt: Mapped[float] = mapped_column(Float, nullable=False)
    paid: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
    add_date: Mapped[date] = mapped_column(Date, nullable=False, server_default=func.current_date())
    paid_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    __table_args__ = (
        CheckConstraint("amt > 0", name="ck_invoices_amt_positive"),
        CheckConstraint(
            "(paid AND paid_date IS NOT NULL) OR (NOT paid AND paid_date IS NULL)",
            name="ck_invoices_paid_date_matches_paid"
        ),
    )

    company: Mapped['Company'] = relationship(back_populates="invoices", lazy="selectin")
