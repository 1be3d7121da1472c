from sqlalchemy import Table, Column, ForeignKey, Identity, Integer, Text, UniqueConstraint
from biztime.core.database import Base


companies_industries = Table(
    "companies_industries",
    Base.metadata,
    Column("id", Integer, Identity(always=True), primary_key=True),
    Column("comp_code", Text, ForeignKey("companies.code", ondelete="CASCADE"), nullable=False),
    Column("ind_code", Text, ForeignKey("industries.code", ondelete="CASCADE"), nullable=False),
    UniqueConstraint("comp_code", "ind_code", name="uq_companies_industries_pair"),
)
