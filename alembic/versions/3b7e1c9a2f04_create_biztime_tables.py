"""create companies, invoices, industries tables

Revision ID: 3b7e1c9a2f04
Revises:
Create Date: 2026-10-19 10:12:31.418220

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b7e1c9a2f04'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("code", sa.Text(), primary_key=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )
    op.create_table(
        "invoices",
        sa.Column("id", sa.Integer(), sa.Identity(always=True), primary_key=True, nullable=False),
        sa.Column("comp_code", sa.Text(), sa.ForeignKey("companies.code", ondelete="CASCADE"), nullable=False),
        sa.Column("amt", sa.Float(), nullable=False),
        sa.Column("paid", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("add_date", sa.Date(), server_default=sa.text("CURRENT_DATE"), nullable=False),
        sa.Column("paid_date", sa.Date(), nullable=True),
        sa.CheckConstraint("amt > 0", name="ck_invoices_amt_positive"),
        sa.CheckConstraint(
            "(paid AND paid_date IS NOT NULL) OR (NOT paid AND paid_date IS NULL)",
            name="ck_invoices_paid_date_matches_paid"
        ),
    )
    op.create_index("ix_invoices_comp_code", "invoices", ["comp_code"])
    op.create_table(
        "industries",
        sa.Column("code", sa.Text(), primary_key=True, nullable=False),
        sa.Column("industry", sa.Text(), nullable=False),
    )
    op.create_table(
        "companies_industries",
        sa.Column("id", sa.Integer(), sa.Identity(always=True), primary_key=True, nullable=False),
        sa.Column("comp_code", sa.Text(), sa.ForeignKey("companies.code", ondelete="CASCADE"), nullable=False),
        sa.Column("ind_code", sa.Text(), sa.ForeignKey("industries.code", ondelete="CASCADE"), nullable=False),
        sa.UniqueConstraint("comp_code", "ind_code", name="uq_companies_industries_pair"),
    )


def downgrade() -> None:
    op.drop_table("companies_industries")
    op.drop_table("industries")
    op.drop_index("ix_invoices_comp_code", table_name="invoices")
    op.drop_table("invoices")
    op.drop_table("companies")
