from sqlalchemy import select, Row
from sqlalchemy.ext.asyncio import AsyncSession
from .models import Invoice


async def get_invoice_by_id(db: AsyncSession, invoice_id: int) -> Invoice | None:
    stmt = select(Invoice).where(Invoice.id == invoice_id)
    result = await db.execute(stmt)
    return result.scalars().first()


async def list_all_invoices(db: AsyncSession) -> list[Row]:
    stmt = select(Invoice.id, Invoice.comp_code).order_by(Invoice.id)
    result = await db.execute(stmt)
    return list(result.all())


async def create_invoice(db: AsyncSession, data: dict) -> Invoice:
    invoice = Invoice(**data)
    db.add(invoice)
    return invoice


async def update_invoice(invoice: Invoice, data: dict) -> Invoice:
    for k, v in data.items():
        setattr(invoice, k, v)
    return invoice


async def delete_invoice(db: AsyncSession, invoice: Invoice) -> None:
    await db.delete(invoice)
