from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from biztime.core.auditing import AuditSpan
from biztime.domain.invoices import crud
from biztime.domain.invoices.models import Invoice
from biztime.domain.invoices.schemas import InvoiceCreateDTO, InvoicePutDTO, InvoiceListItemDTO
from biztime.domain.exceptions import NotFound


def payment_changes(current_paid: bool, requested_paid: bool, today: date) -> dict:
    """
    Columns to write besides ``amt`` when an invoice is updated.

    Re-sending the current ``paid`` value changes nothing, so ``paid_date`` is only
    stamped on an unpaid -> paid transition and only cleared on paid -> unpaid.
    """
    if requested_paid == current_paid:
        return {}
    if requested_paid:
        return {"paid": True, "paid_date": today}
    return {"paid": False, "paid_date": None}


async def get_invoice(db: AsyncSession, invoice_id: int) -> Invoice:
    invoice = await crud.get_invoice_by_id(db, invoice_id)
    if not invoice:
        raise NotFound("Invoice not found", ctx={"invoice_id": invoice_id})
    return invoice


async def list_invoices(db: AsyncSession) -> list[InvoiceListItemDTO]:
    rows = await crud.list_all_invoices(db)
    return [InvoiceListItemDTO.model_validate(row) for row in rows]


async def create_invoice(db: AsyncSession, schema: InvoiceCreateDTO) -> Invoice:
    data = schema.model_dump()
    async with AuditSpan(
        scope="INVOICES",
        action="CREATE",
        object_type="invoice",
        meta={"comp_code": schema.comp_code}
    ) as span:
        invoice = await crud.create_invoice(db, data)
        await db.flush()
        await db.refresh(invoice)
        span.object_id = invoice.id
        return invoice


async def update_invoice(db: AsyncSession, schema: InvoicePutDTO, invoice_id: int) -> Invoice:
    async with AuditSpan(
        scope="INVOICES",
        action="UPDATE",
        object_type="invoice",
        object_id=invoice_id
    ) as span:
        invoice = await get_invoice(db, invoice_id)
        changes = payment_changes(invoice.paid, schema.paid, date.today())
        span.meta["paid_transition"] = f"{invoice.paid}->{schema.paid}" if changes else None
        data = {"amt": schema.amt, **changes}
        invoice = await crud.update_invoice(invoice, data)
        await db.flush()
        return invoice


async def delete_invoice(db: AsyncSession, invoice_id: int) -> None:
    async with AuditSpan(
        scope="INVOICES",
        action="DELETE",
        object_type="invoice",
        object_id=invoice_id
    ):
        invoice = await get_invoice(db, invoice_id)
        await crud.delete_invoice(db, invoice)
        await db.flush()
