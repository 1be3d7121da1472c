from fastapi import APIRouter, status, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from biztime.core.database import get_db
from biztime.services import invoice_service
from biztime.domain.schemas import StatusDTO
from biztime.domain.invoices.schemas import InvoiceCreateDTO, InvoicePutDTO, InvoiceReadDTO, InvoiceDetailsDTO, \
    InvoicesEnvelopeDTO, InvoiceEnvelopeDTO, InvoiceDetailsEnvelopeDTO
from typing import Annotated


router = APIRouter(prefix="/invoices", tags=["invoices"])
db_dependency = Annotated[AsyncSession, Depends(get_db)]


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=InvoicesEnvelopeDTO
)
async def list_invoices(db: db_dependency):
    invoices = await invoice_service.list_invoices(db)
    return InvoicesEnvelopeDTO(invoices=invoices)


@router.get(
    "/{invoice_id}",
    status_code=status.HTTP_200_OK,
    response_model=InvoiceDetailsEnvelopeDTO
)
async def get_invoice(invoice_id: int, db: db_dependency):
    invoice = await invoice_service.get_invoice(db, invoice_id)
    return InvoiceDetailsEnvelopeDTO(invoice=InvoiceDetailsDTO.model_validate(invoice))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=InvoiceEnvelopeDTO
)
async def create_invoice(schema: InvoiceCreateDTO, db: db_dependency, response: Response):
    invoice = await invoice_service.create_invoice(db, schema)
    response.headers["Location"] = f"{router.prefix}/{invoice.id}"
    return InvoiceEnvelopeDTO(invoice=InvoiceReadDTO.model_validate(invoice))


@router.put(
    "/{invoice_id}",
    status_code=status.HTTP_200_OK,
    response_model=InvoiceEnvelopeDTO
)
async def update_invoice(invoice_id: int, schema: InvoicePutDTO, db: db_dependency):
    invoice = await invoice_service.update_invoice(db, schema, invoice_id)
    return InvoiceEnvelopeDTO(invoice=InvoiceReadDTO.model_validate(invoice))


@router.delete(
    "/{invoice_id}",
    status_code=status.HTTP_200_OK,
    response_model=StatusDTO
)
async def delete_invoice(invoice_id: int, db: db_dependency):
    await invoice_service.delete_invoice(db, invoice_id)
    return StatusDTO(status="deleted")
