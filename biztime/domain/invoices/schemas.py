from datetime import date
from typing import Annotated
from pydantic import BaseModel, Field, ConfigDict, StrictBool, PlainSerializer
from biztime.domain.companies.schemas import CompanyReadDTO


def _whole_as_int(value: float) -> float | int:
    return int(value) if value.is_integer() else value


# Whole amounts go out as 100, not 100.0.
Amount = Annotated[float, PlainSerializer(_whole_as_int, when_used="json")]


class InvoiceCreateDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    comp_code: str = Field(min_length=1, max_length=50)
    amt: float = Field(gt=0)


class InvoicePutDTO(BaseModel):
    amt: float = Field(gt=0)
    paid: StrictBool


class InvoiceListItemDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    comp_code: str


class InvoiceReadDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    comp_code: str
    amt: Amount
    paid: bool
    add_date: date
    paid_date: date | None


class InvoiceDetailsDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    amt: Amount
    paid: bool
    add_date: date
    paid_date: date | None
    company: CompanyReadDTO


class InvoicesEnvelopeDTO(BaseModel):
    invoices: list[InvoiceListItemDTO]


class InvoiceEnvelopeDTO(BaseModel):
    invoice: InvoiceReadDTO


class InvoiceDetailsEnvelopeDTO(BaseModel):
    invoice: InvoiceDetailsDTO
