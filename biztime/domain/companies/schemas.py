from pydantic import BaseModel, Field, ConfigDict, field_validator


class CompanyPutDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=2000)


class CompanyCreateDTO(CompanyPutDTO):
    code: str = Field(min_length=1, max_length=50, pattern=r"^[^/\s]+$")


class CompanyListItemDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str


class CompanyReadDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    description: str | None


class CompanyDetailsDTO(CompanyReadDTO):
    invoices: list[int]
    industries: list[str]

    @field_validator("invoices", mode="before")
    @classmethod
    def invoice_ids(cls, value):
        return [getattr(invoice, "id", invoice) for invoice in value]

    @field_validator("industries", mode="before")
    @classmethod
    def industry_names(cls, value):
        return [getattr(industry, "industry", industry) for industry in value]


class CompaniesEnvelopeDTO(BaseModel):
    companies: list[CompanyListItemDTO]


class CompanyEnvelopeDTO(BaseModel):
    company: CompanyReadDTO


class CompanyDetailsEnvelopeDTO(BaseModel):
    company: CompanyDetailsDTO
