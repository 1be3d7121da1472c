from pydantic import BaseModel, Field, ConfigDict


class IndustryCreateDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    code: str = Field(min_length=1, max_length=50, pattern=r"^[^/\s]+$")
    industry: str = Field(min_length=1, max_length=200)


class IndustryAssociateDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    comp_code: str = Field(min_length=1, max_length=50)


class IndustryReadDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    industry: str


class IndustryCompaniesDTO(BaseModel):
    industry: str
    companies: list[str] | None = None


class IndustriesEnvelopeDTO(BaseModel):
    industries: list[IndustryCompaniesDTO]


class IndustryEnvelopeDTO(BaseModel):
    industry: IndustryReadDTO
