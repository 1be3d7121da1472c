from fastapi import APIRouter, status, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from biztime.core.database import get_db
from biztime.services import company_service
from biztime.domain.schemas import StatusDTO
from biztime.domain.companies.schemas import CompanyCreateDTO, CompanyPutDTO, CompanyReadDTO, \
    CompaniesEnvelopeDTO, CompanyEnvelopeDTO, CompanyDetailsEnvelopeDTO
from typing import Annotated


router = APIRouter(prefix="/companies", tags=["companies"])
db_dependency = Annotated[AsyncSession, Depends(get_db)]


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=CompaniesEnvelopeDTO
)
async def list_companies(db: db_dependency):
    companies = await company_service.list_companies(db)
    return CompaniesEnvelopeDTO(companies=companies)


@router.get(
    "/{code}",
    status_code=status.HTTP_200_OK,
    response_model=CompanyDetailsEnvelopeDTO
)
async def get_company(code: str, db: db_dependency):
    company = await company_service.get_company_details(db, code)
    return CompanyDetailsEnvelopeDTO(company=company)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CompanyEnvelopeDTO
)
async def create_company(schema: CompanyCreateDTO, db: db_dependency, response: Response):
    company = await company_service.create_company(db, schema)
    response.headers["Location"] = f"{router.prefix}/{company.code}"
    return CompanyEnvelopeDTO(company=CompanyReadDTO.model_validate(company))


@router.put(
    "/{code}",
    status_code=status.HTTP_200_OK,
    response_model=CompanyEnvelopeDTO
)
async def update_company(code: str, schema: CompanyPutDTO, db: db_dependency):
    company = await company_service.update_company(db, schema, code)
    return CompanyEnvelopeDTO(company=CompanyReadDTO.model_validate(company))


@router.delete(
    "/{code}",
    status_code=status.HTTP_200_OK,
    response_model=StatusDTO
)
async def delete_company(code: str, db: db_dependency):
    await company_service.delete_company(db, code)
    return StatusDTO(status="deleted")
