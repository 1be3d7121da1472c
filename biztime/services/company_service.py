from sqlalchemy.ext.asyncio import AsyncSession
from biztime.core.auditing import AuditSpan
from biztime.domain.companies import crud
from biztime.domain.companies.models import Company
from biztime.domain.companies.schemas import CompanyCreateDTO, CompanyPutDTO, CompanyListItemDTO, CompanyDetailsDTO
from biztime.domain.exceptions import NotFound


async def get_company(db: AsyncSession, code: str) -> Company:
    company = await crud.get_company_by_code(db, code)
    if not company:
        raise NotFound("Company not found", ctx={"code": code})
    return company


async def get_company_details(db: AsyncSession, code: str) -> CompanyDetailsDTO:
    company = await get_company(db, code)
    return CompanyDetailsDTO.model_validate(company)


async def list_companies(db: AsyncSession) -> list[CompanyListItemDTO]:
    rows = await crud.list_all_companies(db)
    return [CompanyListItemDTO.model_validate(row) for row in rows]


async def create_company(db: AsyncSession, schema: CompanyCreateDTO) -> Company:
    data = schema.model_dump()
    async with AuditSpan(
        scope="COMPANIES",
        action="CREATE",
        object_type="company",
        object_id=schema.code,
        meta={"fields": list(data.keys())}
    ):
        company = await crud.create_company(db, data)
        await db.flush()
        return company


async def update_company(db: AsyncSession, schema: CompanyPutDTO, code: str) -> Company:
    data = schema.model_dump()
    async with AuditSpan(
        scope="COMPANIES",
        action="UPDATE",
        object_type="company",
        object_id=code,
        meta={"fields": list(data.keys())}
    ):
        company = await get_company(db, code)
        company = await crud.update_company(company, data)
        await db.flush()
        return company


async def delete_company(db: AsyncSession, code: str) -> None:
    async with AuditSpan(
        scope="COMPANIES",
        action="DELETE",
        object_type="company",
        object_id=code
    ):
        company = await get_company(db, code)
        await crud.delete_company(db, company)
        await db.flush()
