from sqlalchemy import select, insert
from sqlalchemy.ext.asyncio import AsyncSession
from biztime.domain.associations import companies_industries
from biztime.domain.companies.models import Company
from .models import Industry


async def list_industry_company_names(db: AsyncSession) -> list[tuple[str, str | None]]:
    stmt = (
        select(Industry.industry, Company.name)
        .select_from(Industry)
        .outerjoin(companies_industries, companies_industries.c.ind_code == Industry.code)
        .outerjoin(Company, Company.code == companies_industries.c.comp_code)
        .order_by(Industry.code, companies_industries.c.id)
    )
    result = await db.execute(stmt)
    return list(result.tuples())


async def create_industry(db: AsyncSession, data: dict) -> Industry:
    industry = Industry(**data)
    db.add(industry)
    return industry


async def get_association_id(db: AsyncSession, comp_code: str, ind_code: str) -> int | None:
    stmt = select(companies_industries.c.id).where(
        companies_industries.c.comp_code == comp_code,
        companies_industries.c.ind_code == ind_code
    )
    return await db.scalar(stmt)


async def create_association(db: AsyncSession, comp_code: str, ind_code: str) -> None:
    stmt = insert(companies_industries).values(comp_code=comp_code, ind_code=ind_code)
    await db.execute(stmt)
