from sqlalchemy import select, Row
from sqlalchemy.ext.asyncio import AsyncSession
from .models import Company


async def get_company_by_code(db: AsyncSession, code: str) -> Company | None:
    stmt = select(Company).where(Company.code == code)
    result = await db.execute(stmt)
    return result.scalars().first()


async def list_all_companies(db: AsyncSession) -> list[Row]:
    stmt = select(Company.code, Company.name).order_by(Company.code)
    result = await db.execute(stmt)
    return list(result.all())


async def create_company(db: AsyncSession, data: dict) -> Company:
    company = Company(**data)
    db.add(company)
    return company


async def update_company(company: Company, data: dict) -> Company:
    for k, v in data.items():
        setattr(company, k, v)
    return company


async def delete_company(db: AsyncSession, company: Company) -> None:
    await db.delete(company)
