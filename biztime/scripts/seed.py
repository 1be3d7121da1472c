import asyncio
from sqlalchemy.ext.asyncio import AsyncSession
from biztime.core.database import AsyncSessionLocal, dispose_engine
from biztime.domain import Company, Invoice, Industry
from biztime.domain.companies.crud import get_company_by_code
from biztime.domain.industries import crud as industries_crud


COMPANIES = [
    {"code": "apple", "name": "Apple Computer", "description": "Maker of OSX."},
    {"code": "ibm", "name": "IBM", "description": "Big blue."},
]

INVOICES = [
    {"comp_code": "apple", "amt": 100},
    {"comp_code": "apple", "amt": 200},
    {"comp_code": "apple", "amt": 300},
    {"comp_code": "ibm", "amt": 400},
]

INDUSTRIES = [
    {"code": "acct", "industry": "Accounting"},
    {"code": "tech", "industry": "Technology"},
    {"code": "hw", "industry": "Hardware"},
]

ASSOCIATIONS = [("apple", "tech"), ("apple", "hw"), ("ibm", "tech")]


async def seed(db: AsyncSession) -> int:
    created = 0
    for data in COMPANIES:
        if await get_company_by_code(db, data["code"]):
            continue
        db.add(Company(**data))
        db.add_all(Invoice(**inv) for inv in INVOICES if inv["comp_code"] == data["code"])
        created += 1

    for data in INDUSTRIES:
        if await db.get(Industry, data["code"]) is None:
            db.add(Industry(**data))
    await db.flush()

    for comp_code, ind_code in ASSOCIATIONS:
        if await industries_crud.get_association_id(db, comp_code, ind_code) is None:
            await industries_crud.create_association(db, comp_code, ind_code)
    await db.flush()
    return created


async def main():
    async with AsyncSessionLocal() as db:
        created = await seed(db)
        await db.commit()
    await dispose_engine()
    print(f"Seed OK: {created} new companies")


if __name__ == "__main__":
    asyncio.run(main())
