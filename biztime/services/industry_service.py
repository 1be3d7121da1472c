from typing import Iterable
from sqlalchemy.ext.asyncio import AsyncSession
from biztime.core.auditing import AuditSpan
from biztime.domain.industries import crud
from biztime.domain.industries.models import Industry
from biztime.domain.industries.schemas import IndustryCreateDTO, IndustryAssociateDTO, IndustryCompaniesDTO
from biztime.domain.exceptions import InvalidInput


def group_companies_by_industry(rows: Iterable[tuple[str, str | None]]) -> list[IndustryCompaniesDTO]:
    grouped: dict[str, list[str]] = {}
    for industry, company_name in rows:
        names = grouped.setdefault(industry, [])
        # outer join yields a NULL company for industries nobody is linked to
        if company_name is not None:
            names.append(company_name)
    return [
        IndustryCompaniesDTO(industry=industry, companies=names or None)
        for industry, names in grouped.items()
    ]


async def list_industries(db: AsyncSession) -> list[IndustryCompaniesDTO]:
    rows = await crud.list_industry_company_names(db)
    return group_companies_by_industry(rows)


async def create_industry(db: AsyncSession, schema: IndustryCreateDTO) -> Industry:
    data = schema.model_dump()
    async with AuditSpan(
        scope="INDUSTRIES",
        action="CREATE",
        object_type="industry",
        object_id=schema.code,
        meta={"fields": list(data.keys())}
    ):
        industry = await crud.create_industry(db, data)
        await db.flush()
        return industry


async def associate_company(db: AsyncSession, ind_code: str, schema: IndustryAssociateDTO) -> None:
    # TODO: replace the pre-check with INSERT .. ON CONFLICT DO NOTHING on uq_companies_industries_pair
    async with AuditSpan(
        scope="INDUSTRIES",
        action="ASSOCIATE",
        object_type="industry",
        object_id=ind_code,
        meta={"comp_code": schema.comp_code}
    ):
        existing = await crud.get_association_id(db, schema.comp_code, ind_code)
        if existing is not None:
            raise InvalidInput(
                "Industry already associated with that company",
                ctx={"comp_code": schema.comp_code, "ind_code": ind_code}
            )
        await crud.create_association(db, schema.comp_code, ind_code)
        await db.flush()
