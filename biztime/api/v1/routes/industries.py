from fastapi import APIRouter, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from biztime.core.database import get_db
from biztime.services import industry_service
from biztime.domain.schemas import StatusDTO
from biztime.domain.industries.schemas import IndustryCreateDTO, IndustryAssociateDTO, IndustryReadDTO, \
    IndustriesEnvelopeDTO, IndustryEnvelopeDTO
from typing import Annotated


router = APIRouter(prefix="/industries", tags=["industries"])
db_dependency = Annotated[AsyncSession, Depends(get_db)]


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=IndustriesEnvelopeDTO,
    response_model_exclude_none=True
)
async def list_industries(db: db_dependency):
    industries = await industry_service.list_industries(db)
    return IndustriesEnvelopeDTO(industries=industries)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=IndustryEnvelopeDTO
)
async def create_industry(schema: IndustryCreateDTO, db: db_dependency):
    industry = await industry_service.create_industry(db, schema)
    return IndustryEnvelopeDTO(industry=IndustryReadDTO.model_validate(industry))


@router.put(
    "/{code}",
    status_code=status.HTTP_200_OK,
    response_model=StatusDTO
)
async def associate_company(code: str, schema: IndustryAssociateDTO, db: db_dependency):
    await industry_service.associate_company(db, code, schema)
    return StatusDTO(status="success")
