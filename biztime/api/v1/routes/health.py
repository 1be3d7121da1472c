from fastapi import APIRouter, status
from biztime.domain.schemas import HealthDTO


router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthDTO)
async def health():
    return HealthDTO()
