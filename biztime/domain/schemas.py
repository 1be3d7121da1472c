from typing import Literal
from pydantic import BaseModel


class StatusDTO(BaseModel):
    status: Literal["deleted", "success"]


class HealthDTO(BaseModel):
    status: Literal["ok"] = "ok"
