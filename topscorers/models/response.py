from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal

class ScoreResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias='firstName')
    second_name: str = Field(..., alias='secondName')
    score: int

class PersonNameResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias='firstName')
    second_name: str = Field(..., alias='secondName')

class TopScoresResponse(BaseModel):
    score: int
    people: List[PersonNameResponse]

class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Literal["healthy"] = "healthy"
    uptime: float
    store: Literal["postgres", "memory"]
    store_ready: bool = Field(..., alias='storeReady')
