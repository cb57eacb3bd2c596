# --- Pydantic Models ---
from pydantic import BaseModel, ConfigDict, Field, field_validator

class ScoreRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias='firstName', min_length=1, max_length=100)
    second_name: str = Field(..., alias='secondName', min_length=1, max_length=200)
    score: int = Field(..., ge=0)

    @field_validator('first_name', 'second_name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Name cannot be empty or whitespace')
        return v.strip()
