from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExtractedCity(BaseModel):
    """City found in a question; ``name`` is None when the question names none."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(None, description="City name, verbatim from the LLM")

    @field_validator("name")
    def empty_name_is_absent(cls, v):
        if v is not None and not v.strip():
            return None
        return v

    @property
    def is_absent(self) -> bool:
        return self.name is None
