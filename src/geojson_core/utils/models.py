from enum import StrEnum
from typing import Any

from pydantic import BaseModel, model_validator


class CIStrEnum(StrEnum):
    """Case-insensitive string enumeration."""

    def __str__(self):
        """Normalize on output."""
        return self.value.lower()

    @classmethod
    def _missing_(cls, value):
        """Normalize on input."""
        if isinstance(value, str):
            value = value.lower()
            for member in cls:
                if member.value.lower() == value:
                    return member
        return None


class CIBaseModel(BaseModel):
    """Pydantic base model that matches input keys to field names without
    regard to case, so that `[Polygon]` and `Min_Points = ...` in a TOML file
    work as well as their lower-case spellings. Nested sections that are
    themselves `CIBaseModel`s normalize their own keys when validated."""

    @model_validator(mode='before')
    @classmethod
    def normalize_keys(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        field_map = {f.lower(): f for f in cls.model_fields}
        return {field_map.get(k.lower(), k): v for k, v in values.items()}
