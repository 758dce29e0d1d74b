from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class Entity(BaseModel):
    """Base class for domain entities and request payloads.

    Incoming keys are matched to field names case-insensitively, so
    ``{"Title": ...}`` and ``{"title": ...}`` bind the same field.
    """

    model_config = ConfigDict(from_attributes=True)

    @model_validator(mode="before")
    @classmethod
    def _fold_field_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        names = {name.lower(): name for name in cls.model_fields}
        folded: dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(key, str):
                key = names.get(key.lower(), key)
            folded.setdefault(key, value)
        return folded


# Largest value an integer primary key column holds on every supported backend
MAX_ID = 2**31 - 1


def is_storable_id(value: int | None) -> bool:
    """Whether ``value`` can name a stored row; anything else is simply absent."""
    return value is not None and 0 < value <= MAX_ID
