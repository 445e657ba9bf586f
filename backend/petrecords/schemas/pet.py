"""Module: pet."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError

from petrecords.core.errors import ValidationError
from petrecords.services.names import split_owner_name
from petrecords.services.validation import is_present, is_valid_age, parse_int


# Body of POST /create and POST /edit/{id}.
class PetForm(BaseModel):
    pet_name: str
    age: int
    owner_name: str
    type_id: int

    @field_validator("pet_name", "owner_name", mode="before")
    @classmethod
    def _required_text(cls, value: Any, info: ValidationInfo) -> Any:
        if not is_present(value):
            raise ValueError(f"{info.field_name} is required")
        # Only the owner name is trimmed; it is split and matched against stored owners.
        if info.field_name == "owner_name" and isinstance(value, str):
            return value.strip()
        return value

    @field_validator("age", mode="before")
    @classmethod
    def _positive_age(cls, value: Any) -> int:
        if not is_valid_age(value):
            raise ValueError("age must be a positive integer")
        return parse_int(value)

    @field_validator("type_id", mode="before")
    @classmethod
    def _integer_type_id(cls, value: Any) -> int:
        type_id = parse_int(value)
        if type_id is None:
            raise ValueError("type_id must be an integer")
        return type_id

    @classmethod
    def parse(cls, **fields: Any) -> PetForm:
        try:
            return cls(**fields)
        except PydanticValidationError as exc:
            raise ValidationError() from exc

    @property
    def owner_names(self) -> tuple[str, str]:
        return split_owner_name(self.owner_name)


# Query string of GET /search. Blank terms mean "no filter".
class SearchParams(BaseModel):
    pet_name: str | None = None
    type_name: str | None = None

    @field_validator("pet_name", "type_name", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value
