"""Base DTO classes."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DTO(BaseModel):
    """Base class for application DTOs (camelCase on the wire)."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class InputDTO(DTO):
    """Base class for request bodies; unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")
