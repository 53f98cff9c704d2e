"""
Shared pydantic configuration for Livy payloads.

The service speaks camelCase JSON; attributes are snake_case in Python and
either spelling is accepted on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LivyModel(BaseModel):
    """Response payload. Every field is optional: the service may omit any of them.

    Strict: a wrong-typed value (`"7"` for an int, `true` for a count) is a
    validation error, not a coercion. Decode from JSON text so enum tags
    still match by value.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, strict=True)


class LivyRequest(BaseModel):
    """Request body. Serialized with `exclude_none` so absent fields never appear as null."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_body(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
