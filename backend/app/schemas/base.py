"""
Base schema for API payloads.

Python attributes stay snake_case; JSON uses camelCase field names
(totalAscents, elevationGain, ...) which other components rely on.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """BaseModel with camelCase aliases, readable from ORM rows and dataclasses."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
