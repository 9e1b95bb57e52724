"""Base schema with camelCase wire names."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base model for request and response bodies.

    Fields are declared in snake_case and exchanged as camelCase JSON
    (e.g. usage_count <-> usageCount). Requests may use either spelling.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
