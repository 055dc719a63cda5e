"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialised with camelCase keys.

    Requests accept either camelCase or snake_case field names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CoordinatesSchema(CamelModel):
    """A cell on the floor grid.

    Non-integer or negative values are accepted here and rejected by the
    domain with a specific message.
    """

    x: int | float = Field(..., description="Column index")
    y: int | float = Field(..., description="Row index")
