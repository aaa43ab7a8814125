"""
Pydantic schema definitions for API payloads.

Each domain (events, participants, login) defines its own request and
response models.  Field names are snake_case in Python and camelCase on
the wire; ``CamelModel`` configures the aliasing once for all of them.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising fields under camelCase aliases.

    Both the alias (``dateRange``) and the field name (``date_range``)
    are accepted on input.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
