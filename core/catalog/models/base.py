# core/catalog/models/base.py
from typing import Any, Dict
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CatalogRecord(BaseModel):
    """Base class for stored rows.

    Rows are immutable; an update produces a new instance. Attributes are
    snake_case in Python and camelCase on the wire.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation, with unset optional attributes omitted"""
        return self.model_dump(by_alias=True, exclude_none=True)


class PartialUpdate(BaseModel):
    """Base class for typed partial updates.

    Only the fields explicitly set on an instance are applied to the stored
    row. Update models never carry an id.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)
