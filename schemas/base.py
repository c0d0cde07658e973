"""Shared base models for request/response validation."""

from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, StringConstraints, model_validator
from pydantic.alias_generators import to_camel

TrimmedText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire and in MongoDB."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> Dict[str, Any]:
        """Dump to a plain document, dropping optional fields left empty."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class PartialUpdate(CamelModel):
    """Body of a PATCH request: only the fields the client sent are applied.

    Omitting a field leaves it untouched; sending it as null is rejected.
    """

    @model_validator(mode="after")
    def _reject_explicit_nulls(self):
        fields = type(self).model_fields
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                alias = fields[name].alias or name
                raise ValueError(f"{alias} must not be null")
        return self

    def changes(self) -> Dict[str, Any]:
        """Explicitly supplied fields, keyed by their stored (camelCase) name."""
        return self.model_dump(by_alias=True, mode="json", include=set(self.model_fields_set))
