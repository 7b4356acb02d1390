"""Shared base for ACADLY entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity; changes are made with ``model_copy(update=...)``.

    Surrounding whitespace is stripped from text fields before length
    constraints are checked.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)
