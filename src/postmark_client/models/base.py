"""
Base models with Postmark wire naming.

Postmark uses PascalCase JSON fields (``MessageStream``, ``TrackOpens``)
with a handful of upper-case acronyms (``ID``, ``MessageID``,
``DKIMVerified``) that get explicit aliases on the field. Python code uses
snake_case names; both spellings are accepted on input.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel, to_pascal


class PostmarkModel(BaseModel):
    """
    Base for request and response bodies.

    Unknown fields are kept (``extra="allow"``) so newer API fields survive
    a parse / serialize round trip.

    Example:
        >>> server = Server.model_validate({"ID": 42, "Name": "x"})
        >>> server.id, server.name
        (42, 'x')
        >>> server.to_wire()
        {'ID': 42, 'Name': 'x'}
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready dict with wire names; unset optional fields are omitted."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class FilterModel(BaseModel):
    """
    Base for query-string filters.

    Filters are mutable on purpose: pagination defaults are filled in
    place on a per-call copy. Query keys are camelCase unless a field
    declares its own alias (Postmark mixes ``fromdate`` and ``emailFilter``).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_query(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class DefaultResponse(PostmarkModel):
    """``{ErrorCode, Message}`` body returned by delete and action endpoints."""
    error_code: int = 0
    message: str = ""
