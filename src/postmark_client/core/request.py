"""
Request descriptors and declarative routes.

A ``Route`` is a static entry of a façade table: verb, path template,
response type and, for list endpoints, the filter type and its default
instance factory. A ``RequestDescriptor`` is the frozen per-call request
built from a route; the retry layer resends it unchanged.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Tuple, Type
from urllib.parse import quote


class HttpMethod(str, Enum):
    """HTTP verbs used by the Postmark API."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def has_body(self) -> bool:
        """POST/PUT/PATCH send a JSON body; GET/DELETE send query params."""
        return self in (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)


@dataclass(frozen=True)
class Credential:
    """API token plus the header it travels in."""
    token: str
    header_name: str

    def as_header(self) -> Tuple[str, str]:
        return self.header_name, self.token

    def __repr__(self) -> str:
        return f"Credential(header_name={self.header_name!r}, token='***')"


def _freeze_payload(payload: Any) -> Any:
    if payload is None:
        return MappingProxyType({})
    if isinstance(payload, dict):
        return MappingProxyType(dict(payload))
    if isinstance(payload, list):
        return tuple(payload)
    return payload


@dataclass(frozen=True)
class RequestDescriptor:
    """
    One API request, ready to be executed.

    Args:
        method: HTTP verb
        path: Path relative to the base URL (identifier already embedded)
        payload: Query params (GET/DELETE) or JSON body (POST/PUT/PATCH);
            a mapping, or a sequence for batch endpoints
        credential: Token and header name of the owning client
    """
    method: HttpMethod
    path: str
    credential: Credential
    payload: Any = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        object.__setattr__(self, 'method', HttpMethod(self.method))
        if not self.path:
            raise ValueError("path must not be empty")
        object.__setattr__(self, 'payload', _freeze_payload(self.payload))
        if not self.method.has_body and not isinstance(self.payload, Mapping):
            raise ValueError(f"{self.method.value} payload must be a mapping of query parameters")

    def query_params(self) -> Optional[dict]:
        """Query parameters for GET/DELETE, None values dropped and booleans lowercased."""
        if self.method.has_body:
            return None
        params = {}
        for key, value in self.payload.items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            params[key] = value
        return params

    def json_body(self) -> Any:
        """JSON body for POST/PUT/PATCH (plain dict/list copy of the frozen payload)."""
        if not self.method.has_body:
            return None
        if isinstance(self.payload, Mapping):
            return dict(self.payload)
        if isinstance(self.payload, tuple):
            return list(self.payload)
        return self.payload


@dataclass(frozen=True)
class Route:
    """
    Declarative binding of one API operation.

    Args:
        method: HTTP verb
        path: Path template, at most one ``{id}`` placeholder
        response_type: Model class (or ``List[Model]``) the body is validated into
        filter_type: Filter model for list endpoints (query payload)
        paginated: Apply count/offset defaults to the filter
        default_filter: Factory for the per-call default filter instance
    """
    method: HttpMethod
    path: str
    response_type: Any
    filter_type: Optional[Type] = None
    paginated: bool = False
    default_filter: Optional[Callable[[], Any]] = None

    def build_path(self, identifier: Any = None) -> str:
        """Fill ``{id}``; identifiers are URL-quoted so aliases with spaces survive."""
        if "{id}" not in self.path:
            return self.path
        if identifier is None or identifier == "":
            raise ValueError(f"an identifier is required for {self.path}")
        return self.path.replace("{id}", quote(str(identifier), safe=""))

    def new_filter(self) -> Any:
        """Fresh default filter for this route (never shared between calls)."""
        if self.default_filter is not None:
            return self.default_filter()
        if self.filter_type is not None:
            return self.filter_type()
        return None
