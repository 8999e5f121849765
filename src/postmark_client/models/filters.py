"""
Query filters for list and statistics endpoints.

Paginated filters carry optional ``count``/``offset``; the client fills
unset values on a per-call copy (see ``core.pagination``).
"""

from datetime import date
from typing import Optional, Union

from pydantic import Field

from .base import FilterModel

DateLike = Union[date, str]


class FilteringParameters(FilterModel):
    """count/offset paging for list endpoints."""
    count: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)


class ServerFilteringParameters(FilteringParameters):
    name: Optional[str] = None


class BounceFilteringParameters(FilteringParameters):
    type: Optional[str] = None
    inactive: Optional[bool] = None
    email_filter: Optional[str] = None
    tag: Optional[str] = None
    message_id: Optional[str] = Field(default=None, alias="messageID")
    from_date: Optional[DateLike] = Field(default=None, alias="fromdate")
    to_date: Optional[DateLike] = Field(default=None, alias="todate")
    message_stream: Optional[str] = Field(default=None, alias="messagestream")


class TemplateFilteringParameters(FilteringParameters):
    template_type: Optional[str] = None
    layout_template: Optional[str] = None


class OutboundMessagesFilteringParameters(FilteringParameters):
    recipient: Optional[str] = None
    from_email: Optional[str] = None
    tag: Optional[str] = None
    status: Optional[str] = None
    subject: Optional[str] = None
    from_date: Optional[DateLike] = Field(default=None, alias="fromdate")
    to_date: Optional[DateLike] = Field(default=None, alias="todate")
    message_stream: Optional[str] = Field(default=None, alias="messagestream")


class InboundMessagesFilteringParameters(FilteringParameters):
    recipient: Optional[str] = None
    from_email: Optional[str] = None
    tag: Optional[str] = None
    subject: Optional[str] = None
    mailbox_hash: Optional[str] = None
    status: Optional[str] = None
    from_date: Optional[DateLike] = Field(default=None, alias="fromdate")
    to_date: Optional[DateLike] = Field(default=None, alias="todate")


class _TrackingFilteringParameters(FilteringParameters):
    """Shared filters of the opens and clicks endpoints (snake_case on the wire)."""
    recipient: Optional[str] = None
    tag: Optional[str] = None
    client_name: Optional[str] = Field(default=None, alias="client_name")
    client_company: Optional[str] = Field(default=None, alias="client_company")
    client_family: Optional[str] = Field(default=None, alias="client_family")
    os_name: Optional[str] = Field(default=None, alias="os_name")
    os_family: Optional[str] = Field(default=None, alias="os_family")
    os_company: Optional[str] = Field(default=None, alias="os_company")
    platform: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None
    city: Optional[str] = None
    message_stream: Optional[str] = Field(default=None, alias="messagestream")


class OutboundMessageOpensFilteringParameters(_TrackingFilteringParameters):
    pass


class OutboundMessageClicksFilteringParameters(_TrackingFilteringParameters):
    pass


class StatisticsFilteringParameters(FilterModel):
    """Date range / tag / stream filter of the stats endpoints; not paginated."""
    tag: Optional[str] = None
    from_date: Optional[DateLike] = Field(default=None, alias="fromdate")
    to_date: Optional[DateLike] = Field(default=None, alias="todate")
    message_stream: Optional[str] = Field(default=None, alias="messagestream")


class WebhookFilteringParameters(FilterModel):
    message_stream: Optional[str] = None


class MessageStreamsFilteringParameters(FilterModel):
    message_stream_type: Optional[str] = None
    include_archived_streams: Optional[bool] = None
