"""Outbound/inbound message activity, opens and clicks."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import PostmarkModel
from .messages import Attachment, Header


class Recipient(PostmarkModel):
    email: Optional[str] = None
    name: Optional[str] = None
    mailbox_hash: Optional[str] = None


class OutboundMessage(PostmarkModel):
    tag: Optional[str] = None
    message_id: Optional[str] = Field(default=None, alias="MessageID")
    message_stream: Optional[str] = None
    to: List[Recipient] = Field(default_factory=list)
    cc: List[Recipient] = Field(default_factory=list)
    bcc: List[Recipient] = Field(default_factory=list)
    recipients: List[str] = Field(default_factory=list)
    received_at: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="From")
    subject: Optional[str] = None
    attachments: List[Any] = Field(default_factory=list)
    status: Optional[str] = None
    track_opens: Optional[bool] = None
    track_links: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None


class OutboundMessages(PostmarkModel):
    total_count: int = 0
    messages: List[OutboundMessage] = Field(default_factory=list)


class MessageEvent(PostmarkModel):
    recipient: Optional[str] = None
    type: Optional[str] = None
    received_at: Optional[str] = None
    details: Optional[Dict[str, Any]] = None


class OutboundMessageDetails(OutboundMessage):
    text_body: Optional[str] = None
    html_body: Optional[str] = None
    body: Optional[str] = None
    message_events: List[MessageEvent] = Field(default_factory=list)


class OutboundMessageDump(PostmarkModel):
    body: Optional[str] = None


class InboundMessage(PostmarkModel):
    from_: Optional[str] = Field(default=None, alias="From")
    from_name: Optional[str] = None
    from_full: Optional[Recipient] = None
    to: Optional[str] = None
    to_full: List[Recipient] = Field(default_factory=list)
    cc: Optional[str] = None
    cc_full: List[Recipient] = Field(default_factory=list)
    reply_to: Optional[str] = None
    original_recipient: Optional[str] = None
    subject: Optional[str] = None
    date: Optional[str] = None
    mailbox_hash: Optional[str] = None
    tag: Optional[str] = None
    message_id: Optional[str] = Field(default=None, alias="MessageID")
    status: Optional[str] = None
    attachments: List[Attachment] = Field(default_factory=list)


class InboundMessages(PostmarkModel):
    total_count: int = 0
    inbound_messages: List[InboundMessage] = Field(default_factory=list)


class InboundMessageDetails(InboundMessage):
    text_body: Optional[str] = None
    html_body: Optional[str] = None
    stripped_text_reply: Optional[str] = None
    raw_email: Optional[str] = None
    headers: List[Header] = Field(default_factory=list)
    blocked_reason: Optional[str] = None


class _TrackingEvent(PostmarkModel):
    record_type: Optional[str] = None
    message_id: Optional[str] = Field(default=None, alias="MessageID")
    message_stream: Optional[str] = None
    recipient: Optional[str] = None
    tag: Optional[str] = None
    user_agent: Optional[str] = None
    client: Optional[Dict[str, Any]] = None
    os: Optional[Dict[str, Any]] = Field(default=None, alias="OS")
    platform: Optional[str] = None
    geo: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, str]] = None


class OutboundMessageOpen(_TrackingEvent):
    first_open: Optional[bool] = None
    received_at: Optional[str] = None
    read_seconds: Optional[int] = None


class OutboundMessageOpens(PostmarkModel):
    total_count: int = 0
    opens: List[OutboundMessageOpen] = Field(default_factory=list)


class OutboundMessageClick(_TrackingEvent):
    click_location: Optional[str] = None
    original_link: Optional[str] = None
    received_at: Optional[str] = None


class OutboundMessageClicks(PostmarkModel):
    total_count: int = 0
    clicks: List[OutboundMessageClick] = Field(default_factory=list)
