"""Bounces and delivery statistics."""

from typing import List, Optional

from pydantic import Field

from .base import PostmarkModel


class Bounce(PostmarkModel):
    id: Optional[int] = Field(default=None, alias="ID")
    type: Optional[str] = None
    type_code: Optional[int] = None
    name: Optional[str] = None
    tag: Optional[str] = None
    message_id: Optional[str] = Field(default=None, alias="MessageID")
    server_id: Optional[int] = Field(default=None, alias="ServerID")
    message_stream: Optional[str] = None
    description: Optional[str] = None
    details: Optional[str] = None
    email: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="From")
    bounced_at: Optional[str] = None
    dump_available: Optional[bool] = None
    inactive: Optional[bool] = None
    can_activate: Optional[bool] = None
    subject: Optional[str] = None
    content: Optional[str] = None


class Bounces(PostmarkModel):
    total_count: int = 0
    bounces: List[Bounce] = Field(default_factory=list)


class BounceDump(PostmarkModel):
    body: Optional[str] = None


class BounceActivationResponse(PostmarkModel):
    message: str = ""
    bounce: Optional[Bounce] = None


class BounceTypeCount(PostmarkModel):
    type: Optional[str] = None
    name: Optional[str] = None
    count: int = 0


class DeliveryStatistics(PostmarkModel):
    inactive_mails: int = 0
    bounces: List[BounceTypeCount] = Field(default_factory=list)
