"""Inbound rules, webhooks, message streams and suppressions."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import PostmarkModel

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# INBOUND RULES
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class InboundRule(PostmarkModel):
    id: Optional[int] = Field(default=None, alias="ID")
    rule: Optional[str] = None


class InboundRules(PostmarkModel):
    total_count: int = 0
    inbound_rules: List[InboundRule] = Field(default_factory=list)


class CreateInboundRuleRequest(PostmarkModel):
    rule: str

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# WEBHOOKS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class WebhookHttpAuth(PostmarkModel):
    username: str
    password: str


class WebhookTriggers(PostmarkModel):
    """Per-event switches, e.g. ``{"Open": {"Enabled": True, "PostFirstOpenOnly": False}}``."""
    open: Optional[Dict[str, Any]] = None
    click: Optional[Dict[str, Any]] = None
    delivery: Optional[Dict[str, Any]] = None
    bounce: Optional[Dict[str, Any]] = None
    spam_complaint: Optional[Dict[str, Any]] = None
    subscription_change: Optional[Dict[str, Any]] = None


class _WebhookFields(PostmarkModel):
    url: Optional[str] = None
    http_auth: Optional[WebhookHttpAuth] = None
    http_headers: Optional[List[Dict[str, str]]] = None
    triggers: Optional[WebhookTriggers] = None


class Webhook(_WebhookFields):
    id: Optional[int] = Field(default=None, alias="ID")
    message_stream: Optional[str] = None


class Webhooks(PostmarkModel):
    webhooks: List[Webhook] = Field(default_factory=list)


class CreateWebhookRequest(_WebhookFields):
    url: str
    message_stream: Optional[str] = None


class UpdateWebhookRequest(_WebhookFields):
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# MESSAGE STREAMS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class SubscriptionManagementConfiguration(PostmarkModel):
    unsubscribe_handling_type: Optional[str] = None


class MessageStream(PostmarkModel):
    id: Optional[str] = Field(default=None, alias="ID")
    server_id: Optional[int] = Field(default=None, alias="ServerID")
    name: Optional[str] = None
    description: Optional[str] = None
    message_stream_type: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    archived_at: Optional[str] = None
    expected_purge_date: Optional[str] = None
    subscription_management_configuration: Optional[SubscriptionManagementConfiguration] = None


class MessageStreams(PostmarkModel):
    total_count: int = 0
    message_streams: List[MessageStream] = Field(default_factory=list)


class CreateMessageStreamRequest(PostmarkModel):
    id: str = Field(alias="ID")
    name: str
    message_stream_type: str
    description: Optional[str] = None
    subscription_management_configuration: Optional[SubscriptionManagementConfiguration] = None


class UpdateMessageStreamRequest(PostmarkModel):
    name: Optional[str] = None
    description: Optional[str] = None
    subscription_management_configuration: Optional[SubscriptionManagementConfiguration] = None


class MessageStreamArchiveResponse(PostmarkModel):
    id: Optional[str] = Field(default=None, alias="ID")
    server_id: Optional[int] = Field(default=None, alias="ServerID")
    expected_purge_date: Optional[str] = None


class MessageStreamUnarchiveResponse(MessageStream):
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# SUPPRESSIONS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Suppression(PostmarkModel):
    email_address: Optional[str] = None
    suppression_reason: Optional[str] = None
    origin: Optional[str] = None
    created_at: Optional[str] = None


class Suppressions(PostmarkModel):
    suppressions: List[Suppression] = Field(default_factory=list)


class SuppressionEntry(PostmarkModel):
    email_address: str


class CreateSuppressionsRequest(PostmarkModel):
    suppressions: List[SuppressionEntry]


class DeleteSuppressionsRequest(PostmarkModel):
    suppressions: List[SuppressionEntry]


class SuppressionStatus(PostmarkModel):
    email_address: Optional[str] = None
    status: Optional[str] = None
    message: Optional[str] = None


class SuppressionStatuses(PostmarkModel):
    suppressions: List[SuppressionStatus] = Field(default_factory=list)
