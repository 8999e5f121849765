"""Request, response and filter models of the Postmark API."""

from .base import DefaultResponse, FilterModel, PostmarkModel
from .filters import (
    BounceFilteringParameters,
    FilteringParameters,
    InboundMessagesFilteringParameters,
    MessageStreamsFilteringParameters,
    OutboundMessageClicksFilteringParameters,
    OutboundMessageOpensFilteringParameters,
    OutboundMessagesFilteringParameters,
    ServerFilteringParameters,
    StatisticsFilteringParameters,
    TemplateFilteringParameters,
    WebhookFilteringParameters,
)
from .messages import (
    Attachment,
    Header,
    Message,
    MessageSendingResponse,
    TemplatedMessage,
)
from .account import (
    CreateDomainRequest,
    CreateServerRequest,
    CreateSignatureRequest,
    Domain,
    DomainDetails,
    Domains,
    Server,
    Servers,
    Signature,
    SignatureDetails,
    Signatures,
    TemplatePushAction,
    TemplatesPush,
    TemplatesPushRequest,
    UpdateDomainRequest,
    UpdateServerRequest,
    UpdateSignatureRequest,
)
from .bounces import (
    Bounce,
    BounceActivationResponse,
    BounceDump,
    Bounces,
    BounceTypeCount,
    DeliveryStatistics,
)
from .templates import (
    CreateTemplateRequest,
    Template,
    TemplateSummary,
    Templates,
    TemplateValidation,
    TemplateValidationOptions,
    UpdateTemplateRequest,
)
from .activity import (
    InboundMessage,
    InboundMessageDetails,
    InboundMessages,
    OutboundMessage,
    OutboundMessageClick,
    OutboundMessageClicks,
    OutboundMessageDetails,
    OutboundMessageDump,
    OutboundMessageOpen,
    OutboundMessageOpens,
    OutboundMessages,
)
from .stats import (
    BounceCounts,
    BrowserUsageCounts,
    ClickCounts,
    ClickLocationCounts,
    ClickPlatformUsageCounts,
    EmailClientUsageCounts,
    EmailPlatformUsageCounts,
    EmailReadTimesCounts,
    OpenCounts,
    OutboundStatistics,
    SentCounts,
    SpamCounts,
    TrackedEmailCounts,
)
from .streams import (
    CreateInboundRuleRequest,
    CreateMessageStreamRequest,
    CreateSuppressionsRequest,
    CreateWebhookRequest,
    DeleteSuppressionsRequest,
    InboundRule,
    InboundRules,
    MessageStream,
    MessageStreamArchiveResponse,
    MessageStreams,
    MessageStreamUnarchiveResponse,
    SuppressionEntry,
    Suppressions,
    SuppressionStatuses,
    UpdateMessageStreamRequest,
    UpdateWebhookRequest,
    Webhook,
    WebhookHttpAuth,
    Webhooks,
    WebhookTriggers,
)

__all__ = [
    # base
    "PostmarkModel", "FilterModel", "DefaultResponse",
    # filters
    "FilteringParameters", "ServerFilteringParameters", "BounceFilteringParameters",
    "TemplateFilteringParameters", "OutboundMessagesFilteringParameters",
    "InboundMessagesFilteringParameters", "OutboundMessageOpensFilteringParameters",
    "OutboundMessageClicksFilteringParameters", "StatisticsFilteringParameters",
    "WebhookFilteringParameters", "MessageStreamsFilteringParameters",
    # sending
    "Header", "Attachment", "Message", "TemplatedMessage", "MessageSendingResponse",
    # account
    "Server", "Servers", "CreateServerRequest", "UpdateServerRequest",
    "Domain", "DomainDetails", "Domains", "CreateDomainRequest", "UpdateDomainRequest",
    "Signature", "SignatureDetails", "Signatures", "CreateSignatureRequest",
    "UpdateSignatureRequest", "TemplatesPushRequest", "TemplatePushAction", "TemplatesPush",
    # bounces
    "Bounce", "Bounces", "BounceDump", "BounceActivationResponse", "BounceTypeCount",
    "DeliveryStatistics",
    # templates
    "Template", "TemplateSummary", "Templates", "CreateTemplateRequest",
    "UpdateTemplateRequest", "TemplateValidationOptions", "TemplateValidation",
    # activity
    "OutboundMessage", "OutboundMessages", "OutboundMessageDetails", "OutboundMessageDump",
    "InboundMessage", "InboundMessages", "InboundMessageDetails",
    "OutboundMessageOpen", "OutboundMessageOpens", "OutboundMessageClick",
    "OutboundMessageClicks",
    # stats
    "OutboundStatistics", "SentCounts", "BounceCounts", "SpamCounts", "TrackedEmailCounts",
    "OpenCounts", "EmailPlatformUsageCounts", "EmailClientUsageCounts",
    "EmailReadTimesCounts", "ClickCounts", "BrowserUsageCounts",
    "ClickPlatformUsageCounts", "ClickLocationCounts",
    # triggers, webhooks, streams, suppressions
    "InboundRule", "InboundRules", "CreateInboundRuleRequest",
    "Webhook", "Webhooks", "WebhookHttpAuth", "WebhookTriggers",
    "CreateWebhookRequest", "UpdateWebhookRequest",
    "MessageStream", "MessageStreams", "CreateMessageStreamRequest",
    "UpdateMessageStreamRequest", "MessageStreamArchiveResponse",
    "MessageStreamUnarchiveResponse",
    "Suppressions", "SuppressionEntry", "CreateSuppressionsRequest",
    "DeleteSuppressionsRequest", "SuppressionStatuses",
]
