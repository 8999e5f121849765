"""
Route tables of the account and server APIs.

Each façade method looks up its entry here and hands it to
``BaseClient._dispatch``; the tables are the single place where verbs,
paths and response models are declared.
"""

from typing import Dict, List

from .core.request import HttpMethod, Route
from .models import (
    Bounce,
    BounceActivationResponse,
    BounceCounts,
    BounceDump,
    BounceFilteringParameters,
    Bounces,
    BrowserUsageCounts,
    ClickCounts,
    ClickLocationCounts,
    ClickPlatformUsageCounts,
    DefaultResponse,
    DeliveryStatistics,
    DomainDetails,
    Domains,
    EmailClientUsageCounts,
    EmailPlatformUsageCounts,
    EmailReadTimesCounts,
    FilteringParameters,
    InboundMessageDetails,
    InboundMessages,
    InboundMessagesFilteringParameters,
    InboundRule,
    InboundRules,
    MessageSendingResponse,
    MessageStream,
    MessageStreamArchiveResponse,
    MessageStreams,
    MessageStreamsFilteringParameters,
    MessageStreamUnarchiveResponse,
    OpenCounts,
    OutboundMessageClicks,
    OutboundMessageClicksFilteringParameters,
    OutboundMessageDetails,
    OutboundMessageDump,
    OutboundMessageOpens,
    OutboundMessageOpensFilteringParameters,
    OutboundMessages,
    OutboundMessagesFilteringParameters,
    OutboundStatistics,
    SentCounts,
    Server,
    ServerFilteringParameters,
    Servers,
    SignatureDetails,
    Signatures,
    SpamCounts,
    StatisticsFilteringParameters,
    SuppressionStatuses,
    Suppressions,
    Template,
    TemplateFilteringParameters,
    Templates,
    TemplatesPush,
    TemplateValidation,
    TrackedEmailCounts,
    WebhookFilteringParameters,
    Webhook,
    Webhooks,
)

GET = HttpMethod.GET
POST = HttpMethod.POST
PUT = HttpMethod.PUT
PATCH = HttpMethod.PATCH
DELETE = HttpMethod.DELETE

# Opens of a single message page by 50 unless the caller says otherwise.
SINGLE_MESSAGE_OPENS_COUNT = 50


def _single_message_opens_filter() -> OutboundMessageOpensFilteringParameters:
    return OutboundMessageOpensFilteringParameters(count=SINGLE_MESSAGE_OPENS_COUNT, offset=0)


def _stats(path: str, response_type) -> Route:
    return Route(GET, path, response_type, filter_type=StatisticsFilteringParameters)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ACCOUNT API (X-Postmark-Account-Token)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

ACCOUNT_ROUTES: Dict[str, Route] = {
    # servers
    "get_servers": Route(GET, "/servers", Servers,
                         filter_type=ServerFilteringParameters, paginated=True),
    "get_server": Route(GET, "/servers/{id}", Server),
    "create_server": Route(POST, "/servers", Server),
    "edit_server": Route(PUT, "/servers/{id}", Server),
    "delete_server": Route(DELETE, "/servers/{id}", DefaultResponse),

    # domains
    "get_domains": Route(GET, "/domains", Domains,
                         filter_type=FilteringParameters, paginated=True),
    "get_domain": Route(GET, "/domains/{id}", DomainDetails),
    "create_domain": Route(POST, "/domains/", DomainDetails),
    "edit_domain": Route(PUT, "/domains/{id}", DomainDetails),
    "delete_domain": Route(DELETE, "/domains/{id}", DefaultResponse),
    "verify_domain_dkim": Route(PUT, "/domains/{id}/verifyDKIM", DomainDetails),
    "verify_domain_return_path": Route(PUT, "/domains/{id}/verifyReturnPath", DomainDetails),
    "verify_domain_spf": Route(PUT, "/domains/{id}/verifySPF", DomainDetails),
    "rotate_domain_dkim": Route(PUT, "/domains/{id}/rotateDKIM", DomainDetails),

    # sender signatures
    "get_sender_signature": Route(GET, "/senders/{id}", SignatureDetails),
    "get_sender_signatures": Route(GET, "/senders", Signatures,
                                   filter_type=FilteringParameters, paginated=True),
    "create_sender_signature": Route(POST, "/senders/", SignatureDetails),
    "edit_sender_signature": Route(PUT, "/senders/{id}", SignatureDetails),
    "delete_sender_signature": Route(DELETE, "/senders/{id}", DefaultResponse),
    "resend_sender_signature_confirmation": Route(POST, "/senders/{id}/resend", DefaultResponse),
    "verify_sender_signature_spf": Route(POST, "/senders/{id}/verifySpf", SignatureDetails),
    "request_new_dkim_for_sender_signature": Route(
        POST, "/senders/{id}/requestNewDkim", SignatureDetails),

    # templates
    "push_templates": Route(PUT, "/templates/push", TemplatesPush),
}

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# SERVER API (X-Postmark-Server-Token)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

SERVER_ROUTES: Dict[str, Route] = {
    # sending
    "send_email": Route(POST, "/email", MessageSendingResponse),
    "send_email_batch": Route(POST, "/email/batch", List[MessageSendingResponse]),
    "send_email_with_template": Route(POST, "/email/withTemplate", MessageSendingResponse),
    "send_email_batch_with_templates": Route(
        POST, "/email/batchWithTemplates", List[MessageSendingResponse]),

    # bounces
    "get_delivery_statistics": Route(GET, "/deliveryStats", DeliveryStatistics),
    "get_bounces": Route(GET, "/bounces", Bounces,
                         filter_type=BounceFilteringParameters, paginated=True),
    "get_bounce": Route(GET, "/bounces/{id}", Bounce),
    "get_bounce_dump": Route(GET, "/bounces/{id}/dump", BounceDump),
    "activate_bounce": Route(PUT, "/bounces/{id}/activate", BounceActivationResponse),

    # templates
    "get_templates": Route(GET, "/templates", Templates,
                           filter_type=TemplateFilteringParameters, paginated=True),
    "get_template": Route(GET, "/templates/{id}", Template),
    "delete_template": Route(DELETE, "/templates/{id}", DefaultResponse),
    "create_template": Route(POST, "/templates/", Template),
    "edit_template": Route(PUT, "/templates/{id}", Template),
    "validate_template": Route(POST, "/templates/validate", TemplateValidation),

    # server
    "get_server": Route(GET, "/server", Server),
    "edit_server": Route(PUT, "/server", Server),

    # messages
    "get_outbound_messages": Route(GET, "/messages/outbound", OutboundMessages,
                                   filter_type=OutboundMessagesFilteringParameters,
                                   paginated=True),
    "get_outbound_message_details": Route(GET, "/messages/outbound/{id}", OutboundMessageDetails),
    "get_outbound_message_dump": Route(GET, "/messages/outbound/{id}/dump", OutboundMessageDump),
    "get_inbound_messages": Route(GET, "/messages/inbound", InboundMessages,
                                  filter_type=InboundMessagesFilteringParameters,
                                  paginated=True),
    "get_inbound_message_details": Route(
        GET, "/messages/inbound/{id}/details", InboundMessageDetails),
    "bypass_blocked_inbound_message": Route(PUT, "/messages/inbound/{id}/bypass", DefaultResponse),
    "retry_inbound_hook_for_message": Route(PUT, "/messages/inbound/{id}/retry", DefaultResponse),

    # opens / clicks
    "get_message_opens": Route(GET, "/messages/outbound/opens", OutboundMessageOpens,
                               filter_type=OutboundMessageOpensFilteringParameters,
                               paginated=True),
    "get_message_opens_for_single_message": Route(
        GET, "/messages/outbound/opens/{id}", OutboundMessageOpens,
        filter_type=OutboundMessageOpensFilteringParameters, paginated=True,
        default_filter=_single_message_opens_filter),
    "get_message_clicks": Route(GET, "/messages/outbound/clicks", OutboundMessageClicks,
                                filter_type=OutboundMessageClicksFilteringParameters,
                                paginated=True),
    "get_message_clicks_for_single_message": Route(
        GET, "/messages/outbound/clicks/{id}", OutboundMessageClicks,
        filter_type=OutboundMessageClicksFilteringParameters, paginated=True),

    # statistics
    "get_outbound_overview": _stats("/stats/outbound", OutboundStatistics),
    "get_sent_counts": _stats("/stats/outbound/sends", SentCounts),
    "get_bounce_counts": _stats("/stats/outbound/bounces", BounceCounts),
    "get_spam_complaints_counts": _stats("/stats/outbound/spam", SpamCounts),
    "get_tracked_email_counts": _stats("/stats/outbound/tracked", TrackedEmailCounts),
    "get_email_open_counts": _stats("/stats/outbound/opens", OpenCounts),
    "get_email_open_platform_usage": _stats(
        "/stats/outbound/opens/platforms", EmailPlatformUsageCounts),
    "get_email_open_client_usage": _stats(
        "/stats/outbound/opens/emailClients", EmailClientUsageCounts),
    "get_email_open_read_times": _stats(
        "/stats/outbound/opens/readTimes", EmailReadTimesCounts),
    "get_click_counts": _stats("/stats/outbound/clicks", ClickCounts),
    "get_click_browser_usage": _stats(
        "/stats/outbound/clicks/browserFamilies", BrowserUsageCounts),
    "get_click_platform_usage": _stats(
        "/stats/outbound/clicks/platforms", ClickPlatformUsageCounts),
    "get_click_location": _stats("/stats/outbound/clicks/location", ClickLocationCounts),

    # inbound rule triggers
    "create_inbound_rule_trigger": Route(POST, "/triggers/inboundRules", InboundRule),
    "delete_inbound_rule_trigger": Route(DELETE, "/triggers/inboundRules/{id}", DefaultResponse),
    "get_inbound_rule_triggers": Route(GET, "/triggers/inboundRules", InboundRules,
                                       filter_type=FilteringParameters, paginated=True),

    # webhooks
    "get_webhooks": Route(GET, "/webhooks", Webhooks, filter_type=WebhookFilteringParameters),
    "get_webhook": Route(GET, "/webhooks/{id}", Webhook),
    "create_webhook": Route(POST, "/webhooks", Webhook),
    "edit_webhook": Route(PUT, "/webhooks/{id}", Webhook),
    "delete_webhook": Route(DELETE, "/webhooks/{id}", DefaultResponse),

    # message streams
    "get_message_streams": Route(GET, "/message-streams", MessageStreams,
                                 filter_type=MessageStreamsFilteringParameters),
    "get_message_stream": Route(GET, "/message-streams/{id}", MessageStream),
    "edit_message_stream": Route(PATCH, "/message-streams/{id}", MessageStream),
    "create_message_stream": Route(POST, "/message-streams", MessageStream),
    "archive_message_stream": Route(
        POST, "/message-streams/{id}/archive", MessageStreamArchiveResponse),
    "unarchive_message_stream": Route(
        POST, "/message-streams/{id}/unarchive", MessageStreamUnarchiveResponse),

    # suppressions
    "get_suppressions": Route(GET, "/message-streams/{id}/suppressions/dump", Suppressions),
    "create_suppressions": Route(
        POST, "/message-streams/{id}/suppressions", SuppressionStatuses),
    "delete_suppressions": Route(
        POST, "/message-streams/{id}/suppressions/delete", SuppressionStatuses),
}
