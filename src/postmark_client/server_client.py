"""
Server API client.

Sends email and reads server-scoped data (bounces, templates, message
activity, statistics, triggers, webhooks, message streams, suppressions)
with a server token (``X-Postmark-Server-Token``).
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from .core.base_client import BaseClient, Callback
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
    CreateInboundRuleRequest,
    CreateMessageStreamRequest,
    CreateSuppressionsRequest,
    CreateTemplateRequest,
    CreateWebhookRequest,
    DefaultResponse,
    DeleteSuppressionsRequest,
    DeliveryStatistics,
    EmailClientUsageCounts,
    EmailPlatformUsageCounts,
    EmailReadTimesCounts,
    FilteringParameters,
    InboundMessageDetails,
    InboundMessages,
    InboundMessagesFilteringParameters,
    InboundRule,
    InboundRules,
    Message,
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
    SpamCounts,
    StatisticsFilteringParameters,
    Suppressions,
    SuppressionStatuses,
    Template,
    TemplatedMessage,
    TemplateFilteringParameters,
    Templates,
    TemplateValidation,
    TemplateValidationOptions,
    TrackedEmailCounts,
    UpdateMessageStreamRequest,
    UpdateServerRequest,
    UpdateTemplateRequest,
    UpdateWebhookRequest,
    Webhook,
    WebhookFilteringParameters,
    Webhooks,
)
from .routes import SERVER_ROUTES as R

Payload = Union[Dict[str, Any], Any]
StatsFilter = Optional[StatisticsFilteringParameters]
IdOrAlias = Union[int, str]


class ServerClient(BaseClient):
    """
    Client for one Postmark server.

    Every method is a coroutine; ``callback(error, result)`` is optional and
    receives the same outcome the coroutine returns or raises.

    Example:
        >>> async with ServerClient("server-token") as client:
        ...     response = await client.send_email(Message(
        ...         from_="sender@example.com", to="receiver@example.com",
        ...         subject="Hello", text_body="Hi"))
        ...     response.message_id
    """

    TOKEN_HEADER = "X-Postmark-Server-Token"
    TOKEN_SETTING = "server_token"

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # SENDING
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    async def send_email(self, message: Union[Message, Payload],
                         callback: Optional[Callback] = None) -> MessageSendingResponse:
        return await self._dispatch(R["send_email"], payload=message, callback=callback)

    async def send_email_batch(self, messages: Sequence[Union[Message, Payload]],
                               callback: Optional[Callback] = None) -> List[MessageSendingResponse]:
        """Send up to 500 messages in one request; one response entry per message."""
        return await self._dispatch(R["send_email_batch"], payload=list(messages),
                                    callback=callback)

    async def send_email_with_template(self, message: Union[TemplatedMessage, Payload],
                                       callback: Optional[Callback] = None
                                       ) -> MessageSendingResponse:
        return await self._dispatch(R["send_email_with_template"], payload=message,
                                    callback=callback)

    async def send_email_batch_with_templates(
        self,
        messages: Sequence[Union[TemplatedMessage, Payload]],
        callback: Optional[Callback] = None,
    ) -> List[MessageSendingResponse]:
        payload = {"Messages": [
            m.to_wire() if isinstance(m, TemplatedMessage) else m for m in messages
        ]}
        return await self._dispatch(R["send_email_batch_with_templates"], payload=payload,
                                    callback=callback)

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # BOUNCES
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    async def get_delivery_statistics(self, callback: Optional[Callback] = None
                                      ) -> DeliveryStatistics:
        return await self._dispatch(R["get_delivery_statistics"], callback=callback)

    async def get_bounces(self, filter: Optional[BounceFilteringParameters] = None,
                          callback: Optional[Callback] = None) -> Bounces:
        return await self._dispatch(R["get_bounces"], filter=filter, callback=callback)

    async def get_bounce(self, id: int, callback: Optional[Callback] = None) -> Bounce:
        return await self._dispatch(R["get_bounce"], id, callback=callback)

    async def get_bounce_dump(self, id: int, callback: Optional[Callback] = None) -> BounceDump:
        return await self._dispatch(R["get_bounce_dump"], id, callback=callback)

    async def activate_bounce(self, id: int,
                              callback: Optional[Callback] = None) -> BounceActivationResponse:
        return await self._dispatch(R["activate_bounce"], id, callback=callback)

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # TEMPLATES
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    async def get_templates(self, filter: Optional[TemplateFilteringParameters] = None,
                            callback: Optional[Callback] = None) -> Templates:
        return await self._dispatch(R["get_templates"], filter=filter, callback=callback)

    async def get_template(self, id_or_alias: IdOrAlias,
                           callback: Optional[Callback] = None) -> Template:
        return await self._dispatch(R["get_template"], id_or_alias, callback=callback)

    async def delete_template(self, id_or_alias: IdOrAlias,
                              callback: Optional[Callback] = None) -> DefaultResponse:
        return await self._dispatch(R["delete_template"], id_or_alias, callback=callback)

    async def create_template(self, options: Union[CreateTemplateRequest, Payload],
                              callback: Optional[Callback] = None) -> Template:
        return await self._dispatch(R["create_template"], payload=options, callback=callback)

    async def edit_template(self, id_or_alias: IdOrAlias,
                            options: Union[UpdateTemplateRequest, Payload],
                            callback: Optional[Callback] = None) -> Template:
        return await self._dispatch(R["edit_template"], id_or_alias, payload=options,
                                    callback=callback)

    async def validate_template(self, options: Union[TemplateValidationOptions, Payload],
                                callback: Optional[Callback] = None) -> TemplateValidation:
        return await self._dispatch(R["validate_template"], payload=options, callback=callback)

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # SERVER
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    async def get_server(self, callback: Optional[Callback] = None) -> Server:
        return await self._dispatch(R["get_server"], callback=callback)

    async def edit_server(self, options: Union[UpdateServerRequest, Payload],
                          callback: Optional[Callback] = None) -> Server:
        return await self._dispatch(R["edit_server"], payload=options, callback=callback)

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # MESSAGES
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    async def get_outbound_messages(self,
                                    filter: Optional[OutboundMessagesFilteringParameters] = None,
                                    callback: Optional[Callback] = None) -> OutboundMessages:
        return await self._dispatch(R["get_outbound_messages"], filter=filter, callback=callback)

    async def get_outbound_message_details(self, message_id: str,
                                           callback: Optional[Callback] = None
                                           ) -> OutboundMessageDetails:
        return await self._dispatch(R["get_outbound_message_details"], message_id,
                                    callback=callback)

    async def get_outbound_message_dump(self, message_id: str,
                                        callback: Optional[Callback] = None
                                        ) -> OutboundMessageDump:
        return await self._dispatch(R["get_outbound_message_dump"], message_id,
                                    callback=callback)

    async def get_inbound_messages(self,
                                   filter: Optional[InboundMessagesFilteringParameters] = None,
                                   callback: Optional[Callback] = None) -> InboundMessages:
        return await self._dispatch(R["get_inbound_messages"], filter=filter, callback=callback)

    async def get_inbound_message_details(self, message_id: str,
                                          callback: Optional[Callback] = None
                                          ) -> InboundMessageDetails:
        return await self._dispatch(R["get_inbound_message_details"], message_id,
                                    callback=callback)

    async def bypass_blocked_inbound_message(self, message_id: str,
                                             callback: Optional[Callback] = None
                                             ) -> DefaultResponse:
        return await self._dispatch(R["bypass_blocked_inbound_message"], message_id,
                                    callback=callback)

    async def retry_inbound_hook_for_message(self, message_id: str,
                                             callback: Optional[Callback] = None
                                             ) -> DefaultResponse:
        return await self._dispatch(R["retry_inbound_hook_for_message"], message_id,
                                    callback=callback)

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # OPENS / CLICKS
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    async def get_message_opens(self,
                                filter: Optional[OutboundMessageOpensFilteringParameters] = None,
                                callback: Optional[Callback] = None) -> OutboundMessageOpens:
        return await self._dispatch(R["get_message_opens"], filter=filter, callback=callback)

    async def get_message_opens_for_single_message(
        self,
        message_id: str,
        filter: Optional[OutboundMessageOpensFilteringParameters] = None,
        callback: Optional[Callback] = None,
    ) -> OutboundMessageOpens:
        """Opens of one message; without a filter the page size is 50."""
        return await self._dispatch(R["get_message_opens_for_single_message"], message_id,
                                    filter=filter, callback=callback)

    async def get_message_clicks(self,
                                 filter: Optional[OutboundMessageClicksFilteringParameters] = None,
                                 callback: Optional[Callback] = None) -> OutboundMessageClicks:
        return await self._dispatch(R["get_message_clicks"], filter=filter, callback=callback)

    async def get_message_clicks_for_single_message(
        self,
        message_id: str,
        filter: Optional[OutboundMessageClicksFilteringParameters] = None,
        callback: Optional[Callback] = None,
    ) -> OutboundMessageClicks:
        return await self._dispatch(R["get_message_clicks_for_single_message"], message_id,
                                    filter=filter, callback=callback)

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # STATISTICS
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    async def get_outbound_overview(self, filter: StatsFilter = None,
                                    callback: Optional[Callback] = None) -> OutboundStatistics:
        return await self._dispatch(R["get_outbound_overview"], filter=filter, callback=callback)

    async def get_sent_counts(self, filter: StatsFilter = None,
                              callback: Optional[Callback] = None) -> SentCounts:
        return await self._dispatch(R["get_sent_counts"], filter=filter, callback=callback)

    async def get_bounce_counts(self, filter: StatsFilter = None,
                                callback: Optional[Callback] = None) -> BounceCounts:
        return await self._dispatch(R["get_bounce_counts"], filter=filter, callback=callback)

    async def get_spam_complaints_counts(self, filter: StatsFilter = None,
                                         callback: Optional[Callback] = None) -> SpamCounts:
        return await self._dispatch(R["get_spam_complaints_counts"], filter=filter,
                                    callback=callback)

    async def get_tracked_email_counts(self, filter: StatsFilter = None,
                                       callback: Optional[Callback] = None
                                       ) -> TrackedEmailCounts:
        return await self._dispatch(R["get_tracked_email_counts"], filter=filter,
                                    callback=callback)

    async def get_email_open_counts(self, filter: StatsFilter = None,
                                    callback: Optional[Callback] = None) -> OpenCounts:
        return await self._dispatch(R["get_email_open_counts"], filter=filter, callback=callback)

    async def get_email_open_platform_usage(self, filter: StatsFilter = None,
                                            callback: Optional[Callback] = None
                                            ) -> EmailPlatformUsageCounts:
        return await self._dispatch(R["get_email_open_platform_usage"], filter=filter,
                                    callback=callback)

    async def get_email_open_client_usage(self, filter: StatsFilter = None,
                                          callback: Optional[Callback] = None
                                          ) -> EmailClientUsageCounts:
        return await self._dispatch(R["get_email_open_client_usage"], filter=filter,
                                    callback=callback)

    async def get_email_open_read_times(self, filter: StatsFilter = None,
                                        callback: Optional[Callback] = None
                                        ) -> EmailReadTimesCounts:
        return await self._dispatch(R["get_email_open_read_times"], filter=filter,
                                    callback=callback)

    async def get_click_counts(self, filter: StatsFilter = None,
                               callback: Optional[Callback] = None) -> ClickCounts:
        return await self._dispatch(R["get_click_counts"], filter=filter, callback=callback)

    async def get_click_browser_usage(self, filter: StatsFilter = None,
                                      callback: Optional[Callback] = None) -> BrowserUsageCounts:
        return await self._dispatch(R["get_click_browser_usage"], filter=filter,
                                    callback=callback)

    async def get_click_platform_usage(self, filter: StatsFilter = None,
                                       callback: Optional[Callback] = None
                                       ) -> ClickPlatformUsageCounts:
        return await self._dispatch(R["get_click_platform_usage"], filter=filter,
                                    callback=callback)

    async def get_click_location(self, filter: StatsFilter = None,
                                 callback: Optional[Callback] = None) -> ClickLocationCounts:
        return await self._dispatch(R["get_click_location"], filter=filter, callback=callback)

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # INBOUND RULE TRIGGERS
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    async def create_inbound_rule_trigger(self, options: Union[CreateInboundRuleRequest, Payload],
                                          callback: Optional[Callback] = None) -> InboundRule:
        return await self._dispatch(R["create_inbound_rule_trigger"], payload=options,
                                    callback=callback)

    async def delete_inbound_rule_trigger(self, id: int,
                                          callback: Optional[Callback] = None) -> DefaultResponse:
        return await self._dispatch(R["delete_inbound_rule_trigger"], id, callback=callback)

    async def get_inbound_rule_triggers(self, filter: Optional[FilteringParameters] = None,
                                        callback: Optional[Callback] = None) -> InboundRules:
        return await self._dispatch(R["get_inbound_rule_triggers"], filter=filter,
                                    callback=callback)

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # WEBHOOKS
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    async def get_webhooks(self, filter: Optional[WebhookFilteringParameters] = None,
                           callback: Optional[Callback] = None) -> Webhooks:
        return await self._dispatch(R["get_webhooks"], filter=filter, callback=callback)

    async def get_webhook(self, id: int, callback: Optional[Callback] = None) -> Webhook:
        return await self._dispatch(R["get_webhook"], id, callback=callback)

    async def create_webhook(self, options: Union[CreateWebhookRequest, Payload],
                             callback: Optional[Callback] = None) -> Webhook:
        return await self._dispatch(R["create_webhook"], payload=options, callback=callback)

    async def edit_webhook(self, id: int, options: Union[UpdateWebhookRequest, Payload],
                           callback: Optional[Callback] = None) -> Webhook:
        return await self._dispatch(R["edit_webhook"], id, payload=options, callback=callback)

    async def delete_webhook(self, id: int, callback: Optional[Callback] = None) -> DefaultResponse:
        return await self._dispatch(R["delete_webhook"], id, callback=callback)

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # MESSAGE STREAMS
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    async def get_message_streams(self,
                                  filter: Optional[MessageStreamsFilteringParameters] = None,
                                  callback: Optional[Callback] = None) -> MessageStreams:
        return await self._dispatch(R["get_message_streams"], filter=filter, callback=callback)

    async def get_message_stream(self, id: str,
                                 callback: Optional[Callback] = None) -> MessageStream:
        return await self._dispatch(R["get_message_stream"], id, callback=callback)

    async def edit_message_stream(self, id: str,
                                  options: Union[UpdateMessageStreamRequest, Payload],
                                  callback: Optional[Callback] = None) -> MessageStream:
        return await self._dispatch(R["edit_message_stream"], id, payload=options,
                                    callback=callback)

    async def create_message_stream(self, options: Union[CreateMessageStreamRequest, Payload],
                                    callback: Optional[Callback] = None) -> MessageStream:
        return await self._dispatch(R["create_message_stream"], payload=options,
                                    callback=callback)

    async def archive_message_stream(self, id: str, callback: Optional[Callback] = None
                                     ) -> MessageStreamArchiveResponse:
        return await self._dispatch(R["archive_message_stream"], id, callback=callback)

    async def unarchive_message_stream(self, id: str, callback: Optional[Callback] = None
                                       ) -> MessageStreamUnarchiveResponse:
        return await self._dispatch(R["unarchive_message_stream"], id, callback=callback)

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # SUPPRESSIONS
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    async def get_suppressions(self, message_stream: str,
                               callback: Optional[Callback] = None) -> Suppressions:
        return await self._dispatch(R["get_suppressions"], message_stream, callback=callback)

    async def create_suppressions(self, message_stream: str,
                                  options: Union[CreateSuppressionsRequest, Payload],
                                  callback: Optional[Callback] = None) -> SuppressionStatuses:
        return await self._dispatch(R["create_suppressions"], message_stream, payload=options,
                                    callback=callback)

    async def delete_suppressions(self, message_stream: str,
                                  options: Union[DeleteSuppressionsRequest, Payload],
                                  callback: Optional[Callback] = None) -> SuppressionStatuses:
        return await self._dispatch(R["delete_suppressions"], message_stream, payload=options,
                                    callback=callback)


Client = ServerClient
