"""
Account API client.

Manages servers, domains, sender signatures and template pushes with an
account token (``X-Postmark-Account-Token``).
"""

from typing import Any, Dict, Optional, Union

from .core.base_client import BaseClient, Callback
from .models import (
    CreateDomainRequest,
    CreateServerRequest,
    CreateSignatureRequest,
    DefaultResponse,
    DomainDetails,
    Domains,
    FilteringParameters,
    Server,
    ServerFilteringParameters,
    Servers,
    SignatureDetails,
    Signatures,
    TemplatesPush,
    TemplatesPushRequest,
    UpdateDomainRequest,
    UpdateServerRequest,
    UpdateSignatureRequest,
)
from .routes import ACCOUNT_ROUTES as R

Payload = Union[Dict[str, Any], Any]


class AccountClient(BaseClient):
    """
    Client for account-level Postmark resources.

    Every method is a coroutine; ``callback(error, result)`` is optional and
    receives the same outcome the coroutine returns or raises.

    Example:
        >>> async with AccountClient("account-token") as client:
        ...     servers = await client.get_servers(ServerFilteringParameters(count=10))
        ...     domain = await client.get_domain(7)
    """

    TOKEN_HEADER = "X-Postmark-Account-Token"
    TOKEN_SETTING = "account_token"

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # SERVERS
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    async def get_servers(self, filter: Optional[ServerFilteringParameters] = None,
                          callback: Optional[Callback] = None) -> Servers:
        """List servers (count/offset default to 100/0)."""
        return await self._dispatch(R["get_servers"], filter=filter, callback=callback)

    async def get_server(self, id: int, callback: Optional[Callback] = None) -> Server:
        return await self._dispatch(R["get_server"], id, callback=callback)

    async def create_server(self, options: Union[CreateServerRequest, Payload],
                            callback: Optional[Callback] = None) -> Server:
        return await self._dispatch(R["create_server"], payload=options, callback=callback)

    async def edit_server(self, id: int, options: Union[UpdateServerRequest, Payload],
                          callback: Optional[Callback] = None) -> Server:
        return await self._dispatch(R["edit_server"], id, payload=options, callback=callback)

    async def delete_server(self, id: int, callback: Optional[Callback] = None) -> DefaultResponse:
        return await self._dispatch(R["delete_server"], id, callback=callback)

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # DOMAINS
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    async def get_domains(self, filter: Optional[FilteringParameters] = None,
                          callback: Optional[Callback] = None) -> Domains:
        return await self._dispatch(R["get_domains"], filter=filter, callback=callback)

    async def get_domain(self, id: int, callback: Optional[Callback] = None) -> DomainDetails:
        return await self._dispatch(R["get_domain"], id, callback=callback)

    async def create_domain(self, options: Union[CreateDomainRequest, Payload],
                            callback: Optional[Callback] = None) -> DomainDetails:
        return await self._dispatch(R["create_domain"], payload=options, callback=callback)

    async def edit_domain(self, id: int, options: Union[UpdateDomainRequest, Payload],
                          callback: Optional[Callback] = None) -> DomainDetails:
        return await self._dispatch(R["edit_domain"], id, payload=options, callback=callback)

    async def delete_domain(self, id: int, callback: Optional[Callback] = None) -> DefaultResponse:
        return await self._dispatch(R["delete_domain"], id, callback=callback)

    async def verify_domain_dkim(self, id: int,
                                 callback: Optional[Callback] = None) -> DomainDetails:
        return await self._dispatch(R["verify_domain_dkim"], id, callback=callback)

    async def verify_domain_return_path(self, id: int,
                                        callback: Optional[Callback] = None) -> DomainDetails:
        return await self._dispatch(R["verify_domain_return_path"], id, callback=callback)

    async def verify_domain_spf(self, id: int,
                                callback: Optional[Callback] = None) -> DomainDetails:
        """Deprecated by Postmark; kept for accounts that still rely on SPF checks."""
        return await self._dispatch(R["verify_domain_spf"], id, callback=callback)

    async def rotate_domain_dkim(self, id: int,
                                 callback: Optional[Callback] = None) -> DomainDetails:
        return await self._dispatch(R["rotate_domain_dkim"], id, callback=callback)

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # SENDER SIGNATURES
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    async def get_sender_signature(self, id: int,
                                   callback: Optional[Callback] = None) -> SignatureDetails:
        return await self._dispatch(R["get_sender_signature"], id, callback=callback)

    async def get_sender_signatures(self, filter: Optional[FilteringParameters] = None,
                                    callback: Optional[Callback] = None) -> Signatures:
        return await self._dispatch(R["get_sender_signatures"], filter=filter, callback=callback)

    async def create_sender_signature(self, options: Union[CreateSignatureRequest, Payload],
                                      callback: Optional[Callback] = None) -> SignatureDetails:
        return await self._dispatch(R["create_sender_signature"], payload=options,
                                    callback=callback)

    async def edit_sender_signature(self, id: int,
                                    options: Union[UpdateSignatureRequest, Payload],
                                    callback: Optional[Callback] = None) -> SignatureDetails:
        return await self._dispatch(R["edit_sender_signature"], id, payload=options,
                                    callback=callback)

    async def delete_sender_signature(self, id: int,
                                      callback: Optional[Callback] = None) -> DefaultResponse:
        return await self._dispatch(R["delete_sender_signature"], id, callback=callback)

    async def resend_sender_signature_confirmation(
        self, id: int, callback: Optional[Callback] = None
    ) -> DefaultResponse:
        return await self._dispatch(R["resend_sender_signature_confirmation"], id,
                                    callback=callback)

    async def verify_sender_signature_spf(self, id: int,
                                          callback: Optional[Callback] = None) -> SignatureDetails:
        return await self._dispatch(R["verify_sender_signature_spf"], id, callback=callback)

    async def request_new_dkim_for_sender_signature(
        self, id: int, callback: Optional[Callback] = None
    ) -> SignatureDetails:
        return await self._dispatch(R["request_new_dkim_for_sender_signature"], id,
                                    callback=callback)

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # TEMPLATES
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    async def push_templates(self, options: Union[TemplatesPushRequest, Payload],
                             callback: Optional[Callback] = None) -> TemplatesPush:
        """Copy templates between servers; ``perform_changes=False`` is a dry run."""
        return await self._dispatch(R["push_templates"], payload=options, callback=callback)


AdminClient = AccountClient
