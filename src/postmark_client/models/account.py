"""Account-scoped resources: servers, domains, sender signatures, template pushes."""

from typing import List, Optional

from pydantic import Field

from .base import PostmarkModel

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# SERVERS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class _ServerSettings(PostmarkModel):
    name: Optional[str] = None
    color: Optional[str] = None
    smtp_api_activated: Optional[bool] = None
    raw_email_enabled: Optional[bool] = None
    delivery_hook_url: Optional[str] = None
    inbound_hook_url: Optional[str] = None
    bounce_hook_url: Optional[str] = None
    include_bounce_content_in_hook: Optional[bool] = None
    open_hook_url: Optional[str] = None
    post_first_open_only: Optional[bool] = None
    track_opens: Optional[bool] = None
    track_links: Optional[str] = None
    click_hook_url: Optional[str] = None
    inbound_domain: Optional[str] = None
    inbound_spam_threshold: Optional[int] = None
    enable_smtp_api_error_hooks: Optional[bool] = None


class Server(_ServerSettings):
    id: Optional[int] = Field(default=None, alias="ID")
    api_tokens: Optional[List[str]] = None
    server_link: Optional[str] = None
    inbound_address: Optional[str] = None
    inbound_hash: Optional[str] = None
    delivery_type: Optional[str] = None


class Servers(PostmarkModel):
    total_count: int = 0
    servers: List[Server] = Field(default_factory=list)


class CreateServerRequest(_ServerSettings):
    name: str
    delivery_type: Optional[str] = None


class UpdateServerRequest(_ServerSettings):
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# DOMAINS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Domain(PostmarkModel):
    id: Optional[int] = Field(default=None, alias="ID")
    name: Optional[str] = None
    spf_verified: Optional[bool] = Field(default=None, alias="SPFVerified")
    dkim_verified: Optional[bool] = Field(default=None, alias="DKIMVerified")
    weak_dkim: Optional[bool] = Field(default=None, alias="WeakDKIM")
    return_path_domain_verified: Optional[bool] = None


class DomainDetails(Domain):
    spf_host: Optional[str] = Field(default=None, alias="SPFHost")
    spf_text_value: Optional[str] = Field(default=None, alias="SPFTextValue")
    dkim_host: Optional[str] = Field(default=None, alias="DKIMHost")
    dkim_text_value: Optional[str] = Field(default=None, alias="DKIMTextValue")
    dkim_pending_host: Optional[str] = Field(default=None, alias="DKIMPendingHost")
    dkim_pending_text_value: Optional[str] = Field(default=None, alias="DKIMPendingTextValue")
    dkim_revoked_host: Optional[str] = Field(default=None, alias="DKIMRevokedHost")
    dkim_revoked_text_value: Optional[str] = Field(default=None, alias="DKIMRevokedTextValue")
    safe_to_remove_revoked_key_from_dns: Optional[bool] = Field(default=None, alias="SafeToRemoveRevokedKeyFromDNS")
    dkim_update_status: Optional[str] = Field(default=None, alias="DKIMUpdateStatus")
    return_path_domain: Optional[str] = None
    return_path_domain_cname_value: Optional[str] = Field(default=None, alias="ReturnPathDomainCNAMEValue")


class Domains(PostmarkModel):
    total_count: int = 0
    domains: List[Domain] = Field(default_factory=list)


class CreateDomainRequest(PostmarkModel):
    name: str
    return_path_domain: Optional[str] = None


class UpdateDomainRequest(PostmarkModel):
    return_path_domain: Optional[str] = None

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# SENDER SIGNATURES
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Signature(PostmarkModel):
    id: Optional[int] = Field(default=None, alias="ID")
    domain: Optional[str] = None
    email_address: Optional[str] = None
    reply_to_email_address: Optional[str] = None
    name: Optional[str] = None
    confirmed: Optional[bool] = None


class SignatureDetails(Signature):
    spf_verified: Optional[bool] = Field(default=None, alias="SPFVerified")
    spf_host: Optional[str] = Field(default=None, alias="SPFHost")
    spf_text_value: Optional[str] = Field(default=None, alias="SPFTextValue")
    dkim_verified: Optional[bool] = Field(default=None, alias="DKIMVerified")
    dkim_host: Optional[str] = Field(default=None, alias="DKIMHost")
    dkim_text_value: Optional[str] = Field(default=None, alias="DKIMTextValue")
    return_path_domain: Optional[str] = None
    return_path_domain_verified: Optional[bool] = None
    return_path_domain_cname_value: Optional[str] = Field(default=None, alias="ReturnPathDomainCNAMEValue")


class Signatures(PostmarkModel):
    total_count: int = 0
    sender_signatures: List[Signature] = Field(default_factory=list)


class CreateSignatureRequest(PostmarkModel):
    name: str
    from_email: str
    reply_to_email: Optional[str] = None
    return_path_domain: Optional[str] = None


class UpdateSignatureRequest(PostmarkModel):
    name: Optional[str] = None
    reply_to_email: Optional[str] = None
    return_path_domain: Optional[str] = None

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TEMPLATE PUSH
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TemplatesPushRequest(PostmarkModel):
    source_server_id: int = Field(alias="SourceServerID")
    destination_server_id: int = Field(alias="DestinationServerID")
    perform_changes: bool = False


class TemplatePushAction(PostmarkModel):
    action: Optional[str] = None
    template_id: Optional[int] = None
    alias: Optional[str] = None
    name: Optional[str] = None


class TemplatesPush(PostmarkModel):
    total_count: int = 0
    templates: List[TemplatePushAction] = Field(default_factory=list)
