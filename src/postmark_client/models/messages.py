"""Outgoing email payloads and sending results."""

from typing import Any, Dict, List, Optional

from pydantic import Field, model_validator

from .base import PostmarkModel


class Header(PostmarkModel):
    name: str
    value: str


class Attachment(PostmarkModel):
    """Base64-encoded attachment; ``content_id`` ("cid:...") makes it inline."""
    name: str
    content: str
    content_type: str
    content_id: Optional[str] = Field(default=None, alias="ContentID")


class _MessageFields(PostmarkModel):
    from_: str = Field(alias="From")
    to: Optional[str] = None
    cc: Optional[str] = None
    bcc: Optional[str] = None
    reply_to: Optional[str] = None
    tag: Optional[str] = None
    headers: Optional[List[Header]] = None
    track_opens: Optional[bool] = None
    track_links: Optional[str] = None
    attachments: Optional[List[Attachment]] = None
    metadata: Optional[Dict[str, str]] = None
    message_stream: Optional[str] = None


class Message(_MessageFields):
    """
    Email for ``/email`` and ``/email/batch``.

    Example:
        >>> Message(from_="sender@example.com", to="receiver@example.com",
        ...         subject="Hello", text_body="Hi there")
    """
    subject: Optional[str] = None
    html_body: Optional[str] = None
    text_body: Optional[str] = None


class TemplatedMessage(_MessageFields):
    """Email rendered server-side from a template (by id or alias)."""
    template_id: Optional[int] = None
    template_alias: Optional[str] = None
    template_model: Dict[str, Any] = Field(default_factory=dict)
    inline_css: Optional[bool] = Field(default=None, alias="InlineCss")

    @model_validator(mode="after")
    def _require_template_reference(self):
        if self.template_id is None and not self.template_alias:
            raise ValueError("either template_id or template_alias is required")
        return self


class MessageSendingResponse(PostmarkModel):
    to: Optional[str] = None
    submitted_at: Optional[str] = None
    message_id: Optional[str] = Field(default=None, alias="MessageID")
    error_code: int = 0
    message: str = ""
