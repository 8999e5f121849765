"""Templates and template validation."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import PostmarkModel


class TemplateSummary(PostmarkModel):
    active: Optional[bool] = None
    template_id: Optional[int] = None
    name: Optional[str] = None
    alias: Optional[str] = None
    template_type: Optional[str] = None
    layout_template: Optional[str] = None


class Template(TemplateSummary):
    subject: Optional[str] = None
    html_body: Optional[str] = None
    text_body: Optional[str] = None
    associated_server_id: Optional[int] = None


class Templates(PostmarkModel):
    total_count: int = 0
    templates: List[TemplateSummary] = Field(default_factory=list)


class CreateTemplateRequest(PostmarkModel):
    name: str
    subject: Optional[str] = None
    html_body: Optional[str] = None
    text_body: Optional[str] = None
    alias: Optional[str] = None
    template_type: Optional[str] = None
    layout_template: Optional[str] = None


class UpdateTemplateRequest(PostmarkModel):
    name: Optional[str] = None
    subject: Optional[str] = None
    html_body: Optional[str] = None
    text_body: Optional[str] = None
    alias: Optional[str] = None
    layout_template: Optional[str] = None


class TemplateValidationOptions(PostmarkModel):
    subject: Optional[str] = None
    html_body: Optional[str] = None
    text_body: Optional[str] = None
    test_render_model: Optional[Dict[str, Any]] = None
    inline_css_for_html_test_render: Optional[bool] = Field(default=None, alias="InlineCssForHtmlTestRender")
    template_type: Optional[str] = None
    layout_template_content: Optional[str] = None


class TemplateValidationError(PostmarkModel):
    message: Optional[str] = None
    line: Optional[int] = None
    character_position: Optional[int] = None


class TemplateValidationResult(PostmarkModel):
    content_is_valid: Optional[bool] = None
    validation_errors: List[TemplateValidationError] = Field(default_factory=list)
    rendered_content: Optional[str] = None


class TemplateValidation(PostmarkModel):
    all_content_is_valid: Optional[bool] = None
    subject: Optional[TemplateValidationResult] = None
    html_body: Optional[TemplateValidationResult] = None
    text_body: Optional[TemplateValidationResult] = None
    suggested_template_model: Optional[Dict[str, Any]] = None
