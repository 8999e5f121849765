"""
Outbound statistics.

Per-day breakdowns carry endpoint-specific keys (``Sent``, ``HardBounce``,
``Chrome``...) which are kept as extra fields; ``Days`` rows are plain
dicts.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import PostmarkModel


class OutboundStatistics(PostmarkModel):
    sent: int = 0
    bounced: int = 0
    smtp_api_errors: int = Field(default=0, alias="SMTPApiErrors")
    bounce_rate: float = 0.0
    spam_complaints: int = 0
    spam_complaints_rate: float = 0.0
    opens: int = 0
    unique_opens: int = 0
    tracked: int = 0
    with_link_tracking: int = 0
    with_open_tracking: int = 0
    total_tracked_links_sent: int = 0
    unique_links_clicked: int = 0
    total_clicks: int = 0
    with_client_recorded: int = 0
    with_platform_recorded: int = 0
    with_read_time_recorded: int = 0


class _DailyCounts(PostmarkModel):
    days: List[Dict[str, Any]] = Field(default_factory=list)


class SentCounts(_DailyCounts):
    sent: Optional[int] = None


class BounceCounts(_DailyCounts):
    hard_bounce: Optional[int] = None
    smtp_api_error: Optional[int] = Field(default=None, alias="SMTPApiError")
    soft_bounce: Optional[int] = None
    transient: Optional[int] = None


class SpamCounts(_DailyCounts):
    spam_complaint: Optional[int] = None


class TrackedEmailCounts(_DailyCounts):
    tracked: Optional[int] = None


class OpenCounts(_DailyCounts):
    opens: Optional[int] = None
    unique: Optional[int] = None


class EmailPlatformUsageCounts(_DailyCounts):
    desktop: Optional[int] = None
    mobile: Optional[int] = None
    unknown: Optional[int] = None
    web_mail: Optional[int] = None


class EmailClientUsageCounts(_DailyCounts):
    pass


class EmailReadTimesCounts(_DailyCounts):
    pass


class ClickCounts(_DailyCounts):
    clicks: Optional[int] = None
    unique: Optional[int] = None


class BrowserUsageCounts(_DailyCounts):
    pass


class ClickPlatformUsageCounts(_DailyCounts):
    desktop: Optional[int] = None
    mobile: Optional[int] = None
    unknown: Optional[int] = None


class ClickLocationCounts(_DailyCounts):
    html_link: Optional[int] = Field(default=None, alias="HTML")
    text_link: Optional[int] = Field(default=None, alias="Text")
