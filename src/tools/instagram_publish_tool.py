"""
Instagram publisher.

Publishing through the Graph API is not wired up; every request is
recorded as a pending attempt carrying the configuration error below.
"""
from typing import Optional

from src.shared.logging_utils import warning as log_warning
from src.shared.settings import AppSettings
from src.shared.state_common import new_record_id, utc_now
from src.specs.common.enums import Platform, PublishStatus
from src.specs.models.domain import HistoryRecord

DEFAULT_CAPTION = "New design from Hello Little Sleepers"
CREDENTIALS_MISSING = (
    "Instagram credentials not configured. Please provide INSTAGRAM_ACCESS_TOKEN"
)


def submit_post(settings: AppSettings, design_id: str, caption: Optional[str] = None) -> HistoryRecord:
    """Build the history entry for a publish attempt. Nothing leaves the process."""
    log_warning(
        "instagram:publish_not_configured",
        designId=design_id,
        tokenPresent=bool(settings.instagramAccessToken),
    )
    return HistoryRecord(
        id=new_record_id(),
        designId=design_id,
        platform=Platform.INSTAGRAM,
        caption=caption or DEFAULT_CAPTION,
        status=PublishStatus.PENDING,
        publishedAt=None,
        createdAt=utc_now(),
        error=CREDENTIALS_MISSING,
    )
