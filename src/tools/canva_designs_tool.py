"""
Design source backed by the Canva account.

The Canva Connect API needs an OAuth token from the account owner's
session, which this service does not hold yet. Until it does, the source
returns a fixed set of placeholder designs with fresh ids.
"""
from datetime import datetime, timedelta, timezone
from typing import Dict, Any, List, Optional

from src.shared.logging_utils import info as log_info
from src.shared.settings import AppSettings
from src.shared.state_common import new_record_id, utc_now
from src.specs.models.domain import Design

_PLACEHOLDER_DESIGNS = [
    {
        "title": "Baby Sleep Schedule Template",
        "description": "Downloadable sleep schedule for parents",
        "thumbnail": "https://via.placeholder.com/600x400?text=Sleep+Schedule",
        "designUrl": "https://www.canva.com/design/example1",
        "ageDays": 7,
        "format": "instagram",
    },
    {
        "title": "Bedtime Routine Tips",
        "description": "Instagram carousel post about bedtime routines",
        "thumbnail": "https://via.placeholder.com/600x400?text=Bedtime+Tips",
        "designUrl": "https://www.canva.com/design/example2",
        "ageDays": 5,
        "format": "instagram",
    },
    {
        "title": "Weekly Newsletter",
        "description": "Email newsletter template for parents",
        "thumbnail": "https://via.placeholder.com/600x400?text=Newsletter",
        "designUrl": "https://www.canva.com/design/example3",
        "ageDays": 3,
        "format": "email",
    },
]


def fetch_designs(settings: AppSettings, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """Return the designs currently available in the Canva account."""
    now = now or datetime.now(timezone.utc)
    log_info(
        "canva:fetch_designs",
        apiBase=settings.canvaApiBase,
        credentialsConfigured=settings.canva_configured,
    )
    designs: List[Dict[str, Any]] = []
    for item in _PLACEHOLDER_DESIGNS:
        design = Design(
            id=new_record_id(),
            title=item["title"],
            description=item["description"],
            thumbnail=item["thumbnail"],
            designUrl=item["designUrl"],
            createdAt=utc_now(now - timedelta(days=item["ageDays"])),
            status="ready",
            format=item["format"],
        )
        designs.append(design.model_dump(mode="json"))
    return designs
