from typing import Any, Dict, Optional

from src.shared.collection_store import CollectionStores
from src.shared.logging_utils import info as log_info
from src.shared.settings import AppSettings
from src.shared.state_common import utc_now
from src.tools.canva_designs_tool import fetch_designs


def pull_designs(stores: CollectionStores, settings: AppSettings) -> Dict[str, Any]:
    """Replace the cached designs with what the Canva account holds now.

    This is a full replace: designs missing from the new set are dropped.
    """
    document = {
        "designs": fetch_designs(settings),
        "lastUpdated": utc_now(),
    }
    stores.designs.replace(document)
    log_info("designs:pulled", count=len(document["designs"]))
    return document


def list_designs(stores: CollectionStores, format: Optional[str] = None) -> Dict[str, Any]:
    document = stores.designs.document()
    if format:
        document = {
            **document,
            "designs": [d for d in document["designs"] if isinstance(d, dict) and d.get("format") == format],
        }
    return document


def get_design(stores: CollectionStores, design_id: str) -> Dict[str, Any]:
    return stores.designs.get(design_id)
