from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as ModelValidationError

from src.shared.collection_store import CollectionStores, Record
from src.shared.http_utils import describe_validation_error, missing_fields
from src.shared.logging_utils import info as log_info
from src.shared.settings import AppSettings
from src.shared.state_common import new_record_id, utc_now
from src.specs.common.enums import ExportFormat
from src.specs.common.errors import ValidationError
from src.specs.models.domain import ExportDescriptor
from src.specs.models.http import ExportEmailRequest, PublishInstagramRequest
from src.tools.instagram_publish_tool import submit_post

SUPPORTED_EXPORT_FORMATS = [f.value for f in ExportFormat]
EXPORT_NOTE = "In production, this would generate actual export from Canva"

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def _parse(model: Type[RequestModel], body: Dict[str, Any]) -> RequestModel:
    if missing_fields(body, ("designId",)):
        raise ValidationError("designId is required")
    try:
        return model(**body)
    except ModelValidationError as exc:
        raise ValidationError(f"Invalid request: {describe_validation_error(exc)}")


def publish_instagram(stores: CollectionStores, settings: AppSettings, body: Dict[str, Any]) -> Record:
    """Record an Instagram publish attempt.

    The attempt is stored as ``pending`` and stays that way; callers get it
    back with 202.
    """
    parsed = _parse(PublishInstagramRequest, body)
    record = submit_post(settings, parsed.designId, parsed.caption)
    return stores.history.append(record.model_dump(mode="json"))


def export_email(settings: AppSettings, body: Dict[str, Any]) -> Dict[str, Any]:
    parsed = _parse(ExportEmailRequest, body)
    export_format = parsed.format or ExportFormat.PNG.value
    if export_format not in SUPPORTED_EXPORT_FORMATS:
        raise ValidationError(
            f"Unsupported format. Supported: {', '.join(SUPPORTED_EXPORT_FORMATS)}",
            details={"supported": SUPPORTED_EXPORT_FORMATS},
        )
    design_id = parsed.designId
    descriptor = ExportDescriptor(
        id=new_record_id(),
        designId=design_id,
        format=export_format,
        status="ready",
        downloadUrl=f"{settings.exportBaseUrl.rstrip('/')}/{design_id}.{export_format}",
        createdAt=utc_now(),
        note=EXPORT_NOTE,
    )
    log_info("export:ready", designId=design_id, format=export_format)
    return descriptor.model_dump(mode="json")


def list_history(stores: CollectionStores, status: Optional[str] = None) -> Dict[str, Any]:
    document = stores.history.document()
    if status:
        document = {
            **document,
            "history": [h for h in document["history"] if isinstance(h, dict) and h.get("status") == status],
        }
    return document
