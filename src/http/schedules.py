from typing import Any, Dict

from pydantic import ValidationError as ModelValidationError

from src.shared.collection_store import CollectionStores, Record
from src.shared.http_utils import describe_validation_error, missing_fields
from src.shared.logging_utils import info as log_info
from src.shared.state_common import new_record_id, utc_now
from src.specs.common.enums import ScheduleStatus
from src.specs.common.errors import ValidationError
from src.specs.models.domain import Schedule

REQUIRED_FIELDS = ("designId", "platform", "schedule")


def _validated(record: Record) -> Record:
    try:
        return Schedule.model_validate(record).to_record()
    except ModelValidationError as exc:
        raise ValidationError(f"Invalid schedule: {describe_validation_error(exc)}")


def create_schedule(stores: CollectionStores, body: Dict[str, Any]) -> Record:
    missing = missing_fields(body, REQUIRED_FIELDS)
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}",
            details={"missing": missing},
        )
    record = {
        **body,
        "id": new_record_id(),
        "timezone": body.get("timezone") or "UTC",
        "createdAt": utc_now(),
        "status": ScheduleStatus.SCHEDULED.value,
    }
    record = stores.schedules.append(_validated(record))
    log_info("schedules:created", id=record["id"], designId=record["designId"], platform=record["platform"])
    return record


def list_schedules(stores: CollectionStores) -> Dict[str, Any]:
    return stores.schedules.document()


def get_schedule(stores: CollectionStores, schedule_id: str) -> Record:
    return stores.schedules.get(schedule_id)


def update_schedule(stores: CollectionStores, schedule_id: str, body: Dict[str, Any]) -> Record:
    """Merge ``body`` over the stored schedule. ``id`` and ``createdAt`` never change."""
    return stores.schedules.update(schedule_id, body, validate=_validated)


def delete_schedule(stores: CollectionStores, schedule_id: str) -> Record:
    return stores.schedules.remove(schedule_id)
