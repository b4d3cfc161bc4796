import azure.functions as func

from src.http import schedules
from src.shared.collection_store import get_stores
from src.shared.http_utils import http_endpoint, json_response, read_json_body


bp = func.Blueprint()


@bp.function_name(name="schedules")
@bp.route(route="schedules", methods=["GET", "POST"], auth_level=func.AuthLevel.ANONYMOUS)
@http_endpoint("schedules", failure_message={"POST": "Failed to create schedule"})
def schedules_collection(req: func.HttpRequest) -> func.HttpResponse:
    stores = get_stores()
    if req.method.upper() == "POST":
        return json_response(schedules.create_schedule(stores, read_json_body(req)))
    return json_response(schedules.list_schedules(stores))


@bp.function_name(name="schedule_by_id")
@bp.route(route="schedules/{id}", methods=["GET", "PUT", "DELETE"], auth_level=func.AuthLevel.ANONYMOUS)
@http_endpoint(
    "schedule_by_id",
    failure_message={"PUT": "Failed to update schedule", "DELETE": "Failed to delete schedule"},
)
def schedule_by_id(req: func.HttpRequest) -> func.HttpResponse:
    stores = get_stores()
    schedule_id = req.route_params.get("id", "")
    method = req.method.upper()
    if method == "PUT":
        return json_response(schedules.update_schedule(stores, schedule_id, read_json_body(req)))
    if method == "DELETE":
        return json_response(schedules.delete_schedule(stores, schedule_id))
    return json_response(schedules.get_schedule(stores, schedule_id))
