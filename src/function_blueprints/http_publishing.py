import azure.functions as func

from src.http import publishing
from src.shared.collection_store import get_stores
from src.shared.http_utils import http_endpoint, json_response, read_json_body
from src.shared.settings import get_settings


bp = func.Blueprint()


@bp.function_name(name="publish_instagram")
@bp.route(route="publish/instagram", methods=["POST"], auth_level=func.AuthLevel.ANONYMOUS)
@http_endpoint("publish_instagram", failure_message="Failed to publish")
def publish_instagram(req: func.HttpRequest) -> func.HttpResponse:
    record = publishing.publish_instagram(get_stores(), get_settings(), read_json_body(req))
    # Accepted, not processed: the attempt stays pending
    return json_response(record, status_code=202)


@bp.function_name(name="export_email")
@bp.route(route="export/email", methods=["POST"], auth_level=func.AuthLevel.ANONYMOUS)
@http_endpoint("export_email", failure_message="Failed to export design")
def export_email(req: func.HttpRequest) -> func.HttpResponse:
    return json_response(publishing.export_email(get_settings(), read_json_body(req)))


@bp.function_name(name="list_history")
@bp.route(route="history", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@http_endpoint("list_history")
def list_history(req: func.HttpRequest) -> func.HttpResponse:
    return json_response(publishing.list_history(get_stores(), status=req.params.get("status")))
