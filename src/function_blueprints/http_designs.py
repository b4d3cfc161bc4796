import azure.functions as func

from src.http import designs
from src.shared.collection_store import get_stores
from src.shared.http_utils import http_endpoint, json_response
from src.shared.settings import get_settings
from src.shared.logging_utils import info as log_info


bp = func.Blueprint()


@bp.function_name(name="canva_designs")
@bp.route(route="canva/designs", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@http_endpoint("canva_designs", failure_message="Failed to fetch designs")
def canva_designs(req: func.HttpRequest) -> func.HttpResponse:
    log_info("canva:pull_requested")
    document = designs.pull_designs(get_stores(), get_settings())
    return json_response(document)


@bp.function_name(name="list_designs")
@bp.route(route="designs", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@http_endpoint("list_designs")
def list_designs(req: func.HttpRequest) -> func.HttpResponse:
    return json_response(designs.list_designs(get_stores(), format=req.params.get("format")))


@bp.function_name(name="get_design")
@bp.route(route="designs/{id}", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@http_endpoint("get_design")
def get_design(req: func.HttpRequest) -> func.HttpResponse:
    return json_response(designs.get_design(get_stores(), req.route_params.get("id", "")))
