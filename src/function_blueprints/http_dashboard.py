import azure.functions as func

from src.http import dashboard
from src.shared.collection_store import get_stores
from src.shared.http_utils import http_endpoint, json_response
from src.shared.settings import get_settings


bp = func.Blueprint()


@bp.function_name(name="health")
@bp.route(route="health", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@http_endpoint("health")
def health(req: func.HttpRequest) -> func.HttpResponse:
    return json_response(dashboard.health(get_settings()))


@bp.function_name(name="sales_trends")
@bp.route(route="sales/trends", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@http_endpoint("sales_trends", failure_message="Failed to get sales trends")
def sales_trends(req: func.HttpRequest) -> func.HttpResponse:
    return json_response(dashboard.sales_trends())


@bp.function_name(name="dashboard")
@bp.route(route="dashboard", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@http_endpoint("dashboard", failure_message="Failed to get dashboard data")
def dashboard_summary(req: func.HttpRequest) -> func.HttpResponse:
    return json_response(dashboard.build_dashboard(get_stores()))
