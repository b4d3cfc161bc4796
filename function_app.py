import os
import logging
import azure.functions as func

from src.function_blueprints.http_dashboard import bp as dashboard_bp
from src.function_blueprints.http_designs import bp as designs_bp
from src.function_blueprints.http_publishing import bp as publishing_bp
from src.function_blueprints.http_schedules import bp as schedules_bp
from src.shared.collection_store import get_stores

# Routes are served under the host's default "/api" prefix
app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)


def _configure_logging() -> None:
    lvl = (os.getenv("AZURE_SDK_LOG_LEVEL") or "").upper()
    if lvl:
        level = getattr(logging, lvl, logging.INFO)
        logging.getLogger("azure").setLevel(level)
    app_level = (os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.getLogger("canva_automation").setLevel(getattr(logging, app_level, logging.INFO))


_configure_logging()

for blueprint in (dashboard_bp, designs_bp, schedules_bp, publishing_bp):
    app.register_functions(blueprint)

# Create designs.json, schedules.json and history.json before the first request
get_stores()
