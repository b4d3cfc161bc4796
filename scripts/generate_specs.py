#!/usr/bin/env python3
"""
Generate JSON Schemas, YAML variants, and OpenAPI from Pydantic models.

Outputs under src/specs/:
 - schemas/*.json (and *.yaml)
 - openapi.yaml and openapi.json
"""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional

from pydantic.json_schema import models_json_schema

try:
    import yaml  # type: ignore
except Exception as exc:  # pragma: no cover
    print("PyYAML is required: pip install pyyaml", file=sys.stderr)
    raise


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
SPECS = SRC / "specs"
SCHEMAS_DIR = SPECS / "schemas"

sys.path.insert(0, str(ROOT))

from src.specs.models import SCHEMA_MODELS  # noqa: E402


class Route(NamedTuple):
    method: str
    path: str
    operation_id: str
    summary: str
    response: Optional[str]
    status: str = "200"
    request: Optional[str] = None
    errors: Dict[str, str] = {}
    query: List[str] = []


ROUTES: List[Route] = [
    Route("get", "/health", "health", "Service health check", "HealthResponse"),
    Route("get", "/canva/designs", "pullCanvaDesigns", "Replace cached designs with the Canva account's designs",
          "DesignsDocument", errors={"500": "Design source or storage failure"}),
    Route("get", "/designs", "listDesigns", "List cached designs", "DesignsDocument", query=["format"]),
    Route("get", "/designs/{id}", "getDesign", "Get one design", "Design", errors={"404": "Design not found"}),
    Route("post", "/schedules", "createSchedule", "Schedule a design for publishing", "Schedule",
          request="ScheduleCreateRequest",
          errors={"400": "Missing or invalid fields", "500": "Storage failure"}),
    Route("get", "/schedules", "listSchedules", "List schedules", "SchedulesDocument"),
    Route("get", "/schedules/{id}", "getSchedule", "Get one schedule", "Schedule", errors={"404": "Schedule not found"}),
    Route("put", "/schedules/{id}", "updateSchedule", "Replace schedule fields (id and createdAt are kept)",
          "Schedule", request="Schedule", errors={"400": "Invalid fields", "404": "Schedule not found"}),
    Route("delete", "/schedules/{id}", "deleteSchedule", "Delete a schedule and return it", "Schedule",
          errors={"404": "Schedule not found"}),
    Route("post", "/publish/instagram", "publishInstagram", "Record an Instagram publish attempt", "HistoryRecord",
          status="202", request="PublishInstagramRequest",
          errors={"400": "designId is required", "500": "Storage failure"}),
    Route("post", "/export/email", "exportEmail", "Build an email export descriptor", "ExportDescriptor",
          request="ExportEmailRequest", errors={"400": "designId missing or unsupported format"}),
    Route("get", "/history", "listHistory", "List publish attempts", "HistoryDocument", query=["status"]),
    Route("get", "/sales/trends", "salesTrends", "Monthly sales series", "SalesTrends"),
    Route("get", "/dashboard", "dashboard", "Dashboard aggregation", "Dashboard",
          errors={"500": "Dashboard could not be built"}),
]


def write_json_yaml(obj: dict, json_path: Path) -> None:
    json_path.parent.mkdir(parents=True, exist_ok=True)
    with json_path.open("w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)
    yaml_path = json_path.with_suffix(".yaml")
    with yaml_path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def generate_model_schemas() -> None:
    for filename, model in SCHEMA_MODELS.items():
        schema = model.model_json_schema()
        write_json_yaml(schema, SCHEMAS_DIR / filename)


def _json_content(schema_name: str) -> dict:
    return {"application/json": {"schema": {"$ref": f"#/components/schemas/{schema_name}"}}}


def _operation(route: Route) -> dict:
    op: dict = {"summary": route.summary, "operationId": route.operation_id}
    params = []
    if "{id}" in route.path:
        params.append({"in": "path", "name": "id", "schema": {"type": "string"}, "required": True})
    for name in route.query:
        params.append({"in": "query", "name": name, "schema": {"type": "string"}, "required": False})
    if params:
        op["parameters"] = params
    if route.request:
        op["requestBody"] = {"required": True, "content": _json_content(route.request)}
    responses = {route.status: {"description": "Success"}}
    if route.response:
        responses[route.status]["content"] = _json_content(route.response)
    for code, description in route.errors.items():
        responses[code] = {"description": description, "content": _json_content("ErrorResponse")}
    op["responses"] = responses
    return op


def build_openapi() -> dict:
    # Inline the model schemas as OpenAPI components
    _, defs = models_json_schema(
        [(model, "validation") for model in SCHEMA_MODELS.values()],
        ref_template="#/components/schemas/{model}",
    )
    components = {"schemas": defs.get("$defs", {})}
    paths: Dict[str, dict] = {}
    for route in ROUTES:
        paths.setdefault(route.path, {})[route.method] = _operation(route)

    spec = {
        "openapi": "3.0.3",
        "info": {
            "title": "HLS Canva Automation API",
            "version": "0.1.0",
            "description": "HTTP endpoints exposed by the Canva automation Functions app.",
        },
        "servers": [
            {"url": "http://localhost:7071/api", "description": "Local Functions host"}
        ],
        "paths": paths,
        "components": components,
    }
    return spec


def generate_openapi() -> None:
    spec = build_openapi()
    write_json_yaml(spec, SPECS / "openapi.json")


def main() -> None:
    generate_model_schemas()
    generate_openapi()
    print("Specs generated under src/specs/")


if __name__ == "__main__":
    main()
