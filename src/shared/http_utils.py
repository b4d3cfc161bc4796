import functools
import json
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

import azure.functions as func
from pydantic import BaseModel
from pydantic import ValidationError as ModelValidationError

from src.shared.logging_utils import error as log_error
from src.specs.common.errors import CanvaAutomationError, StorageError, ValidationError
from src.specs.models.http import ErrorResponse


def json_response(payload: Any, status_code: int = 200) -> func.HttpResponse:
    if isinstance(payload, BaseModel):
        body = payload.model_dump_json()
    else:
        body = json.dumps(payload, ensure_ascii=False)
    return func.HttpResponse(
        body=body,
        mimetype="application/json",
        status_code=status_code,
    )


def error_response(exc: CanvaAutomationError, message: Optional[str] = None) -> func.HttpResponse:
    """Translate an application error into an ``{error, details?}`` body.

    ``message`` replaces the error text with a route-specific summary; the
    original text then moves to ``details``.
    """
    if message:
        err = ErrorResponse(error=message, details=str(exc))
    else:
        err = ErrorResponse(error=str(exc))
    return json_response(err.to_body(), status_code=exc.status_code)


def read_json_body(req: func.HttpRequest) -> Dict[str, Any]:
    raw = req.get_body()
    if not raw:
        return {}
    try:
        data = req.get_json()
    except ValueError:
        raise ValidationError("Invalid JSON body")
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def missing_fields(body: Dict[str, Any], names: Iterable[str]) -> List[str]:
    return [name for name in names if body.get(name) is None or body.get(name) == ""]


def describe_validation_error(exc: ModelValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "__root__")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def _failure_summary(failure_message: Union[str, Dict[str, str], None], req: func.HttpRequest) -> str:
    if isinstance(failure_message, dict):
        failure_message = failure_message.get((req.method or "").upper())
    return failure_message or "Internal server error"


def http_endpoint(name: str, failure_message: Union[str, Dict[str, str], None] = None):
    """Wrap an HTTP function with the app's error translation.

    Application errors become their status code with ``{error}``; storage
    errors and anything unexpected become 500. ``failure_message`` is the
    route's summary for 500s, with the cause in ``details``. Routes serving
    several methods pass a mapping of HTTP method to summary.
    """

    def decorator(fn: Callable[[func.HttpRequest], func.HttpResponse]):
        @functools.wraps(fn)
        def wrapper(req: func.HttpRequest) -> func.HttpResponse:
            summary = _failure_summary(failure_message, req)
            try:
                return fn(req)
            except StorageError as exc:
                log_error(f"{name}:storage_error", path=exc.path, error=str(exc))
                return error_response(exc, summary)
            except CanvaAutomationError as exc:
                if exc.status_code >= 500:
                    log_error(f"{name}:error", code=exc.code, error=str(exc))
                    return error_response(exc, summary)
                return error_response(exc)
            except Exception as exc:
                log_error(f"{name}:unhandled", error=str(exc), errorType=type(exc).__name__)
                err = ErrorResponse(error=summary, details=str(exc))
                return json_response(err.to_body(), status_code=500)

        return wrapper

    return decorator
