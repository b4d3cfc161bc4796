import logging
from typing import Any, Dict


_LOGGER = logging.getLogger("canva_automation")


def log(level: int, message: str, **dimensions: Any) -> None:
    dims: Dict[str, Any] = {k: v for k, v in dimensions.items() if v is not None}
    try:
        _LOGGER.log(level, message, extra={"custom_dimensions": dims})
    except Exception:
        # Fallback if extra/custom_dimensions not supported in the environment
        _LOGGER.log(level, f"{message} | {dims}")


def info(message: str, **dimensions: Any) -> None:
    log(logging.INFO, message, **dimensions)


def warning(message: str, **dimensions: Any) -> None:
    log(logging.WARNING, message, **dimensions)


def error(message: str, **dimensions: Any) -> None:
    log(logging.ERROR, message, **dimensions)
