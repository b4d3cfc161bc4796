import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from src.specs.common.errors import ConfigurationError


class AppSettings(BaseModel):
    """Runtime configuration read from Functions app settings.

    Locally these come from ``local.settings.json``; in Azure from the
    app's configuration blade. Every value has a default so the API runs
    with no settings at all.
    """

    dataDir: Path = Field(default=Path("data"))
    serviceName: str = "HLS Canva Automation API"
    canvaApiBase: str = "https://api.canva.com"
    canvaClientId: Optional[str] = None
    canvaClientSecret: Optional[str] = None
    instagramAccessToken: Optional[str] = None
    exportBaseUrl: str = "https://example.com/export"

    @property
    def canva_configured(self) -> bool:
        return bool(self.canvaClientId and self.canvaClientSecret)

    @classmethod
    def from_env(cls) -> "AppSettings":
        values = {
            "dataDir": os.getenv("CANVA_DATA_DIR"),
            "serviceName": os.getenv("SERVICE_NAME"),
            "canvaApiBase": os.getenv("CANVA_API_BASE"),
            "canvaClientId": os.getenv("CANVA_CLIENT_ID"),
            "canvaClientSecret": os.getenv("CANVA_CLIENT_SECRET"),
            "instagramAccessToken": os.getenv("INSTAGRAM_ACCESS_TOKEN"),
            "exportBaseUrl": os.getenv("EXPORT_BASE_URL"),
        }
        try:
            return cls(**{k: v for k, v in values.items() if v})
        except Exception as exc:
            raise ConfigurationError("Invalid application settings", details={"error": str(exc)})


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings.from_env()
