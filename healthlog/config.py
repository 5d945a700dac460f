from __future__ import annotations

import os
from typing import List


class Settings:
    """Centralized configuration for the health log service."""

    def __init__(self) -> None:
        self.id_strategy: str = (os.environ.get("HEALTHLOG_ID_STRATEGY") or "clock").strip().lower()
        self.log_level: str = (os.environ.get("HEALTHLOG_LOG_LEVEL") or "INFO").strip().upper()
        self.host: str = os.environ.get("HEALTHLOG_HOST") or os.environ.get("HOST") or "127.0.0.1"
        port_raw = os.environ.get("HEALTHLOG_PORT") or os.environ.get("PORT") or "8000"
        try:
            self.port: int = int(port_raw)
        except ValueError:
            self.port = 8000

        cors = os.environ.get("HEALTHLOG_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
