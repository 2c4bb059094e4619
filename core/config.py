"""
Process-wide configuration, read once from the environment.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional


def _split_origins(raw: str) -> List[str]:
    return [o.strip().rstrip("/") for o in raw.split(",") if o.strip()]


@dataclass(frozen=True)
class Settings:
    jwt_secret: str
    frontend_url: str = "http://localhost:3000"
    database_url: Optional[str] = None

    email_user: Optional[str] = None
    email_password: Optional[str] = None
    email_from: Optional[str] = None
    smtp_server: str = "smtp.gmail.com"
    smtp_port: int = 587

    cloudinary_cloud_name: Optional[str] = None
    cloudinary_api_key: Optional[str] = None
    cloudinary_api_secret: Optional[str] = None

    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        secret = os.getenv("JWT_SECRET")
        if not secret:
            raise RuntimeError("JWT_SECRET is not set. Please configure it in the environment.")

        frontend_url = (os.getenv("FRONTEND_URL") or "http://localhost:3000").rstrip("/")
        return cls(
            jwt_secret=secret,
            frontend_url=frontend_url,
            database_url=os.getenv("DATABASE_URL"),
            email_user=os.getenv("EMAIL_USER"),
            email_password=os.getenv("EMAIL_PASSWORD"),
            email_from=os.getenv("EMAIL_FROM"),
            smtp_server=os.getenv("SMTP_SERVER", "smtp.gmail.com"),
            smtp_port=int(os.getenv("SMTP_PORT", "587")),
            cloudinary_cloud_name=os.getenv("CLOUDINARY_CLOUD_NAME"),
            cloudinary_api_key=os.getenv("CLOUDINARY_API_KEY"),
            cloudinary_api_secret=os.getenv("CLOUDINARY_API_SECRET"),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", frontend_url)),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_dir=os.getenv("LOG_DIR") or None,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build the settings once per process."""
    return Settings.from_env()


__all__ = ["Settings", "get_settings"]
