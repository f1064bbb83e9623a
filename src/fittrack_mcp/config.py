"""Environment-driven settings for the fittrack MCP server."""

import os

from pydantic import BaseModel


class Settings(BaseModel):
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.0-flash"
    gemini_timeout_seconds: float = 30
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            gemini_api_key=os.environ.get("GEMINI_API_KEY") or None,
            gemini_model=os.environ.get("GEMINI_MODEL", "gemini-2.0-flash"),
            gemini_timeout_seconds=os.environ.get("GEMINI_TIMEOUT_SECONDS", "30"),
            log_level=os.environ.get("FITTRACK_LOG_LEVEL", "WARNING").upper(),
        )
