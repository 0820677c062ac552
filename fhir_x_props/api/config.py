"""API configuration settings."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class APIConfig:
    """Configuration for the FHIR x Props API."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # Response rendering
    json_indent: int = 2

    @classmethod
    def from_env(cls) -> APIConfig:
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("FHIR_X_PROPS_HOST", "0.0.0.0"),
            port=int(os.getenv("FHIR_X_PROPS_PORT", "8000")),
            debug=os.getenv("FHIR_X_PROPS_DEBUG", "").lower() in ("true", "1", "yes"),
            log_level=os.getenv("FHIR_X_PROPS_LOG_LEVEL", "INFO").upper(),
            json_indent=int(os.getenv("FHIR_X_PROPS_JSON_INDENT", "2")),
        )


# Global config instance
_config: APIConfig | None = None


def get_config() -> APIConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = APIConfig.from_env()
    return _config
