"""
Runtime configuration for the IR site renderer.

Values come from environment variables so the same build can point at a
staging or production CMS:

    IR_CMS_BASE_URL    CMS root URL (CMS integration is off when unset)
    IR_CMS_API_TOKEN   bearer token sent to the CMS
    IR_CMS_TIMEOUT     request timeout in seconds
    IR_HOST / IR_PORT  bind address for the web app
    IR_LOG_LEVEL       logging level name
"""

import os
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional


@dataclass
class Settings:
    cms_base_url: Optional[str] = None
    cms_api_token: Optional[str] = None
    cms_timeout: float = 30.0

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @property
    def cms_enabled(self) -> bool:
        return bool(self.cms_base_url)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        if d["cms_api_token"]:
            d["cms_api_token"] = "***"
        return d

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment."""
        return cls(
            cms_base_url=os.getenv("IR_CMS_BASE_URL") or None,
            cms_api_token=os.getenv("IR_CMS_API_TOKEN") or None,
            cms_timeout=float(os.getenv("IR_CMS_TIMEOUT", "30.0")),
            host=os.getenv("IR_HOST", "0.0.0.0"),
            port=int(os.getenv("IR_PORT", "8080")),
            log_level=os.getenv("IR_LOG_LEVEL", "INFO").upper(),
        )
