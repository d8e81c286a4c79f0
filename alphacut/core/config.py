from __future__ import annotations

import os
from dataclasses import dataclass, field

from alphacut.domain.enums import SegmentationMode


@dataclass(slots=True)
class Settings:
    app_name: str = "Alphacut"
    host: str = field(default_factory=lambda: os.getenv("AC_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("AC_PORT", "8766")))
    localhost_only: bool = field(default_factory=lambda: os.getenv("AC_LOCALHOST_ONLY", "1") == "1")
    max_upload_bytes: int = field(default_factory=lambda: int(os.getenv("AC_MAX_UPLOAD_BYTES", str(20 * 1024 * 1024))))
    max_pixels: int = field(default_factory=lambda: int(os.getenv("AC_MAX_PIXELS", "40000000")))
    default_mode: str = field(default_factory=lambda: os.getenv("AC_DEFAULT_MODE", SegmentationMode.SEGMENT.value))
    log_level: str = field(default_factory=lambda: os.getenv("AC_LOG_LEVEL", "INFO"))
    environment: str = field(default_factory=lambda: os.getenv("AC_ENV", "dev"))

    @property
    def mode(self) -> SegmentationMode:
        return SegmentationMode(self.default_mode)


def get_settings() -> Settings:
    settings = Settings()
    local_hosts = {"127.0.0.1", "localhost"}

    if settings.default_mode not in {m.value for m in SegmentationMode}:
        raise ValueError(f"Unknown AC_DEFAULT_MODE {settings.default_mode!r}.")

    if settings.max_upload_bytes <= 0 or settings.max_pixels <= 0:
        raise ValueError("AC_MAX_UPLOAD_BYTES and AC_MAX_PIXELS must be positive.")

    if settings.localhost_only and settings.host not in local_hosts:
        raise ValueError("Refusing non-localhost bind while AC_LOCALHOST_ONLY=1.")

    return settings
