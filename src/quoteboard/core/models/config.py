"""Configuration Pydantic models: QuoteboardConfig, HttpConfig, SystemConfig."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HttpConfig(BaseModel):
    """Parameters for the outgoing quote request."""

    model_config = ConfigDict(extra="forbid")

    request_timeout_seconds: float = Field(
        default=6.0, gt=0, description="Per-request timeout for the quotes endpoint"
    )
    user_agent: str = Field(default="Quoteboard/1.0", description="User-Agent header value")


class SystemConfig(BaseModel):
    """Non-network runtime settings."""

    model_config = ConfigDict(extra="forbid")

    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: str = Field(default="logs", description="Directory for rotating log files")
    event_bus_queue_size: int = Field(default=1000, gt=0, description="Max queued events")
    webui_port: int = Field(default=8080, description="NiceGUI listen port")
    discard_stale_results: bool = Field(
        default=False,
        description="Drop results of refreshes overtaken by a newer completed one",
    )


class QuoteboardConfig(BaseModel):
    """Top-level configuration loaded from ``quoteboard_config.json``."""

    model_config = ConfigDict(extra="forbid")

    http: HttpConfig = Field(default_factory=HttpConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)
