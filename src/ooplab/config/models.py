"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ooplab.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ooplab.domain.types import Channel


class ShapesConfig(BaseModel):
    """[shapes] section."""

    model_config = {"frozen": True}

    precision: int = Field(default=2, ge=0, le=12)
    allow_degenerate: bool = True
    tolerance: float = Field(default=1e-9, gt=0)


class NotifyConfig(BaseModel):
    """[notify] section."""

    model_config = {"frozen": True}

    channels: list[str] = Field(default_factory=lambda: [c.value for c in Channel])
    stop_on_error: bool = False
    email_to: str = "admin@localhost"
    chat_room: str = "#general"
    sms_to: str = "+0000000000"

    @field_validator("channels")
    @classmethod
    def _normalize_channels(cls, value: list[str]) -> list[str]:
        return [c.strip().lower() for c in value if c.strip()]

    def recipient_for(self, channel: str) -> str | None:
        """Configured recipient for *channel*, or None for the notifier default."""
        return {
            Channel.EMAIL.value: self.email_to,
            Channel.CHAT.value: self.chat_room,
            Channel.SMS.value: self.sms_to,
        }.get(channel)


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
