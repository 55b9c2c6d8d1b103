"""Configuration models for the focus timer CLI."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from focustimer_cli.models.focus.techniques import TECHNIQUES
from focustimer_cli.models.focus.ui import DEFAULT_THEME, THEMES


class TimerConfig(BaseModel):
    """Timer configuration."""

    technique: str = Field(default="classic", description="Default technique")
    auto_start_breaks: bool = Field(
        default=True, description="Automatically start break sessions"
    )

    @field_validator("technique")
    @classmethod
    def validate_technique(cls, v: str) -> str:
        """Only catalog techniques are accepted."""
        if v not in TECHNIQUES:
            raise ValueError(f"technique must be one of {list(TECHNIQUES)}")
        return v


class NotificationConfig(BaseModel):
    """Notification configuration."""

    sound: bool = Field(default=True, description="Ring the bell when a session ends")
    desktop: bool = Field(default=True, description="Show a completion message")


class UIConfig(BaseModel):
    """UI configuration."""

    theme: str = Field(default=DEFAULT_THEME)

    @field_validator("theme")
    @classmethod
    def validate_theme(cls, v: str) -> str:
        if v not in THEMES:
            raise ValueError(f"theme must be one of {sorted(THEMES)}")
        return v


class AppConfig(BaseModel):
    """Main focus timer configuration."""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
