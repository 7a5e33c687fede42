"""
Configuration management using Pydantic Settings.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from relayview.core.exceptions import ConfigurationError

DEFAULT_API_URL = "https://api.mullvad.net/app/v1/relays"


class TableStyle(BaseModel):
    """Colours used when drawing the relay table.

    Values are Rich colour definitions, e.g. ``color(240)`` or ``#5f00d7``.
    """

    border_color: str = "color(240)"
    selected_foreground: str = "color(229)"
    selected_background: str = "color(57)"
    header_bold: bool = False

    @property
    def selected(self) -> str:
        """Rich style string for the highlighted row."""
        return f"{self.selected_foreground} on {self.selected_background}"

    @property
    def header(self) -> str:
        """Rich style string for the header row."""
        return "bold" if self.header_bold else "none"


class Settings(BaseSettings):
    """
    Application settings with environment variable support.
    
    Environment variables are prefixed with RELAYVIEW_.
    For example: RELAYVIEW_DEBUG=true, RELAYVIEW_STYLE__BORDER_COLOR=red
    """
    
    # Application settings
    app_name: str = "Relay View"
    debug: bool = False
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    
    # Data source
    api_url: str = DEFAULT_API_URL
    request_timeout: float = Field(default=10.0, gt=0)
    
    # TUI settings
    spinner: str = "moon"
    table_height: int = Field(default=11, ge=1)
    style: TableStyle = Field(default_factory=TableStyle)
    
    model_config = SettingsConfigDict(
        env_prefix="RELAYVIEW_",
        env_nested_delimiter="__",
        case_sensitive=False,
        validate_default=True,
    )
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {', '.join(valid_levels)}")
        return v
    
    @field_validator("spinner")
    @classmethod
    def validate_spinner(cls, v: str) -> str:
        """Validate spinner name against the known spinners."""
        from relayview.tui.spinner import SPINNERS

        v = v.lower()
        if v not in SPINNERS:
            raise ValueError(f"Unknown spinner. Must be one of: {', '.join(sorted(SPINNERS))}")
        return v
    
    @field_validator("log_file")
    @classmethod
    def expand_log_file(cls, v: Optional[Path]) -> Optional[Path]:
        """Expand ``~`` in the log file path."""
        return v.expanduser() if v is not None else None


def load_settings(**overrides) -> Settings:
    """Build settings from the environment, raising ConfigurationError on bad values."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            f"Invalid settings: {e.error_count()} error(s) in {', '.join(fields)}",
            details={"errors": e.errors(include_url=False)},
        ) from e
