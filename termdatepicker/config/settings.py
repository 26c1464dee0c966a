"""Settings management using Pydantic for type validation and configuration.

Priority order: explicit arguments > ``TERMDATEPICKER_*`` environment
variables > YAML config file > defaults.
"""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, Field, PrivateAttr, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.focus import Focus, Intent
from ..display.styles import Styles
from ..utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "TERMDATEPICKER_"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "termdatepicker" / "config.yaml"


def _coerce_focus(value: Any) -> Any:
    if isinstance(value, str):
        return Focus.parse(value)
    return value


class PickerOptions(BaseModel):
    """Construction options for a date picker.

    Start and end are applied independently; an inverted pair is accepted
    as given and simply admits no date.
    """

    time: Union[date, datetime] = Field(..., description="Reference date the view is centred on")
    start: Optional[Union[date, datetime]] = Field(default=None, description="Inclusive lower bound")
    end: Optional[Union[date, datetime]] = Field(default=None, description="Inclusive upper bound")
    focus: Focus = Field(default=Focus.CALENDAR, description="Initial focus")
    selected: bool = Field(default=False, description="Whether the reference date starts selected")

    @field_validator("focus", mode="before")
    @classmethod
    def validate_focus(cls, v: Any) -> Any:
        return _coerce_focus(v)


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    console_level: str = Field(
        default="WARNING",
        description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    console_colors: bool = Field(default=True, description="Color level names on capable terminals")
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_directory: Optional[str] = Field(default=None, description="Directory for the log file")
    file_prefix: str = Field(default="termdatepicker", description="Log file prefix")

    @field_validator("console_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class DisplaySettings(BaseModel):
    """Rendering settings for the console renderer."""

    colors: bool = Field(default=True, description="Use ANSI styles")
    cell_padding: int = Field(default=1, ge=0, le=4, description="Spaces on each side of a cell")
    row_spacing: int = Field(default=0, ge=0, le=2, description="Blank lines between week rows")

    def styles(self) -> Styles:
        if self.colors:
            return Styles(cell_padding=self.cell_padding, row_spacing=self.row_spacing)
        return Styles.plain(cell_padding=self.cell_padding, row_spacing=self.row_spacing)


class KeyMap(BaseModel):
    """Key names bound to each intent.

    Key names are those produced by the keyboard handler: ``up``, ``down``,
    ``left``, ``right``, ``tab``, ``shift+tab``, ``ctrl+c``, ``enter``,
    ``esc`` or a single printable character.
    """

    up: list[str] = Field(default_factory=lambda: ["up", "k"])
    down: list[str] = Field(default_factory=lambda: ["down", "j"])
    left: list[str] = Field(default_factory=lambda: ["left", "h"])
    right: list[str] = Field(default_factory=lambda: ["right", "l"])
    focus_prev: list[str] = Field(default_factory=lambda: ["shift+tab"])
    focus_next: list[str] = Field(default_factory=lambda: ["tab"])
    quit: list[str] = Field(default_factory=lambda: ["ctrl+c", "q"])

    @model_validator(mode="after")
    def validate_unique_keys(self) -> "KeyMap":
        """Reject a key bound to more than one intent."""
        seen: dict[str, str] = {}
        for intent in Intent:
            for key in getattr(self, intent.value):
                if key in seen and seen[key] != intent.value:
                    raise ValueError(f"Key {key!r} bound to both {seen[key]} and {intent.value}")
                seen[key] = intent.value
        return self

    def bindings(self) -> dict[str, Intent]:
        """Return a key name -> intent lookup table."""
        return {key: intent for intent in Intent for key in getattr(self, intent.value)}


class DatePickerSettings(BaseSettings):
    """Application settings for the date picker and its demo host."""

    initial_date: Optional[date] = Field(default=None, description="Start date, defaults to today")
    start_date: Optional[date] = Field(default=None, description="Inclusive lower bound")
    end_date: Optional[date] = Field(default=None, description="Inclusive upper bound")
    focus: Focus = Field(default=Focus.CALENDAR, description="Initial focus")
    selected: bool = Field(default=False, description="Start with the date selected")
    config_file: Optional[Path] = Field(default=None, description="YAML configuration file")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    keymap: KeyMap = Field(default_factory=KeyMap)

    _locked_fields: set[str] = PrivateAttr(default_factory=set)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)

        # Fields set explicitly or through the environment win over YAML
        self._locked_fields = set(self.model_fields_set)
        self._load_yaml_config()

    @field_validator("focus", mode="before")
    @classmethod
    def validate_focus(cls, v: Any) -> Any:
        return _coerce_focus(v)

    def _find_config_file(self) -> Optional[Path]:
        """Return the configuration file to load, if any."""
        if self.config_file is not None:
            if not self.config_file.exists():
                raise ConfigurationError("Config file not found", {"path": str(self.config_file)})
            return self.config_file
        if DEFAULT_CONFIG_PATH.exists():
            return DEFAULT_CONFIG_PATH
        return None

    def _load_yaml_config(self) -> None:
        """Load configuration from a YAML file if one is available.

        Raises:
            ConfigurationError: If the file cannot be read, parsed or validated
        """
        config_path = self._find_config_file()
        if config_path is None:
            return

        try:
            with config_path.open(encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError("Invalid YAML in config file", {"path": str(config_path), "error": str(e)}) from e
        except OSError as e:
            raise ConfigurationError("Cannot read config file", {"path": str(config_path), "error": str(e)}) from e

        if not isinstance(config_data, dict):
            raise ConfigurationError("Config file must contain a mapping", {"path": str(config_path)})

        try:
            self._load_picker_section(config_data.get("picker") or {})
            for section in ("logging", "display", "keymap"):
                self._load_nested_section(section, config_data.get(section) or {})
        except ValidationError as e:
            raise ConfigurationError("Invalid configuration value", {"path": str(config_path), "error": str(e)}) from e

        logger.debug(f"Loaded configuration from {config_path}")

    def _load_picker_section(self, section: dict) -> None:
        field_names = {
            "date": "initial_date",
            "start": "start_date",
            "end": "end_date",
            "focus": "focus",
            "selected": "selected",
        }
        for key, value in section.items():
            field_name = field_names.get(key)
            if field_name is None:
                logger.warning(f"Ignoring unknown picker option in config file: {key}")
                continue
            if field_name not in self._locked_fields:
                setattr(self, field_name, value)

    def _load_nested_section(self, name: str, section: dict) -> None:
        if not section:
            return
        current: BaseModel = getattr(self, name)
        # Keys set explicitly or through the environment win over YAML
        yaml_values = {key: value for key, value in section.items() if key not in current.model_fields_set}
        merged = {**current.model_dump(), **yaml_values}
        setattr(self, name, type(current).model_validate(merged))

    def picker_options(self, today: Optional[date] = None) -> PickerOptions:
        """Build picker construction options from these settings."""
        return PickerOptions(
            time=self.initial_date or today or date.today(),
            start=self.start_date,
            end=self.end_date,
            focus=self.focus,
            selected=self.selected,
        )


_settings_instance: Optional[DatePickerSettings] = None


def get_settings(**kwargs: Any) -> DatePickerSettings:
    """Get the global settings instance, creating it lazily if needed.

    Keyword arguments are only used when the instance is first created.

    Raises:
        ConfigurationError: If the settings cannot be loaded or validated
    """
    if globals()["_settings_instance"] is None:
        try:
            globals()["_settings_instance"] = DatePickerSettings(**kwargs)
        except ValidationError as e:
            raise ConfigurationError("Invalid settings", {"error": str(e)}) from e
    return globals()["_settings_instance"]


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None
