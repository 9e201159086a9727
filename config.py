"""
Central configuration for the division game and its search engine.
Pydantic models give type-safe, validated settings; the same values can be
read from environment variables or a JSON file.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


Algorithm = Literal["minimax", "alphabeta"]
FirstPlayer = Literal["human", "computer"]

# Starting numbers must divide evenly by 2, 3 and 4.
START_DIVISOR = 12


class EngineSettings(BaseModel):
    """Search engine configuration settings."""

    default_depth: int = Field(default=5, ge=1, le=12, description="Search depth in ply")
    algorithm: Algorithm = Field(default="minimax", description="Search algorithm used by the AI")

    @field_validator('default_depth', mode='before')
    @classmethod
    def validate_int_fields(cls, v):
        return int(v)

    @field_validator('algorithm', mode='before')
    @classmethod
    def normalize_algorithm(cls, v):
        return str(v).strip().lower().replace("-", "")


class GameRulesSettings(BaseModel):
    """Game setup settings."""

    first_player: FirstPlayer = Field(default="human", description="Who moves first")
    start_min: int = Field(default=20000, ge=12, description="Lowest possible starting number")
    start_max: int = Field(default=30000, ge=12, description="Highest possible starting number")

    @field_validator('first_player', mode='before')
    @classmethod
    def normalize_first_player(cls, v):
        return str(v).strip().lower()

    @model_validator(mode='after')
    def check_start_range(self) -> 'GameRulesSettings':
        if self.start_min > self.start_max:
            raise ValueError("start_min must not exceed start_max")
        first = -(-self.start_min // START_DIVISOR) * START_DIVISOR
        if first > self.start_max:
            raise ValueError(
                f"start range [{self.start_min}, {self.start_max}] holds no multiple of {START_DIVISOR}"
            )
        return self


class UISettings(BaseModel):
    """Terminal display settings."""

    ai_delay_ms: int = Field(default=500, ge=0, description="Pause before the computer moves")
    show_stats: bool = Field(default=True, description="Print search statistics after AI moves")

    @field_validator('show_stats', mode='before')
    @classmethod
    def validate_bool_fields(cls, v):
        if isinstance(v, str):
            return v.strip().lower() in ('1', 'true', 'yes', 'on')
        return bool(v)


class LoggingSettings(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_to_file: bool = Field(default=False, description="Write logs to file")
    log_file_path: str = Field(default="divgame.log", description="Log file path")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class DivGameConfig(BaseModel):
    """Main configuration model for the division game."""

    engine: EngineSettings = Field(default_factory=EngineSettings)
    rules: GameRulesSettings = Field(default_factory=GameRulesSettings)
    ui: UISettings = Field(default_factory=UISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    version: str = Field(default="1.0.0", description="Configuration version")
    config_file: Optional[str] = Field(default=None, description="Path to config file")

    @classmethod
    def from_env(cls) -> 'DivGameConfig':
        """Create configuration from environment variables."""
        return cls(
            engine=EngineSettings(
                default_depth=int(os.getenv('DIVGAME_DEPTH', '5')),
                algorithm=os.getenv('DIVGAME_ALGORITHM', 'minimax'),
            ),
            rules=GameRulesSettings(
                first_player=os.getenv('DIVGAME_FIRST_PLAYER', 'human'),
                start_min=int(os.getenv('DIVGAME_START_MIN', '20000')),
                start_max=int(os.getenv('DIVGAME_START_MAX', '30000')),
            ),
            ui=UISettings(
                ai_delay_ms=int(os.getenv('DIVGAME_AI_DELAY_MS', '500')),
            ),
            logging=LoggingSettings(
                log_level=os.getenv('DIVGAME_LOG_LEVEL', 'INFO'),
                log_to_file=os.getenv('DIVGAME_LOG_FILE', 'false').lower() == 'true',
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'engine': self.engine.model_dump(),
            'rules': self.rules.model_dump(),
            'ui': self.ui.model_dump(),
            'logging': self.logging.model_dump(),
            'version': self.version,
            'config_file': self.config_file,
        }

    def save_to_file(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        config_dict = self.to_dict()
        config_dict['config_file'] = filepath

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'DivGameConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls(
            engine=EngineSettings(**data.get('engine', {})),
            rules=GameRulesSettings(**data.get('rules', {})),
            ui=UISettings(**data.get('ui', {})),
            logging=LoggingSettings(**data.get('logging', {})),
            version=data.get('version', '1.0.0'),
            config_file=filepath,
        )

    def update_from_dict(self, updates: Dict[str, Any]) -> None:
        """Update configuration sections from a nested dictionary.

        Each touched section is rebuilt so its validators run again.
        """
        for section, settings in updates.items():
            if hasattr(self, section) and isinstance(settings, dict):
                section_model = getattr(self, section)
                merged = section_model.model_dump()
                merged.update({k: v for k, v in settings.items() if k in merged})
                setattr(self, section, type(section_model)(**merged))


# Global configuration instance
_config: Optional[DivGameConfig] = None


def get_config() -> DivGameConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = DivGameConfig.from_env()
    return _config


def load_config_from_file(filepath: str) -> DivGameConfig:
    """Load configuration from file and update global instance."""
    global _config
    _config = DivGameConfig.load_from_file(filepath)
    return _config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = None


def get_engine_settings() -> EngineSettings:
    return get_config().engine


def get_game_rules() -> GameRulesSettings:
    return get_config().rules


def get_ui_settings() -> UISettings:
    return get_config().ui


def get_logging_settings() -> LoggingSettings:
    return get_config().logging


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging once, from the logging settings unless a level is given."""
    if getattr(setup_logging, "_configured", False):
        return
    settings = get_logging_settings()
    level_name = (level or settings.log_level).upper()
    handlers = [logging.StreamHandler()]
    if settings.log_to_file:
        handlers.append(logging.FileHandler(settings.log_file_path))
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
