"""Configuration Management Package"""

import json
import os
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

# Environment variables that override the config file
ENV_OVERRIDES = {
    "GITCC_FZF": "fzf_command",
}


@dataclass
class Config:
    """User configuration with sensible defaults."""
    fzf_command: str = "fzf"
    fzf_height: str = "40%"
    fzf_prompt: str = "commit type> "
    include_body: bool = False
    no_verify: bool = False
    max_subject_length: int = 72

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.fzf_command, str) or not self.fzf_command.strip():
            warnings.append(f"Invalid fzf_command '{self.fzf_command}', using '{defaults.fzf_command}'")
            self.fzf_command = defaults.fzf_command

        if not isinstance(self.fzf_height, str) or not self.fzf_height.strip():
            warnings.append(f"Invalid fzf_height '{self.fzf_height}', using '{defaults.fzf_height}'")
            self.fzf_height = defaults.fzf_height

        if not isinstance(self.fzf_prompt, str):
            warnings.append(f"Invalid fzf_prompt '{self.fzf_prompt}', using '{defaults.fzf_prompt}'")
            self.fzf_prompt = defaults.fzf_prompt

        for name in ("include_body", "no_verify"):
            if not isinstance(getattr(self, name), bool):
                warnings.append(f"Invalid {name} '{getattr(self, name)}', using {str(getattr(defaults, name)).lower()}")
                setattr(self, name, getattr(defaults, name))

        # bool is an int subclass; reject it explicitly
        if (not isinstance(self.max_subject_length, int) or isinstance(self.max_subject_length, bool)
                or self.max_subject_length <= 0):
            warnings.append(f"Invalid max_subject_length '{self.max_subject_length}', using {defaults.max_subject_length}")
            self.max_subject_length = defaults.max_subject_length

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Manages loading configuration.

    Looks in order: .gitccrc in the current directory, .gitccrc in the home
    directory, built-in defaults. Environment overrides apply on top.
    """

    CONFIG_FILENAME = ".gitccrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        self._config = self._load_file()
        self._apply_env(self._config)
        return self._config

    def _load_file(self) -> Config:
        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                self._config_path = path
                return self._load_from_file(path)
        return Config()

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()
        if not isinstance(data, dict):
            print(f"Warning: Could not load {path}: expected a JSON object", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    @staticmethod
    def _apply_env(config: Config) -> None:
        for env_name, field_name in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                setattr(config, field_name, value)

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "ENV_OVERRIDES",
    "load_config",
    "get_config_path",
]
