"""Top-level roview configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import ROVIEW_HOME_EXT
from .._validation_detail import validation_detail
from .HandlerConfig import HandlerConfig
from .LogConfig import LogConfig

CONFIG_FILE_NAME = "config.json"


class RoConfig(BaseModel):
    """Top-level configuration: logging and document handling.

    The configuration lives in ``config.json`` under the roview home
    directory. ``ROVIEW_HOME`` names that directory directly; otherwise it is
    ``.roview`` under the user's home.
    """

    model_config = ConfigDict(extra="forbid")

    log: LogConfig = Field(default_factory=LogConfig)
    handler: HandlerConfig = Field(default_factory=HandlerConfig)

    @staticmethod
    def home_dir(*parts: str) -> Path:
        """Path of the roview home directory, or of ``parts`` joined under it."""
        override = os.environ.get("ROVIEW_HOME")
        if override:
            base = Path(override).expanduser().resolve()
        else:
            user_home = os.environ.get("HOME")
            base = (Path(user_home) if user_home else Path.home()) / ROVIEW_HOME_EXT
        return base.joinpath(*parts)

    @classmethod
    def config_path(cls) -> Path:
        return cls.home_dir(CONFIG_FILE_NAME)

    @classmethod
    def load(cls, path: Path | None = None) -> "RoConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        if path is None:
            path = cls.config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: expected an object in {path}")

        try:
            return cls(**raw)
        except ValidationError as e:
            raise ValueError(f"Configuration validation error: {validation_detail(e)}") from e

    def to_dict(self) -> dict[str, Any]:
        return {
            "log": self.log.model_dump(),
            "handler": self.handler.model_dump(),
        }
