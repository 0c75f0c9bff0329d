"""Gate requirements configuration and its YAML loader."""
from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from src.shared.constants import DEFAULT_MIN_HOST_VERSION, DEFAULT_MIN_RUNTIME_VERSION
from src.shared.errors import ConfigurationError


class RequirementsConfig(BaseModel):
    """Minimum versions and identifying metadata for one extension.

    Built from the bootstrap mapping ``{title, php, wp, file}``.  Only those
    keys override the defaults; anything else is ignored.  Version strings
    are not checked for syntax here.
    """
    display_name: str = Field(default="", validation_alias="title")
    min_runtime_version: str = Field(
        default=DEFAULT_MIN_RUNTIME_VERSION, validation_alias="php"
    )
    min_host_version: str = Field(
        default=DEFAULT_MIN_HOST_VERSION, validation_alias="wp"
    )
    identifier_path: str = Field(default="", validation_alias="file")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
        "frozen": True,
    }

    @field_validator(
        "display_name",
        "min_runtime_version",
        "min_host_version",
        "identifier_path",
        mode="before",
    )
    @classmethod
    def _coerce_scalar(cls, value: Any) -> Any:
        if isinstance(value, float):
            # 5.10 and 5.1 are the same float
            raise ValueError(
                f"version {value!r} given as a number; quote it as a string"
            )
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any] | None) -> RequirementsConfig:
        """Build a config from a bootstrap mapping.

        Keys whose value is ``None`` are treated as absent.

        Raises:
            ConfigurationError: If *settings* is not a mapping or a value
                is not a string (integers are accepted).
        """
        if settings is None:
            return cls()
        if not isinstance(settings, Mapping):
            raise ConfigurationError(
                detail=(
                    "Requirements must be a mapping, got "
                    f"{type(settings).__name__}"
                )
            )
        present = {k: v for k, v in settings.items() if v is not None}
        try:
            return cls.model_validate(present)
        except ValidationError as exc:
            raise ConfigurationError(
                detail=f"Invalid requirements: {exc}"
            ) from exc


def load_requirements_config(path: Path | str | None = None) -> RequirementsConfig:
    """Load gate requirements from a YAML file.

    Args:
        path: Path to a YAML file holding ``title``, ``php``, ``wp`` and
              ``file`` keys.  If ``None`` or the file does not exist,
              returns full defaults.  Every scalar is read as a string.

    Returns:
        Populated requirements configuration.

    Raises:
        ConfigurationError: If the file is not valid YAML or its top level
            is not a mapping.
    """
    if path is None:
        return RequirementsConfig()

    path = Path(path)
    if not path.exists():
        return RequirementsConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            # BaseLoader keeps every scalar a string: `wp: 5.10` stays "5.10"
            raw = yaml.load(f, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            detail=f"Invalid YAML in requirements file {path}: {exc}"
        ) from exc

    return RequirementsConfig.from_mapping(raw or {})
