"""Configuration loading for the SOLID principles demos.

Configuration sources are merged in priority order:
    1. Defaults (defined in DemoConfig)
    2. Project config (./solid-principles.toml)
    3. Explicit config file
    4. Environment variables (SOLID_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, output_dir="out")
    >>> config.verbosity
    'verbose'
    >>> config.output_path
    PosixPath('out')
"""

from __future__ import annotations

import codecs
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_args

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

PROJECT_CONFIG_NAME = "solid-principles.toml"
ENV_PREFIX = "SOLID_"


@dataclass(frozen=True)
class DemoConfig:
    """Settings shared by the demos and the CLI.

    Attributes:
        output_dir: Directory that demo artifacts are written into
        report_file: Fixed file name used by the monolithic Report
        default_file: File name FileManager.save_to_file falls back to
        encoding: Text encoding for written reports
        verbosity: Logging verbosity level
        log_file: Optional file that also receives log records
    """

    output_dir: str = "."
    report_file: str = "Report.txt"
    default_file: str = "newFile.txt"
    encoding: str = "utf-8"
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        # TOML can hand us any scalar, so check types before values
        for key in ("output_dir", "report_file", "default_file", "encoding", "verbosity"):
            value = getattr(self, key)
            if not isinstance(value, str):
                raise InvalidConfigError(key, value, "expected a string")
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise InvalidConfigError("log_file", self.log_file, "expected a string")

        for key in ("report_file", "default_file"):
            value = getattr(self, key)
            if not value:
                raise InvalidConfigError(key, value, "file name must not be empty")
            if Path(value).name != value:
                raise InvalidConfigError(key, value, "must be a bare file name")

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise InvalidConfigError("encoding", self.encoding, "unknown text encoding")

        if self.verbosity not in get_args(Verbosity):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    @property
    def output_path(self) -> Path:
        """Get the output directory as a Path."""
        return Path(self.output_dir)

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


def load_config(config_file: Optional[Path] = None, **overrides) -> DemoConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated DemoConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing, or a
            value fails validation
    """
    merged: dict = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Boolean CLI flags collapse into verbosity
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return DemoConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from SOLID_* environment variables.

    Supported environment variables:
        SOLID_OUTPUT_DIR
        SOLID_REPORT_FILE
        SOLID_DEFAULT_FILE
        SOLID_ENCODING
        SOLID_VERBOSITY: quiet/normal/verbose
        SOLID_LOG_FILE

    Returns:
        Dict of field_name -> value for any SOLID_* vars found.
    """
    result: dict[str, Any] = {}
    for field_name in DemoConfig.__dataclass_fields__:
        env_value = os.environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if env_value is None:
            continue
        # Every field is string-valued
        result[field_name] = env_value

    return result


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict."""
    with open(path, "rb") as f:
        return tomllib.load(f)
