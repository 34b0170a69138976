"""Configuration loading and management for next-refactor.

Configuration sources are merged in priority order:
    1. Defaults (defined in ScanConfig)
    2. Global config (~/.next-refactor.toml)
    3. Project config (./next-refactor.toml)
    4. Explicit config file (--config)
    5. Environment variables (NEXT_REFACTOR_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(branch="develop", top_n=5)
    >>> config.branch
    'develop'
    >>> config.top_n
    5
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["text", "rich", "json", "quiet"]

OUTPUT_FORMATS = ("text", "rich", "json", "quiet")
VERBOSITIES = ("quiet", "normal", "verbose")

ENV_PREFIX = "NEXT_REFACTOR_"
GLOBAL_CONFIG_NAME = ".next-refactor.toml"
PROJECT_CONFIG_NAME = "next-refactor.toml"


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for one scan.

    Attributes:
        branch: Revision passed to ``git rev-list --count``
        top_n: Maximum number of ranked files to report
        exclude_patterns: Extra glob exclusions (``.git`` is always added)
        output_format: Renderer for the ranked report
        git_executable: git binary to invoke
        git_timeout_seconds: Timeout for a single git query
        verbosity: Logging verbosity level
        log_file: Optional file that receives a copy of the log
    """

    branch: str = "main"
    top_n: int = 10
    exclude_patterns: list[str] = field(default_factory=list)
    output_format: OutputFormat = "text"

    git_executable: str = "git"
    git_timeout_seconds: int = 30

    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not isinstance(self.branch, str) or not self.branch.strip():
            raise InvalidConfigError("branch", self.branch, "branch must be a non-empty string")
        for key in ("top_n", "git_timeout_seconds"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigError(key, value, f"{key} must be an integer")
        if not isinstance(self.git_executable, str) or not self.git_executable:
            raise InvalidConfigError(
                "git_executable", self.git_executable, "git_executable must be a non-empty string"
            )
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise InvalidConfigError("log_file", self.log_file, "log_file must be a path string")
        if self.top_n < 1:
            raise InvalidConfigError("top_n", self.top_n, "top_n must be at least 1")
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format",
                self.output_format,
                f"expected one of {', '.join(OUTPUT_FORMATS)}",
            )
        if self.git_timeout_seconds < 1:
            raise InvalidConfigError(
                "git_timeout_seconds",
                self.git_timeout_seconds,
                "git_timeout_seconds must be at least 1",
            )
        if self.verbosity not in VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(VERBOSITIES)}"
            )
        if not isinstance(self.exclude_patterns, list) or not all(
            isinstance(p, str) for p in self.exclude_patterns
        ):
            raise InvalidConfigError(
                "exclude_patterns", self.exclude_patterns, "expected a list of strings"
            )


def load_config(config_file: Optional[Path] = None, **overrides) -> ScanConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options do not mask file values.
            ``exclude_patterns`` given here extend the configured list.

    Returns:
        Validated ScanConfig instance

    Raises:
        InvalidConfigError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise InvalidConfigError("config_file", config_file, "file not found")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    extra_patterns = overrides.pop("exclude_patterns", None)
    if extra_patterns:
        merged["exclude_patterns"] = list(merged.get("exclude_patterns", [])) + list(
            extra_patterns
        )

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ScanConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise InvalidConfigError("config", sorted(merged), str(e))


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from NEXT_REFACTOR_* environment variables.

    Supported environment variables:
        NEXT_REFACTOR_BRANCH: str
        NEXT_REFACTOR_TOP_N: int
        NEXT_REFACTOR_OUTPUT_FORMAT: text/rich/json/quiet
        NEXT_REFACTOR_GIT_EXECUTABLE: str
        NEXT_REFACTOR_GIT_TIMEOUT_SECONDS: int
        NEXT_REFACTOR_VERBOSITY: quiet/normal/verbose
        NEXT_REFACTOR_LOG_FILE: str

    Returns:
        Dict of field_name -> parsed_value for any NEXT_REFACTOR_* vars found.
    """
    type_hints = get_type_hints(ScanConfig)

    result: dict[str, Any] = {}

    for field_name in ScanConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Args:
        value: Raw string from environment
        type_hint: Type annotation from dataclass

    Returns:
        Parsed value or None if the type is not settable from the environment

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    # Lists (exclude_patterns) only come from TOML or --filter
    if origin is list or type_hint is list:
        return None

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return the parsed dict.

    A ``[next-refactor]`` table is used when present, otherwise the top level.

    Raises:
        InvalidConfigError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise InvalidConfigError("config_file", path, str(e))

    section = data.get("next-refactor")
    if isinstance(section, dict):
        return dict(section)
    return data
