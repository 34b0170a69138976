"""Shared CLI helpers."""

import os
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ..config import ScanConfig, load_config
from ..exceptions import PathResolutionError

console = Console()
err_console = Console(stderr=True, soft_wrap=True)

USAGE = "Usage: next-refactor [--branch NAME] [--filter PATTERN]... [-n COUNT]"


def resolve_root() -> Path:
    """The scan root is always the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as e:
        raise PathResolutionError(Path("."), f"cannot read working directory: {e}") from e
    try:
        return Path(cwd).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise PathResolutionError(Path(cwd), str(e)) from e


def resolve_config(
    config: Optional[Path] = None,
    branch: Optional[str] = None,
    filters: Optional[List[str]] = None,
    top_n: Optional[int] = None,
    output_format: Optional[str] = None,
    verbose: bool = False,
    log_file: Optional[str] = None,
) -> ScanConfig:
    """Build the scan configuration from CLI options."""
    overrides = {
        "branch": branch,
        "top_n": top_n,
        "output_format": output_format,
        "log_file": log_file,
        "exclude_patterns": filters or [],
    }
    if verbose:
        overrides["verbose"] = True
    return load_config(config_file=config, **overrides)
