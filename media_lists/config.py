"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: HTTP fetching and pagination settings
- LoggingConfig: Logging behavior
- OutputConfig: Where and under which names JSON files are written
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

import yaml


@dataclass
class FetchConfig:
    """Configuration for fetching list pages.

    Attributes:
        timeout_seconds: HTTP request timeout
        retries: Retry attempts after a failed request (0 = fail on first error)
        trust_env: Whether to respect system proxy settings
        user_agent: HTTP User-Agent header string
        max_pages: Upper bound on pages followed for a single list
    """

    timeout_seconds: float = 20.0
    retries: int = 0
    trust_env: bool = True
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
    max_pages: int = 500


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file inside the output directory
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "media_lists.jsonl"


@dataclass
class OutputConfig:
    """Configuration for saved JSON files.

    Attributes:
        directory: Directory for files saved under a generated name
        entries_prefix: Filename prefix for saved entry sets
        videos_prefix: Filename prefix for saved watch-history sets
        timestamp_format: strftime pattern appended to the prefix
    """

    directory: str = "."
    entries_prefix: str = "my_titles_"
    videos_prefix: str = "yt_videos_"
    timestamp_format: str = "%d-%m-%Y_%H-%M-%S"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


DEFAULT_CONFIG = AppConfig()


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(DEFAULT_CONFIG, raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        fetch=FetchConfig(**data["fetch"]),
        logging=LoggingConfig(**data["logging"]),
        output=OutputConfig(**data["output"]),
    )
