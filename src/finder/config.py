"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from finder.errors import ConfigError
from finder.policy import ExclusionSet

DEFAULT_FUZZY_THRESHOLD = 4
MAX_FUZZY_THRESHOLD = 64

DEFAULT_TEXT_EXTENSIONS = (
    ".txt",
    ".log",
    ".xml",
    ".json",
    ".md",
    ".rst",
    ".csv",
    ".ini",
    ".cfg",
    ".toml",
    ".yaml",
    ".yml",
    ".html",
    ".css",
    ".py",
    ".cs",
    ".js",
    ".ts",
    ".java",
    ".c",
    ".h",
    ".cpp",
    ".go",
    ".rs",
    ".sh",
)


@dataclass(slots=True, frozen=True)
class SearchConfig:
    """Name and line matching settings."""

    fuzzy_threshold: int


@dataclass(slots=True, frozen=True)
class ContentConfig:
    """Content scanning settings."""

    text_extensions: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class FinderConfig:
    """Fully merged finder configuration."""

    search: SearchConfig
    content: ContentConfig
    exclusions: ExclusionSet

    def to_public_dict(self) -> dict[str, object]:
        """Return serializable config snapshot for event logs."""
        return {
            "search": {
                "fuzzy_threshold": self.search.fuzzy_threshold,
            },
            "content": {
                "text_extensions": list(self.content.text_extensions),
            },
            "exclusions": {
                "excluded_prefixes": list(self.exclusions.excluded_prefixes),
                "exception_prefixes": list(self.exclusions.exception_prefixes),
            },
        }


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Optional command-line overrides applied at highest precedence."""

    fuzzy_threshold: int | None = None


def default_config() -> FinderConfig:
    """Build the built-in default configuration."""
    return FinderConfig(
        search=SearchConfig(fuzzy_threshold=DEFAULT_FUZZY_THRESHOLD),
        content=ContentConfig(text_extensions=DEFAULT_TEXT_EXTENSIONS),
        exclusions=ExclusionSet(),
    )


def load_config_file(config_path: Path) -> dict[str, object]:
    """Load a TOML config file."""
    try:
        with config_path.open("rb") as handle:
            payload = tomllib.load(handle)
    except FileNotFoundError as error:
        raise ConfigError(f"Config file not found: {config_path}") from error
    except tomllib.TOMLDecodeError as error:
        raise ConfigError(f"Config file {config_path} is not valid TOML: {error}") from error
    return payload


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"Config section '{key}' must be a table.")
    return value


def _extensions(value: object, section: str, field: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ConfigError(f"Config field '{section}.{field}' must be a list of strings.")
    output: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item:
            raise ConfigError(f"Config field '{section}.{field}' must contain only strings.")
        lowered = item.lower()
        output.append(lowered if lowered.startswith(".") else f".{lowered}")
    return tuple(output)


def merge_config(
    base: FinderConfig, file_payload: dict[str, object], overrides: CliOverrides
) -> FinderConfig:
    """Merge defaults, config file, then command-line overrides."""
    if "exclusions" in file_payload:
        raise ConfigError(
            "Config section 'exclusions' is not supported; "
            "the exclusion policy is fixed and cannot be configured."
        )
    search_payload = _get_table(file_payload, "search")
    content_payload = _get_table(file_payload, "content")

    fuzzy_threshold = _optional_threshold(
        search_payload.get("fuzzy_threshold"),
        "search.fuzzy_threshold",
        base.search.fuzzy_threshold,
    )

    text_extensions = base.content.text_extensions
    if "text_extensions" in content_payload:
        text_extensions = _extensions(
            content_payload["text_extensions"], "content", "text_extensions"
        )

    merged = FinderConfig(
        search=SearchConfig(fuzzy_threshold=fuzzy_threshold),
        content=ContentConfig(text_extensions=text_extensions),
        exclusions=base.exclusions,
    )
    return apply_cli_overrides(merged, overrides)


def apply_cli_overrides(config: FinderConfig, overrides: CliOverrides) -> FinderConfig:
    """Apply command-line overrides at highest precedence."""
    fuzzy_threshold = _optional_threshold(
        overrides.fuzzy_threshold,
        "overrides.fuzzy_threshold",
        config.search.fuzzy_threshold,
    )
    return FinderConfig(
        search=SearchConfig(fuzzy_threshold=fuzzy_threshold),
        content=config.content,
        exclusions=config.exclusions,
    )


def load_effective_config(
    config_path: Path | None = None, overrides: CliOverrides | None = None
) -> FinderConfig:
    """Load effective config using merge order defaults -> config file -> overrides."""
    base = default_config()
    payload = load_config_file(config_path) if config_path is not None else {}
    return merge_config(base, payload, overrides or CliOverrides())


def _optional_threshold(value: object, name: str, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"Config field '{name}' must be a non-negative integer.")
    if value > MAX_FUZZY_THRESHOLD:
        raise ConfigError(f"Config field '{name}' must be <= {MAX_FUZZY_THRESHOLD}.")
    return value
