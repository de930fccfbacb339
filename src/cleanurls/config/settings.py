"""Site configuration for cleanurls.

This module consolidates the configuration code in one place:
- Pydantic models for ``_config.toml`` (or a Jekyll-style ``_config.yml``)
- Loading and saving functions

Configuration priority (highest to lowest):
1. Environment variables (``CLEANURLS_KEY`` / ``CLEANURLS_SECTION__KEY``)
2. Config file
3. Defaults
"""

from __future__ import annotations

import logging
import os
import tomllib
from copy import deepcopy
from pathlib import Path
from typing import Any

import tomli_w
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cleanurls.config.exceptions import ConfigParseError, ConfigValidationError

logger = logging.getLogger(__name__)

# ============================================================================
# Constants
# ============================================================================

ENV_PREFIX = "CLEANURLS_"
CONFIG_FILENAMES = ("_config.toml", "_config.yml", "_config.yaml")
DEFAULT_PERMALINK_STYLE = "date"
DEFAULT_PAGINATE_PATH = "/page:num"


class CollectionSettings(BaseModel):
    """Settings for one document collection (``_<name>/`` in the source tree)."""

    output: bool = Field(
        default=False,
        description="Render the collection's documents into the destination",
    )
    permalink: str | None = Field(
        default=None,
        description="URL template for documents, e.g. '/:collection/:name'",
    )


class SiteConfig(BaseSettings):
    """Root configuration for a site build.

    Supports environment variable overrides with the pattern
    ``CLEANURLS_KEY`` (e.g. ``CLEANURLS_PAGINATE=5``).
    """

    permalink: str = Field(
        default=DEFAULT_PERMALINK_STYLE,
        description="Global permalink style ('date', 'pretty', 'ordinal', 'none') or a literal template",
    )
    paginate: int | None = Field(
        default=None,
        ge=1,
        description="Posts per index page; pagination is disabled when unset",
    )
    paginate_path: str = Field(
        default=DEFAULT_PAGINATE_PATH,
        description="Permalink template for index pages after the first; must contain ':num'",
    )
    baseurl: str = Field(default="", description="Path prefix the site is served under")
    source: str = Field(default=".", description="Source directory, relative to the site root")
    destination: str = Field(default="_site", description="Output directory, relative to the site root")
    clean_urls: bool = Field(
        default=True,
        description="Write '/:path' documents to '/:path.html' and link them without an extension",
    )
    collections: dict[str, CollectionSettings] = Field(
        default_factory=dict,
        description="Document collections keyed by name",
    )

    model_config = SettingsConfigDict(
        extra="forbid",
        validate_assignment=True,
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
    )

    @field_validator("paginate_path")
    @classmethod
    def validate_paginate_path(cls, v: str) -> str:
        """Require the page-number placeholder."""
        if ":num" not in v:
            msg = f"paginate_path must contain ':num', got {v!r}"
            raise ValueError(msg)
        return v

    @property
    def pagination_enabled(self) -> bool:
        return self.paginate is not None


# ============================================================================
# Configuration Loading and Saving
# ============================================================================


def find_site_config(site_root: Path) -> Path | None:
    """Return the first config file present in ``site_root``.

    ``_config.toml`` is preferred over the YAML variants.
    """
    root = site_root.expanduser().resolve()
    for filename in CONFIG_FILENAMES:
        candidate = root / filename
        if candidate.exists():
            return candidate
    return None


def _collect_env_override_paths() -> set[tuple[str, ...]]:
    """Return the set of config paths defined via environment variables."""
    env_paths: set[tuple[str, ...]] = set()

    for key in os.environ:
        if not key.startswith(ENV_PREFIX):
            continue
        parts = [part.lower() for part in key[len(ENV_PREFIX) :].split("__") if part]
        if parts:
            env_paths.add(tuple(parts))

    return env_paths


def _merge_config(
    base: dict[str, Any],
    override: dict[str, Any],
    env_override_paths: set[tuple[str, ...]],
    current_path: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Merge override into base, skipping keys provided via env vars."""
    merged = deepcopy(base)

    for key, value in override.items():
        path = (*current_path, str(key).lower())
        if path in env_override_paths:
            continue

        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_config(merged[key], value, env_override_paths, path)
        else:
            merged[key] = value

    return merged


def _parse_config_file(config_path: Path) -> dict[str, Any]:
    raw_config = config_path.read_text(encoding="utf-8")
    try:
        if config_path.suffix == ".toml":
            data = tomllib.loads(raw_config)
        else:
            data = yaml.safe_load(raw_config) or {}
    except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise ConfigParseError(config_path, str(exc)) from exc

    if not isinstance(data, dict):
        raise ConfigParseError(config_path, f"expected a mapping at top level, got {type(data).__name__}")
    return data


def _drop_unknown_keys(data: dict[str, Any], config_path: Path) -> dict[str, Any]:
    """Drop top-level keys cleanurls does not use (``title``, ``markdown``, ``plugins``, ...).

    Jekyll configs carry many settings for other stages of a build; only
    TOML configs written for cleanurls are validated strictly.
    """
    known = set(SiteConfig.model_fields)
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        logger.warning("Ignoring unsupported keys in %s: %s", config_path.name, ", ".join(unknown))
    return {key: value for key, value in data.items() if key in known}


def load_site_config(site_root: Path | None = None) -> SiteConfig:
    """Load the site configuration from ``site_root``.

    Args:
        site_root: Root directory of the site. If None, uses current working directory.

    Returns:
        Validated SiteConfig instance

    Raises:
        ConfigParseError: If the config file is not valid TOML/YAML
        ConfigValidationError: If the config file contains invalid values

    """
    if site_root is None:
        site_root = Path.cwd()

    config_path = find_site_config(site_root)
    if config_path is None:
        logger.info("No configuration found in %s, using defaults", site_root)
        return SiteConfig()

    logger.info("Loading config from %s", config_path)
    file_data = _parse_config_file(config_path)
    if config_path.suffix != ".toml":
        file_data = _drop_unknown_keys(file_data, config_path)

    try:
        base_dict = SiteConfig().model_dump(mode="json")
        # Env vars > config file > defaults
        merged = _merge_config(base_dict, file_data, _collect_env_override_paths())
        return SiteConfig.model_validate(merged)
    except ValidationError as e:
        for error in e.errors():
            loc = " -> ".join(str(location_part) for location_part in error["loc"])
            logger.error("  %s: %s", loc, error["msg"])
        raise ConfigValidationError(config_path, e.errors()) from e


def create_default_config(site_root: Path) -> SiteConfig:
    """Create a default ``_config.toml`` and return it."""
    config = SiteConfig()
    save_site_config(config, site_root)
    logger.info("Created default config at %s", site_root / CONFIG_FILENAMES[0])
    return config


def save_site_config(config: SiteConfig, site_root: Path) -> Path:
    """Save ``config`` to ``site_root/_config.toml``.

    Returns:
        Path to the saved config file

    """
    site_root.mkdir(exist_ok=True, parents=True)
    config_path = site_root / CONFIG_FILENAMES[0]

    data = config.model_dump(exclude_defaults=False, mode="json")

    # Remove None values as tomli_w doesn't support them
    def _clean_nones(d: dict[str, Any]) -> dict[str, Any]:
        cleaned = {}
        for k, v in d.items():
            if v is None:
                continue
            if isinstance(v, dict):
                v = _clean_nones(v)
            cleaned[k] = v
        return cleaned

    config_path.write_text(tomli_w.dumps(_clean_nones(data)), encoding="utf-8")
    logger.debug("Saved config to %s", config_path)

    return config_path
