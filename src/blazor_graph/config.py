"""Settings for the blazor-graph tool, loadable from YAML.

Example ``blazor-graph.yaml``::

    blazor_graph:
      directory: ./src/MyApp
      starting_node: App
      vendors: [Mud, Telerik]
      skips: [Router]
      layout:
        cards_per_row: 4
        rows_per_page: 3
"""

from __future__ import annotations

__all__ = ["ConfigError", "LayoutConfig", "NamingRules", "Settings", "load_settings"]

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from blazor_graph.layout.config import ConfigError, LayoutConfig
from blazor_graph.rules import NamingRules

logger = logging.getLogger(__name__)

SECTION = "blazor_graph"
"""Optional top-level key that holds the settings."""

DEFAULT_MERMAID_FILE = "dependencyGraph.mmd"
DEFAULT_SVG_FILE = "dependencyGraph.svg"
DEFAULT_VENDOR_COLOR = "#32cd32"


@dataclass
class Settings:
    """All options the command line tool understands."""

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    rules: NamingRules = field(default_factory=NamingRules)
    directory: str | None = None
    starting_node: str | None = None
    mermaid_file_name: str = DEFAULT_MERMAID_FILE
    svg_file_name: str = DEFAULT_SVG_FILE
    vendor_component_color: str = DEFAULT_VENDOR_COLOR


_RULE_KEYS = {f.name for f in dataclasses.fields(NamingRules)}
_LAYOUT_KEYS = {f.name for f in dataclasses.fields(LayoutConfig)}
_SETTINGS_KEYS = {f.name for f in dataclasses.fields(Settings)} - {"layout", "rules"}


def settings_from_dict(data: dict[str, Any]) -> Settings:
    """Build :class:`Settings` from a parsed mapping.

    Rule keys (``vendors``, ``skips``, ...) sit at the top level next to
    the plain settings; page measurements go under ``layout``.
    """
    if not isinstance(data, dict):
        raise ConfigError(f"settings must be a mapping, got {type(data).__name__}")

    unknown = set(data) - _RULE_KEYS - _SETTINGS_KEYS - {"layout"}
    if unknown:
        raise ConfigError(f"unknown setting(s): {', '.join(sorted(unknown))}")

    layout_data = data.get("layout") or {}
    if not isinstance(layout_data, dict):
        raise ConfigError("'layout' must be a mapping")
    unknown = set(layout_data) - _LAYOUT_KEYS
    if unknown:
        raise ConfigError(f"unknown layout setting(s): {', '.join(sorted(unknown))}")

    rule_data = {k: v for k, v in data.items() if k in _RULE_KEYS}
    for key in ("vendors", "state_suffixes", "skips"):
        value = rule_data.get(key)
        if value is not None and not isinstance(value, list):
            raise ConfigError(f"'{key}' must be a list of names")

    return Settings(
        layout=LayoutConfig(**layout_data),
        rules=NamingRules(**rule_data),
        **{k: v for k, v in data.items() if k in _SETTINGS_KEYS},
    )


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings from a YAML file.

    A missing file is not an error: defaults are returned and a warning
    is logged.
    """
    if path is None:
        return Settings()

    path = Path(path)
    if not path.exists():
        logger.warning("Settings file not found: %s, using defaults", path)
        return Settings()

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"unable to load settings from {path}: {exc}") from exc

    if isinstance(data, dict) and SECTION in data:
        data = data[SECTION] or {}

    settings = settings_from_dict(data)
    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings
