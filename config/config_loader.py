"""YAML Configuration Loader for the field operations dashboard.

Loads and caches configuration from YAML files with fallback to defaults.
Provides type-safe access to configuration values.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from functools import lru_cache
import yaml

# Get config directory
CONFIG_DIR = Path(__file__).parent


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""

    pass


DEFAULT_UI_CONFIG: Dict[str, Any] = {
    "tables": {
        "pagination": {
            "default_page_size": 10,
            "page_size_options": [5, 10, 25, 50],
            "max_page_size": 100,
        },
        "display": {"null_display": "N/A", "date_format": "%b %d, %Y"},
    },
    "filters": {"ending_soon_days": 7, "max_visible_options": 6},
    "empty_states": {
        "no_records": {
            "title": "Nothing here yet",
            "description": "There are no records to show.",
        },
        "no_matches": {
            "title": "No results found",
            "description": "Try adjusting your search or filters.",
        },
    },
    "colors": {
        "badges": {
            "success": "#16a34a",
            "warning": "#d97706",
            "error": "#dc2626",
            "info": "#2563eb",
            "pending": "#6b7280",
        }
    },
}


def _load_yaml_file(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of YAML file in config directory

    Returns:
        Parsed YAML content as dictionary

    Raises:
        ConfigurationError: If file cannot be loaded
    """
    filepath = CONFIG_DIR / filename
    if not filepath.exists():
        raise ConfigurationError(f"Configuration file not found: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing {filename}: {e}")
    except IOError as e:
        raise ConfigurationError(f"Error reading {filename}: {e}")


@lru_cache(maxsize=1)
def load_ui_config() -> Dict[str, Any]:
    """Load ui_config.yaml configuration."""
    try:
        return _load_yaml_file("ui_config.yaml")
    except ConfigurationError:
        return DEFAULT_UI_CONFIG


def clear_config_cache() -> None:
    """Clear all cached configuration data."""
    global _table_config, _filter_panel_config, _empty_state_config, _badge_colors
    load_ui_config.cache_clear()
    _table_config = None
    _filter_panel_config = None
    _empty_state_config = None
    _badge_colors = None


def _section(name: str) -> Dict[str, Any]:
    section = load_ui_config().get(name)
    if isinstance(section, dict):
        return section
    return DEFAULT_UI_CONFIG[name]


@dataclass
class TableConfig:
    """Table display configuration accessor."""

    _data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self._data = _section("tables")

    @property
    def default_page_size(self) -> int:
        """Get default pagination page size."""
        return self._data.get("pagination", {}).get("default_page_size", 10)

    @property
    def page_size_options(self) -> List[int]:
        """Get available page size options."""
        return self._data.get("pagination", {}).get("page_size_options", [5, 10, 25, 50])

    @property
    def max_page_size(self) -> int:
        """Get maximum allowed page size."""
        return self._data.get("pagination", {}).get("max_page_size", 100)

    @property
    def null_display(self) -> str:
        """Get display text for missing values."""
        return self._data.get("display", {}).get("null_display", "N/A")

    @property
    def date_format(self) -> str:
        """Get date display format."""
        return self._data.get("display", {}).get("date_format", "%b %d, %Y")


@dataclass
class FilterPanelConfig:
    """Filter panel configuration accessor."""

    _data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self._data = _section("filters")

    @property
    def ending_soon_days(self) -> int:
        """Days-until-deadline window for the ending soon toggle."""
        return self._data.get("ending_soon_days", 7)

    @property
    def max_visible_options(self) -> int:
        """Options shown per group before 'show more'."""
        return self._data.get("max_visible_options", 6)


@dataclass
class EmptyStateConfig:
    """Empty-state messaging accessor."""

    _data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self._data = _section("empty_states")

    def get_message(self, kind: str) -> Dict[str, str]:
        """
        Get title/description for an empty-state kind.

        Args:
            kind: 'no_records' or 'no_matches'

        Returns:
            Dict with 'title' and 'description' keys
        """
        default = DEFAULT_UI_CONFIG["empty_states"].get(
            kind, {"title": "No results", "description": ""}
        )
        message = self._data.get(kind, {})
        return {
            "title": message.get("title", default["title"]),
            "description": message.get("description", default["description"]),
        }


@dataclass
class BadgeColors:
    """Badge colour accessor."""

    _data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self._data = _section("colors").get("badges", {})

    def get_color(self, kind: str) -> str:
        """Get colour for a badge kind."""
        return self._data.get(kind, "#6b7280")


# Convenience singleton instances
_table_config: Optional[TableConfig] = None
_filter_panel_config: Optional[FilterPanelConfig] = None
_empty_state_config: Optional[EmptyStateConfig] = None
_badge_colors: Optional[BadgeColors] = None


def get_table_config() -> TableConfig:
    """Get table display configuration."""
    global _table_config
    if _table_config is None:
        _table_config = TableConfig()
    return _table_config


def get_filter_panel_config() -> FilterPanelConfig:
    """Get filter panel configuration."""
    global _filter_panel_config
    if _filter_panel_config is None:
        _filter_panel_config = FilterPanelConfig()
    return _filter_panel_config


def get_empty_state_config() -> EmptyStateConfig:
    """Get empty-state messaging configuration."""
    global _empty_state_config
    if _empty_state_config is None:
        _empty_state_config = EmptyStateConfig()
    return _empty_state_config


def get_badge_colors() -> BadgeColors:
    """Get badge colour configuration."""
    global _badge_colors
    if _badge_colors is None:
        _badge_colors = BadgeColors()
    return _badge_colors
