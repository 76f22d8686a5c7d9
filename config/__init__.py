"""Configuration module for the field operations dashboard.

All filter defaults are empty: an empty selection means "no constraint".
"""

from .settings import config, AppConfig, ViewStateConfig, ExportConfig, Config
from .config_loader import (
    ConfigurationError,
    clear_config_cache,
    get_table_config,
    get_filter_panel_config,
    get_empty_state_config,
)
from .constants import (
    StatusBadge,
    STATUS_BADGES,
    PRIORITY_BADGES,
    BADGE_KINDS,
    humanize_code,
    resolve_status_badge,
    resolve_priority_badge,
    get_badge_color,
)

__all__ = [
    # Settings
    "config",
    "AppConfig",
    "ViewStateConfig",
    "ExportConfig",
    "Config",
    # YAML configuration
    "ConfigurationError",
    "clear_config_cache",
    "get_table_config",
    "get_filter_panel_config",
    "get_empty_state_config",
    # Badges
    "StatusBadge",
    "STATUS_BADGES",
    "PRIORITY_BADGES",
    "BADGE_KINDS",
    "humanize_code",
    "resolve_status_badge",
    "resolve_priority_badge",
    "get_badge_color",
]
