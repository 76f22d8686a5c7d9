"""Filter state store for list screens.

Holds the search text, the per-group filter values and the active
numeric ranges for one screen. It is the single source of truth every
presentation surface (sidebar, mobile drawer, slide-in panel, active
filter bar) reads from; surfaces request changes through the named
operations below and never keep copies of their own.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional
import sys

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.logging_config import get_logger

from .models import (
    ActiveFilter,
    FilterConfig,
    FilterGroup,
    FilterKind,
    NumericRange,
    RANGE_CHIP_VALUE,
    report_config_error,
)

logger = get_logger("filter_state")

Listener = Callable[["FilterStateStore"], None]


class FilterStateStore:
    """
    Owned, synchronous state for a screen's search and filters.

    Every mutation is total: it either applies, is a no-op, or (for a
    programming error such as an unknown group id) raises
    FilterConfigError in strict mode and is ignored otherwise.
    Listeners run after each mutation that changed something.
    """

    def __init__(self, filter_config: FilterConfig, strict: Optional[bool] = None):
        """
        Initialize an empty store.

        Args:
            filter_config: The screen's validated filter groups.
            strict: Configuration-error policy; defaults to the
                config's policy.
        """
        self.filter_config = filter_config
        self.strict = filter_config.strict if strict is None else strict
        self._search = ""
        self._values: Dict[str, Any] = filter_config.default_values()
        self._ranges: Dict[str, NumericRange] = {}
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def search(self) -> str:
        return self._search

    def filter_values(self) -> Mapping[str, Any]:
        """Read-only snapshot of the FilterValueMap."""
        return MappingProxyType(dict(self._values))

    def ranges(self) -> Mapping[str, NumericRange]:
        """Read-only snapshot of the active ranges."""
        return MappingProxyType(dict(self._ranges))

    def get_value(self, group_id: str) -> Any:
        group = self._require_group(group_id)
        if group is None:
            return None
        return self._values.get(group_id, group.empty_value())

    def get_range(self, group_id: str) -> NumericRange:
        return self._ranges.get(group_id, NumericRange())

    def is_selected(self, group_id: str, value: str) -> bool:
        """Whether an option is part of the group's current selection."""
        current = self._values.get(group_id)
        if current is None:
            return False
        if isinstance(current, tuple):
            return value in current
        return current == value

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_search(self, query: Optional[str]) -> None:
        """Replace the search text (trimmed)."""
        new_search = (query or "").strip()
        if new_search == self._search:
            return
        self._search = new_search
        logger.debug(f"Search set to '{new_search}'")
        self._notify()

    def set_filter_value(self, group_id: str, value: Optional[str]) -> None:
        """
        Toggle a checkbox option or replace a radio value.

        Args:
            group_id: Declared checkbox or radio group.
            value: Option value; for radio groups None or '' clears.
        """
        group = self._require_group(group_id)
        if group is None:
            return
        if group.is_range:
            report_config_error(
                f"Group '{group_id}' is a range; use set_range()", self.strict
            )
            return

        if group.kind == FilterKind.CHECKBOX:
            if not self._require_option(group, value):
                return
            current = self._values.get(group_id, ())
            if value in current:
                new_value = tuple(v for v in current if v != value)
            else:
                new_value = current + (value,)
        else:
            if value in (None, ""):
                new_value = None
            elif not self._require_option(group, value):
                return
            else:
                new_value = value

        self._apply_value(group_id, new_value)

    def replace_filter_values(self, values: Mapping[str, Any]) -> None:
        """
        Replace the whole FilterValueMap, as a surface's onFilterChange does.

        Groups missing from the mapping are reset to their empty value.
        """
        new_values = self._build_values(values)
        if new_values == self._values:
            return
        self._values = new_values
        logger.debug(f"Filter values replaced: {self._values}")
        self._notify()

    def set_range(
        self,
        group_id: str,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
    ) -> None:
        """Replace a range group's bounds; both None clears it."""
        group = self._require_group(group_id)
        if group is None:
            return
        if not group.is_range:
            report_config_error(f"Group '{group_id}' is not a range", self.strict)
            return

        bounds = NumericRange(minimum, maximum)
        if bounds == self.get_range(group_id):
            return
        if bounds.is_active:
            self._ranges[group_id] = bounds
        else:
            self._ranges.pop(group_id, None)
        logger.debug(f"Range '{group_id}' set to {bounds}")
        self._notify()

    def clear_range(self, group_id: str) -> None:
        self.set_range(group_id, None, None)

    def toggle_range_preset(self, group_id: str) -> None:
        """Apply the group's preset bounds, or clear them if already applied."""
        group = self._require_group(group_id)
        if group is None:
            return
        if group.preset is None:
            report_config_error(f"Range group '{group_id}' has no preset", self.strict)
            return
        if self.get_range(group_id) == group.preset:
            self.clear_range(group_id)
        else:
            self.set_range(group_id, group.preset.min, group.preset.max)

    def clear_all(self) -> None:
        """Reset every group to its empty value and the search to ''."""
        defaults = self.filter_config.default_values()
        if self._values == defaults and not self._ranges and not self._search:
            return
        self._values = defaults
        self._ranges = {}
        self._search = ""
        logger.debug("All filters cleared")
        self._notify()

    def remove_active_filter(self, group_id: str, value: str) -> None:
        """
        Remove one active (group, value) pair; absent values are a no-op.

        For range groups the chip value is RANGE_CHIP_VALUE and removing
        it clears the range.
        """
        group = self._require_group(group_id)
        if group is None:
            return

        if group.is_range:
            if value == RANGE_CHIP_VALUE:
                self.clear_range(group_id)
            return

        current = self._values.get(group_id, group.empty_value())
        if group.kind == FilterKind.CHECKBOX:
            if value not in current:
                return
            self._apply_value(group_id, tuple(v for v in current if v != value))
        elif current == value:
            self._apply_value(group_id, None)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def active_filters(self) -> List[ActiveFilter]:
        """
        Chips for every selected option, derived fresh on each call.

        Ordered by group declaration, then by selection order. Values
        that are not declared options of their group produce no chip.
        """
        active: List[ActiveFilter] = []
        for group in self.filter_config:
            if group.is_range:
                bounds = self._ranges.get(group.id)
                if bounds is not None and bounds.is_active:
                    active.append(
                        ActiveFilter(
                            group_id=group.id,
                            group_label=group.label,
                            value=RANGE_CHIP_VALUE,
                            label=bounds.describe(group.unit),
                        )
                    )
                continue

            current = self._values.get(group.id)
            selected = current if isinstance(current, tuple) else ((current,) if current else ())
            for value in selected:
                option = group.get_option(value)
                if option is not None:
                    active.append(
                        ActiveFilter(
                            group_id=group.id,
                            group_label=group.label,
                            value=value,
                            label=option.label,
                        )
                    )
        return active

    def active_filter_count(self) -> int:
        return len(self.active_filters())

    def has_active_filters(self) -> bool:
        return self.active_filter_count() > 0

    def is_empty(self) -> bool:
        """True when neither search nor any filter constrains the result."""
        return not self._search and not self.has_active_filters()

    def summary(self) -> str:
        """Human-readable summary of the search and active filters."""
        parts = []
        if self._search:
            parts.append(f'Search: "{self._search}"')

        by_group: Dict[str, List[str]] = {}
        labels: Dict[str, str] = {}
        for chip in self.active_filters():
            by_group.setdefault(chip.group_id, []).append(chip.label)
            labels[chip.group_id] = chip.group_label
        for group_id, chip_labels in by_group.items():
            parts.append(f"{labels[group_id]}: {', '.join(chip_labels)}")

        return " | ".join(parts) if parts else "All records (no filters)"

    # ------------------------------------------------------------------
    # Snapshots and listeners
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            "search": self._search,
            "filters": {
                key: list(value) if isinstance(value, tuple) else value
                for key, value in self._values.items()
            },
            "ranges": {key: bounds.to_dict() for key, bounds in self._ranges.items()},
        }

    def load_dict(self, data: Mapping[str, Any]) -> None:
        """
        Restore search, filters and ranges from to_dict() output.

        The whole snapshot is applied at once; listeners run a single
        time, after every part is in place.
        """
        new_values = self._build_values(data.get("filters") or {})
        new_ranges = self._build_ranges(data.get("ranges") or {})
        new_search = (data.get("search") or "").strip()

        unchanged = (
            new_values == self._values
            and new_ranges == self._ranges
            and new_search == self._search
        )
        if unchanged:
            return
        self._values = new_values
        self._ranges = new_ranges
        self._search = new_search
        logger.debug(f"Filter state restored: {self.to_dict()}")
        self._notify()

    @classmethod
    def from_dict(
        cls,
        filter_config: FilterConfig,
        data: Mapping[str, Any],
        strict: Optional[bool] = None,
    ) -> "FilterStateStore":
        store = cls(filter_config, strict=strict)
        store.load_dict(data)
        return store

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called after every effective mutation.

        Returns:
            A function that unregisters the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _apply_value(self, group_id: str, new_value: Any) -> None:
        if self._values.get(group_id) == new_value:
            return
        self._values[group_id] = new_value
        logger.debug(f"Filter '{group_id}' set to {new_value!r}")
        self._notify()

    def _build_values(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        """A complete, validated FilterValueMap from an incoming mapping."""
        new_values = self.filter_config.default_values()
        for group_id, raw in values.items():
            group = self._require_group(group_id)
            if group is None:
                continue
            if group.is_range:
                report_config_error(
                    f"Group '{group_id}' is a range; use set_range()", self.strict
                )
                continue
            new_values[group_id] = self._coerce(group, raw)
        return new_values

    def _build_ranges(self, ranges: Mapping[str, Any]) -> Dict[str, NumericRange]:
        """Active ranges from {group_id: {"min", "max"}}; inactive bounds are dropped."""
        new_ranges: Dict[str, NumericRange] = {}
        for group_id, raw in ranges.items():
            group = self._require_group(group_id)
            if group is None:
                continue
            if not group.is_range:
                report_config_error(f"Group '{group_id}' is not a range", self.strict)
                continue
            bounds = raw if isinstance(raw, NumericRange) else NumericRange.from_dict(raw)
            if bounds.is_active:
                new_ranges[group_id] = bounds
        return new_ranges

    def _require_group(self, group_id: str) -> Optional[FilterGroup]:
        group = self.filter_config.get(group_id)
        if group is None:
            report_config_error(f"Unknown filter group '{group_id}'", self.strict)
        return group

    def _require_option(self, group: FilterGroup, value: Optional[str]) -> bool:
        if value is not None and group.has_option(value):
            return True
        report_config_error(
            f"Value {value!r} is not an option of group '{group.id}'", self.strict
        )
        return False

    def _coerce(self, group: FilterGroup, raw: Any) -> Any:
        """Normalize an incoming value for a group, dropping undeclared options."""
        if group.kind == FilterKind.CHECKBOX:
            if raw is None or raw == "":
                return ()
            items: Iterable[Any] = [raw] if isinstance(raw, str) else raw
            selected: List[str] = []
            for item in items:
                if item in selected:
                    continue
                if self._require_option(group, item):
                    selected.append(item)
            return tuple(selected)

        if isinstance(raw, (list, tuple, set, frozenset)):
            raw = next(iter(raw), None)
        if raw in (None, ""):
            return None
        if not self._require_option(group, raw):
            return None
        return raw
