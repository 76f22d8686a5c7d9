"""Declarative filter configuration for list screens.

A screen describes its filters as an ordered sequence of FilterGroup
definitions. Checkbox and radio groups select among FilterOption values;
range groups constrain a number derived from each record.
"""

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple
import math
import sys

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import get_logger

logger = get_logger("filtering")


class FilterConfigError(AssertionError):
    """A filter configuration or mutation violates the screen's declaration."""

    pass


def report_config_error(message: str, strict: Optional[bool] = None) -> None:
    """
    Fail fast in development, log and carry on otherwise.

    Args:
        message: Description of the programming error.
        strict: Override for the environment-derived policy.

    Raises:
        FilterConfigError: When running strict.
    """
    if strict is None:
        strict = config.app.is_development
    if strict:
        raise FilterConfigError(message)
    logger.warning(f"Ignoring filter configuration error: {message}")


class FilterKind(str, Enum):
    """How a group's selection is stored and matched."""

    CHECKBOX = "checkbox"
    RADIO = "radio"
    RANGE = "range"


@dataclass(frozen=True)
class FilterOption:
    """A selectable value within a filter group."""

    value: str
    label: str


@dataclass(frozen=True)
class NumericRange:
    """Inclusive numeric bounds; a missing bound is unbounded."""

    min: Optional[float] = None
    max: Optional[float] = None

    @property
    def is_active(self) -> bool:
        """A range with no bounds imposes no constraint."""
        return self.min is not None or self.max is not None

    def contains(self, value: Optional[float]) -> bool:
        """Check whether value falls within [min ?? -inf, max ?? +inf]."""
        if not self.is_active:
            return True
        if value is None:
            return False
        try:
            if math.isnan(value):
                return False
        except TypeError:
            return False
        low = self.min if self.min is not None else -math.inf
        high = self.max if self.max is not None else math.inf
        return low <= value <= high

    def describe(self, unit: str = "") -> str:
        """Render the bounds for an active-filter chip."""
        low = _format_bound(self.min, unit)
        high = _format_bound(self.max, unit)
        if self.min is not None and self.max is not None:
            return f"{low} - {high}"
        if self.min is not None:
            return f"≥ {low}"
        if self.max is not None:
            return f"≤ {high}"
        return "Any"

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {"min": self.min, "max": self.max}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "NumericRange":
        if not data:
            return cls()
        return cls(min=data.get("min"), max=data.get("max"))


def _format_bound(value: Optional[float], unit: str) -> str:
    if value is None:
        return ""
    if float(value).is_integer():
        text = f"{int(value):,}"
    else:
        text = f"{value:,.2f}"
    if unit == "$":
        return f"${text}"
    return f"{text} {unit}".strip()


@dataclass(frozen=True)
class FilterGroup:
    """
    A named set of criteria shown as one section of the filter panel.

    Attributes:
        id: Unique identifier within a screen's configuration.
        label: Section heading.
        kind: checkbox (multi-select), radio (single value) or range.
        options: Ordered options for checkbox/radio groups.
        searchable: Whether the panel offers a search box over the options.
        field: Record attribute the group filters; defaults to ``id``.
        value_fn: Range groups only; derives the number compared against
            the selected bounds.
        unit: Range groups only; display unit for chip labels.
        preset: Range groups only; bounds applied by a one-click toggle.
    """

    id: str
    label: str
    kind: FilterKind = FilterKind.CHECKBOX
    options: Tuple[FilterOption, ...] = ()
    searchable: bool = False
    field: Optional[str] = None
    value_fn: Optional[Callable[[Any], Optional[float]]] = dataclass_field(
        default=None, compare=False, repr=False
    )
    unit: str = ""
    preset: Optional[NumericRange] = None

    @property
    def record_field(self) -> str:
        """Attribute of the record compared against the selection."""
        return self.field or self.id

    @property
    def is_range(self) -> bool:
        return self.kind == FilterKind.RANGE

    def option_values(self) -> List[str]:
        return [option.value for option in self.options]

    def get_option(self, value: str) -> Optional[FilterOption]:
        for option in self.options:
            if option.value == value:
                return option
        return None

    def has_option(self, value: str) -> bool:
        return self.get_option(value) is not None

    def matching_options(self, text: str) -> List[FilterOption]:
        """
        Filter options by a case-insensitive substring of their label.

        Args:
            text: Search text typed into the group's search box.

        Returns:
            Options whose label or value contains the text, in declared order.
        """
        needle = (text or "").strip().lower()
        if not needle:
            return list(self.options)
        return [
            option
            for option in self.options
            if needle in option.label.lower() or needle in option.value.lower()
        ]

    def empty_value(self):
        """Unset value for this group: () for checkbox, None otherwise."""
        if self.kind == FilterKind.CHECKBOX:
            return ()
        return None


class FilterConfig:
    """
    Validated, ordered collection of a screen's filter groups.

    Duplicate group ids, duplicate option values and option-less
    checkbox/radio groups are configuration errors. Under the lenient
    policy the first definition wins and the rest are dropped.
    """

    def __init__(self, groups: Iterable[FilterGroup], strict: Optional[bool] = None):
        self.strict = config.app.is_development if strict is None else strict
        self._groups: Dict[str, FilterGroup] = {}

        for group in groups:
            if group.id in self._groups:
                report_config_error(f"Duplicate filter group id '{group.id}'", self.strict)
                continue
            if group.is_range:
                if group.value_fn is None:
                    report_config_error(
                        f"Range group '{group.id}' has no value function", self.strict
                    )
                    continue
            elif not group.options:
                report_config_error(
                    f"Filter group '{group.id}' declares no options", self.strict
                )
                continue
            self._groups[group.id] = self._dedupe_options(group)

    def _dedupe_options(self, group: FilterGroup) -> FilterGroup:
        seen = set()
        options = []
        for option in group.options:
            if option.value in seen:
                report_config_error(
                    f"Duplicate option '{option.value}' in group '{group.id}'", self.strict
                )
                continue
            seen.add(option.value)
            options.append(option)
        if len(options) == len(group.options):
            return group
        return FilterGroup(
            id=group.id,
            label=group.label,
            kind=group.kind,
            options=tuple(options),
            searchable=group.searchable,
            field=group.field,
            value_fn=group.value_fn,
            unit=group.unit,
            preset=group.preset,
        )

    def __iter__(self):
        return iter(self._groups.values())

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, group_id: str) -> bool:
        return group_id in self._groups

    @property
    def groups(self) -> List[FilterGroup]:
        """All groups in declared order."""
        return list(self._groups.values())

    @property
    def option_groups(self) -> List[FilterGroup]:
        """Checkbox and radio groups in declared order."""
        return [g for g in self._groups.values() if not g.is_range]

    @property
    def range_groups(self) -> List[FilterGroup]:
        """Range groups in declared order."""
        return [g for g in self._groups.values() if g.is_range]

    def get(self, group_id: str) -> Optional[FilterGroup]:
        return self._groups.get(group_id)

    def default_values(self) -> Dict[str, Any]:
        """Empty selection for every option group."""
        return {group.id: group.empty_value() for group in self.option_groups}


@dataclass(frozen=True)
class ActiveFilter:
    """One currently-selected (group, value) pair, rendered as a chip."""

    group_id: str
    group_label: str
    value: str
    label: str

    @property
    def display(self) -> str:
        return f"{self.group_label}: {self.label}"


# Value used for the single chip an active range produces
RANGE_CHIP_VALUE = "range"
