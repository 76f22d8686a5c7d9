"""Column definitions and visibility resolution for table views."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional
import sys

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import get_logger

from src.filtering.predicates import get_field_value

logger = get_logger("columns")


class ColumnConfigError(AssertionError):
    """A column id is unknown or declared twice."""

    pass


def report_column_error(message: str, strict: Optional[bool] = None) -> None:
    """Raise in strict mode, log otherwise."""
    if strict is None:
        strict = config.app.is_development
    if strict:
        raise ColumnConfigError(message)
    logger.warning(f"Ignoring column configuration error: {message}")


@dataclass(frozen=True)
class ColumnDef:
    """
    A table column.

    Essential columns are always visible and cannot be hidden. Other
    columns start visible or hidden per ``default_visible`` until the
    user toggles them.
    """

    id: str
    header: str
    accessor: Optional[Callable[[Any], Any]] = field(default=None, compare=False, repr=False)
    essential: bool = False
    default_visible: bool = True
    sortable: bool = True

    @property
    def hideable(self) -> bool:
        return not self.essential

    @property
    def visible_by_default(self) -> bool:
        return self.essential or self.default_visible

    def value(self, record: Any) -> Any:
        """Cell value for a record; defaults to the field named like the column."""
        if self.accessor is not None:
            return self.accessor(record)
        return get_field_value(record, self.id)


class ColumnSet:
    """Ordered, validated columns of one table."""

    def __init__(self, columns: Iterable[ColumnDef], strict: Optional[bool] = None):
        self.strict = config.app.is_development if strict is None else strict
        self._columns: Dict[str, ColumnDef] = {}
        for column in columns:
            if column.id in self._columns:
                report_column_error(f"Duplicate column id '{column.id}'", self.strict)
                continue
            self._columns[column.id] = column

    def __iter__(self):
        return iter(self._columns.values())

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, column_id: str) -> bool:
        return column_id in self._columns

    def get(self, column_id: str) -> Optional[ColumnDef]:
        return self._columns.get(column_id)

    def require(self, column_id: str) -> Optional[ColumnDef]:
        column = self._columns.get(column_id)
        if column is None:
            report_column_error(f"Unknown column '{column_id}'", self.strict)
        return column

    @property
    def ids(self) -> List[str]:
        return list(self._columns.keys())

    def defaults(self) -> Dict[str, bool]:
        """Default visibility for every column."""
        return {column.id: column.visible_by_default for column in self}

    def resolve_visibility(self, persisted: Mapping[str, bool]) -> Dict[str, bool]:
        """
        Realized visibility: persisted[column] ?? default(column).

        Essential columns stay visible whatever was persisted; persisted
        entries for columns no longer declared are ignored.
        """
        visibility = {}
        for column in self:
            if column.essential:
                visibility[column.id] = True
            elif column.id in persisted:
                visibility[column.id] = bool(persisted[column.id])
            else:
                visibility[column.id] = column.default_visible
        return visibility
