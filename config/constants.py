"""Constants for the field operations dashboard.

Status and priority badges are data: every screen supplies a
``{status: (kind, label)}`` table and one resolver turns a raw status
into a badge. Colours come from ui_config.yaml via config_loader.
"""

from typing import Dict, NamedTuple, Optional

from config.config_loader import get_badge_colors


class StatusBadge(NamedTuple):
    """Badge kind and display label for a record status."""

    kind: str
    label: str


# Badge kinds understood by the presentation layer
BADGE_KINDS = ("success", "warning", "error", "info", "pending")

DEFAULT_BADGE_KIND = "pending"


# =============================================================================
# Status badge mappings per screen
# =============================================================================

STATUS_BADGES: Dict[str, Dict[str, StatusBadge]] = {
    "work_orders": {
        "completed": StatusBadge("success", "Completed"),
        "in-progress": StatusBadge("info", "In Progress"),
        "assigned": StatusBadge("info", "Assigned"),
        "pending": StatusBadge("pending", "Pending"),
        "cancelled": StatusBadge("error", "Cancelled"),
    },
    "invoices": {
        "paid": StatusBadge("success", "Paid"),
        "approved": StatusBadge("success", "Approved"),
        "sent": StatusBadge("info", "Sent"),
        "viewed": StatusBadge("info", "Viewed"),
        "draft": StatusBadge("pending", "Draft"),
        "overdue": StatusBadge("error", "Overdue"),
        "disputed": StatusBadge("warning", "Disputed"),
        "cancelled": StatusBadge("error", "Cancelled"),
    },
    "tickets": {
        "resolved": StatusBadge("success", "Resolved"),
        "closed": StatusBadge("success", "Closed"),
        "in-progress": StatusBadge("info", "In Progress"),
        "open": StatusBadge("pending", "Open"),
        "waiting-response": StatusBadge("warning", "Waiting Response"),
    },
    "projects": {
        "open": StatusBadge("info", "Open"),
        "in-review": StatusBadge("pending", "In Review"),
        "awarded": StatusBadge("success", "Awarded"),
        "closed": StatusBadge("warning", "Closed"),
        "cancelled": StatusBadge("error", "Cancelled"),
    },
    "bids": {
        "accepted": StatusBadge("success", "Accepted"),
        "pending": StatusBadge("pending", "Pending"),
        "under-review": StatusBadge("info", "Under Review"),
        "rejected": StatusBadge("error", "Rejected"),
        "withdrawn": StatusBadge("warning", "Withdrawn"),
    },
    "payments": {
        "completed": StatusBadge("success", "Completed"),
        "pending": StatusBadge("pending", "Pending"),
        "failed": StatusBadge("error", "Failed"),
        "refunded": StatusBadge("warning", "Refunded"),
        "cancelled": StatusBadge("error", "Cancelled"),
    },
}

PRIORITY_BADGES: Dict[str, StatusBadge] = {
    "urgent": StatusBadge("error", "Urgent"),
    "high": StatusBadge("warning", "High"),
    "medium": StatusBadge("info", "Medium"),
    "low": StatusBadge("pending", "Low"),
}


def humanize_code(value: str) -> str:
    """Turn 'in-progress' into 'In Progress'."""
    return " ".join(word.capitalize() for word in value.replace("_", "-").split("-") if word)


def resolve_status_badge(screen: str, status: Optional[str]) -> StatusBadge:
    """
    Resolve a raw record status into a badge for a screen.

    Args:
        screen: Screen key (e.g. 'invoices').
        status: Raw status value from the record.

    Returns:
        StatusBadge; unknown statuses get the pending kind and a
        title-cased label.
    """
    if not status:
        return StatusBadge(DEFAULT_BADGE_KIND, "Unknown")
    mapping = STATUS_BADGES.get(screen, {})
    return mapping.get(status, StatusBadge(DEFAULT_BADGE_KIND, humanize_code(status)))


def resolve_priority_badge(priority: Optional[str]) -> StatusBadge:
    """Resolve a priority value into a badge."""
    if not priority:
        return StatusBadge(DEFAULT_BADGE_KIND, "None")
    return PRIORITY_BADGES.get(priority, StatusBadge(DEFAULT_BADGE_KIND, humanize_code(priority)))


def get_badge_color(kind: str) -> str:
    """Get the display colour for a badge kind."""
    return get_badge_colors().get_color(kind)
