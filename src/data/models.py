"""Record types shown by the list screens."""

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Dict, Optional


@dataclass
class WorkOrder:
    """A maintenance job at a client property."""

    work_order_id: str
    property_address: str
    client_name: str
    service_category: str
    service_description: str
    status: str
    priority: str
    due_date: date
    estimated_cost: float
    assigned_vendor: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Invoice:
    """An invoice, optionally tied to a work order."""

    invoice_number: str
    client_name: str
    issue_date: date
    due_date: date
    total: float
    status: str
    work_order_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SupportTicket:
    """A help desk ticket."""

    ticket_id: str
    subject: str
    description: str
    category: str
    priority: str
    status: str
    created_date: date
    assigned_agent: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MarketplaceProject:
    """A project open for vendor bids."""

    project_id: str
    property_address: str
    service_category: str
    project_description: str
    budget_min: float
    budget_max: float
    deadline: date
    number_of_bids: int
    status: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Bid:
    """A bid submitted on a marketplace project."""

    bid_id: str
    project_id: str
    proposed_cost: float
    estimated_timeline: str
    submitted_date: date
    status: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Payment:
    """A payment received against an invoice."""

    payment_id: str
    invoice_number: str
    client_name: str
    payment_date: date
    amount: float
    payment_method: str
    status: str
    reference_number: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
