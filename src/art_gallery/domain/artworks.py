"""Domain models for the artwork catalog."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

STATUS_AVAILABLE = "Available"
STATUS_SOLD = "Sold"
STATUS_EXHIBITION = "Exhibition"
ARTWORK_STATUSES = (STATUS_AVAILABLE, STATUS_SOLD, STATUS_EXHIBITION)

STATE_IN_PROGRESS = "In Progress"
STATE_COMPLETED = "Completed"
ARTWORK_STATES = (STATE_IN_PROGRESS, STATE_COMPLETED)

TYPE_CODES = {
    "Portrait": "PT",
    "African Portraiture": "AP",
    "Realism": "RL",
    "Abstract": "AB",
    "Screen Print": "SP",
    "Woodcut Print": "WP",
    "Print": "PR",
}
UNKNOWN_TYPE_CODE = "XX"


@dataclass(frozen=True)
class Artwork:
    """Represents an artwork listed in the catalog."""

    id: UUID
    uid: str
    src: str
    title: str
    price: str
    status: str
    state: str
    artist: str | None = None
    type_code: str | None = None
    materials: str | None = None
    duration: str | None = None
    type: str | None = None
    inspiration: str | None = None
    sold_date: datetime | None = None
    order_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# Outcomes of a conditional sale.
SALE_MARKED = "marked"
SALE_ALREADY_SOLD = "already_sold"
SALE_MISSING = "missing"
