"""Base models shared across the registry."""

from dataclasses import dataclass, field
from datetime import datetime

# Opaque handle for an already-authenticated caller.
Principal = str


@dataclass(frozen=True)
class CallerContext:
    """Identity of the caller invoking a registry operation.

    The registry never authenticates; whoever builds the context is
    responsible for having verified ``principal`` beforehand.
    """

    principal: Principal


@dataclass
class Event:
    """Standard event envelope for streaming."""

    event_id: str
    event_type: str  # entity.action (e.g., property.status_changed)
    event_time: datetime
    source: str  # Service/system that generated
    subject: str  # Location affected
    data: dict
    metadata: dict = field(default_factory=dict)
