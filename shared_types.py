# shared_types.py  ──  the types every other module shares
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional

from config import UNASSIGNED_AGENT

Lane = Literal['regular', 'priority']

# Regular tickets always sort behind any explicitly prioritised ticket
REGULAR_PRIORITY: int = sys.maxsize


class TicketStatus(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"

    @classmethod
    def parse(cls, value: str) -> Optional["TicketStatus"]:
        """Case-insensitive lookup by display value, None if unknown."""
        wanted = value.strip().lower()
        for status in cls:
            if status.value.lower() == wanted:
                return status
        return None


_STATUS_RANK = {
    TicketStatus.OPEN: 0,
    TicketStatus.IN_PROGRESS: 1,
    TicketStatus.RESOLVED: 2,
}


@dataclass(eq=False)
class Ticket:
    id: int
    description: str
    priority: int
    status: TicketStatus = TicketStatus.OPEN
    assigned_agent: str = UNASSIGNED_AGENT
    lane: Lane = 'priority'

    @classmethod
    def create(cls, ticket_id: int, description: str, priority: int,
               lane: Lane = 'priority') -> "Ticket":
        return cls(id=ticket_id, description=description, priority=priority, lane=lane)

    def set_priority(self, priority: int) -> None:
        self.priority = priority

    def assign(self, agent_id: str) -> None:
        # the agent is recorded once, and never on a resolved ticket
        if self.status is not TicketStatus.RESOLVED and self.assigned_agent == UNASSIGNED_AGENT:
            self.assigned_agent = agent_id
        self._advance(TicketStatus.IN_PROGRESS)

    def resolve(self) -> None:
        self._advance(TicketStatus.RESOLVED)

    def _advance(self, status: TicketStatus) -> None:
        # forward-only: never move a ticket back to an earlier status
        if _STATUS_RANK[status] >= _STATUS_RANK[self.status]:
            self.status = status

    def summary(self) -> str:
        return (
            f"Ticket ID: {self.id} | Description: {self.description} | "
            f"Priority: {self.priority} | Status: {self.status.value} | "
            f"Assigned Agent: {self.assigned_agent}"
        )

    def __str__(self) -> str:
        return self.summary()


# ── Error taxonomy ────────────────────────────────────────────────────────────

class SupportError(str, Enum):
    TICKET_NOT_FOUND = "TicketNotFound"
    NOT_IN_PRIORITY_QUEUE = "NotInPriorityQueue"
    INVALID_STATE = "InvalidState"


ERROR_MESSAGES = {
    SupportError.TICKET_NOT_FOUND: "Ticket ID not found",
    SupportError.NOT_IN_PRIORITY_QUEUE: "Ticket not found in the priority queue",
    SupportError.INVALID_STATE: "Ticket is not in progress",
}


@dataclass(frozen=True)
class Outcome:
    """Tagged result of a core operation that can be rejected."""
    ticket: Optional[Ticket] = None
    error: Optional[SupportError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self.error] if self.error else "ok"


@dataclass(frozen=True)
class Assignment:
    ticket: Ticket
    agent_id: str
