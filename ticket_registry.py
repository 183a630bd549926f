# ticket_registry.py

import itertools
from typing import Dict, Iterator, Optional, Union

from shared_types import Lane, Ticket, TicketStatus


class TicketRegistry:
    """Single source of truth for ticket lookup; owns the id counter."""

    def __init__(self, first_id: int = 1):
        self._tickets: Dict[int, Ticket] = {}
        self._ids = itertools.count(first_id)

    def new_ticket(self, description: str, priority: int, lane: Lane) -> Ticket:
        ticket = Ticket.create(next(self._ids), description, priority, lane=lane)
        self.put(ticket)
        return ticket

    def put(self, ticket: Ticket) -> None:
        self._tickets[ticket.id] = ticket

    def get(self, ticket_id: int) -> Optional[Ticket]:
        return self._tickets.get(ticket_id)

    def values_by_status(self, status: Union[str, TicketStatus]) -> Iterator[Ticket]:
        wanted = status if isinstance(status, TicketStatus) else TicketStatus.parse(status)
        return (t for t in self._tickets.values() if t.status is wanted)

    def __contains__(self, ticket_id: int) -> bool:
        return ticket_id in self._tickets

    def __len__(self) -> int:
        return len(self._tickets)
