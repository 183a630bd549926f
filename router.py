# router.py  ──  the two intake lanes

import heapq
import itertools
from collections import deque
from typing import Deque, Dict, List, Optional

from shared_types import Ticket


# REGULAR QUEUE
class RegularQueue:
    """First-come-first-served lane."""

    def __init__(self):
        self._items: Deque[Ticket] = deque()

    def enqueue(self, ticket: Ticket) -> None:
        self._items.append(ticket)

    def dequeue(self) -> Optional[Ticket]:
        if not self._items:
            return None
        return self._items.popleft()

    def snapshot(self) -> List[Ticket]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


# PRIORITY QUEUE
_REMOVED = None


class PriorityQueue:
    """
    Min-heap ordered by (priority, id) with removal of arbitrary tickets.

    Each heap entry is a list [priority, id, seq, ticket]. Removing a ticket
    blanks its entry in place (lazy deletion); extract_min skips blanked
    entries. The entry keeps the priority the ticket had when inserted, so a
    ticket's priority must not change while it sits in the heap.
    """

    def __init__(self):
        self._heap: list = []
        self._entries: Dict[int, list] = {}
        self._seq = itertools.count()

    def insert(self, ticket: Ticket) -> None:
        if ticket.id in self._entries:
            self.remove(ticket)
        entry = [ticket.priority, ticket.id, next(self._seq), ticket]
        self._entries[ticket.id] = entry
        heapq.heappush(self._heap, entry)

    def remove(self, ticket: Ticket) -> bool:
        entry = self._entries.pop(ticket.id, None)
        if entry is None:
            return False
        entry[-1] = _REMOVED
        self._compact()
        return True

    def extract_min(self) -> Optional[Ticket]:
        while self._heap:
            *_, ticket = heapq.heappop(self._heap)
            if ticket is not _REMOVED:
                del self._entries[ticket.id]
                self._compact()
                return ticket
        return None

    def _compact(self) -> None:
        # dead entries never outnumber live ones
        if not self._entries:
            self._heap.clear()
        elif len(self._heap) > 2 * len(self._entries):
            self._heap = list(self._entries.values())
            heapq.heapify(self._heap)

    def snapshot(self) -> List[Ticket]:
        live = sorted(self._entries.values())
        return [entry[-1] for entry in live]

    def __contains__(self, ticket: Ticket) -> bool:
        return ticket.id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
