# dispatcher.py  ──  one assignment pass over both lanes

import logging
from collections import deque
from typing import Deque, List, Optional, Union

from agent_registry import AgentPool
from router import PriorityQueue, RegularQueue
from shared_types import Assignment

logger = logging.getLogger(__name__)


class Dispatcher:

    def __init__(self, pool: AgentPool, priority_queue: PriorityQueue,
                 regular_queue: RegularQueue):
        self.pool = pool
        self.priority_queue = priority_queue
        self.regular_queue = regular_queue

    def run_pass(self) -> List[Assignment]:
        """
        Drain the priority lane, then the regular lane.

        An agent goes to the back of ``busy`` once its ticket is resolved and
        is picked again only after ``available`` runs dry. Every agent is
        handed back to the pool when both lanes are empty.
        """
        available = self.pool.checkout()
        busy: Deque[str] = deque()
        assignments: List[Assignment] = []

        try:
            self._drain(self.priority_queue, available, busy, assignments)
            self._drain(self.regular_queue, available, busy, assignments)
        finally:
            self.pool.restore(available, busy)

        logger.info(
            "📋 Dispatch pass complete — %d ticket(s) assigned, %d agent(s) back in pool",
            len(assignments), len(self.pool),
        )
        return assignments

    @staticmethod
    def _next_ticket(lane: Union[PriorityQueue, RegularQueue]):
        if isinstance(lane, PriorityQueue):
            return lane.extract_min()
        return lane.dequeue()

    def _drain(self, lane, available: Deque[str], busy: Deque[str],
               assignments: List[Assignment]) -> None:
        while (available or busy) and lane:
            agent: Optional[str] = available.popleft() if available else busy.popleft()
            ticket = self._next_ticket(lane)
            if ticket is None:
                busy.append(agent)
                break

            ticket.assign(agent)
            logger.info("👔 Assigned Ticket: %s", ticket)

            # Work is instantaneous: the ticket is resolved within the pass
            ticket.resolve()
            logger.info("✅ Ticket Resolved Automatically: %s", ticket)

            busy.append(agent)
            assignments.append(Assignment(ticket=ticket, agent_id=agent))
