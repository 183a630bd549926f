# support_system.py  ──  core-facing boundary used by the API and tests

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Union

from agent_registry import AgentPool
from config import AGENT_IDS
from dispatcher import Dispatcher
from router import PriorityQueue, RegularQueue
from shared_types import (
    REGULAR_PRIORITY,
    Assignment,
    Outcome,
    SupportError,
    Ticket,
    TicketStatus,
)
from ticket_registry import TicketRegistry

logger = logging.getLogger(__name__)


class SupportSystem:
    """
    Ticket intake, reprioritisation, dispatch and resolution.

    Not safe for concurrent mutation: a dispatch pass assumes exclusive
    access to the registry, both queues and the agent pool.
    """

    def __init__(self, agent_ids: Iterable[str] = AGENT_IDS):
        self.tickets = TicketRegistry()
        self.regular_queue = RegularQueue()
        self.priority_queue = PriorityQueue()
        self.pool = AgentPool(agent_ids)
        self.dispatcher = Dispatcher(self.pool, self.priority_queue, self.regular_queue)

    # ── Intake ────────────────────────────────────────────────────────────────

    def add_regular(self, description: str) -> Ticket:
        ticket = self.tickets.new_ticket(description, REGULAR_PRIORITY, lane='regular')
        self.regular_queue.enqueue(ticket)
        logger.info("✅ Regular Ticket Added: %s", ticket)
        return ticket

    def add_priority(self, description: str, priority: int) -> Ticket:
        ticket = self.tickets.new_ticket(description, priority, lane='priority')
        self.priority_queue.insert(ticket)
        logger.info("🚨 Priority Ticket Added: %s", ticket)
        return ticket

    # ── Mutation ──────────────────────────────────────────────────────────────

    def reprioritize(self, ticket_id: int, new_priority: int) -> Outcome:
        ticket = self.tickets.get(ticket_id)
        if ticket is None:
            logger.warning("⚠️ Ticket ID %s not found", ticket_id)
            return Outcome(error=SupportError.TICKET_NOT_FOUND)

        # must come out under its old priority before the rank changes
        if not self.priority_queue.remove(ticket):
            logger.warning("⚠️ Ticket %s not found in the priority queue", ticket_id)
            return Outcome(ticket=ticket, error=SupportError.NOT_IN_PRIORITY_QUEUE)

        ticket.set_priority(new_priority)
        self.priority_queue.insert(ticket)
        logger.info("🔄 Ticket Reprioritized: %s", ticket)
        return Outcome(ticket=ticket)

    def dispatch(self) -> List[Assignment]:
        return self.dispatcher.run_pass()

    def resolve(self, ticket_id: int) -> Outcome:
        ticket = self.tickets.get(ticket_id)
        if ticket is None:
            logger.warning("⚠️ Ticket ID %s not found", ticket_id)
            return Outcome(error=SupportError.TICKET_NOT_FOUND)
        if ticket.status is not TicketStatus.IN_PROGRESS:
            logger.warning("⚠️ Ticket %s is %s, not in progress", ticket_id, ticket.status.value)
            return Outcome(ticket=ticket, error=SupportError.INVALID_STATE)

        ticket.resolve()
        logger.info("✅ Ticket Resolved: %s", ticket)
        return Outcome(ticket=ticket)

    # ── Queries ───────────────────────────────────────────────────────────────

    def get(self, ticket_id: int) -> Optional[Ticket]:
        return self.tickets.get(ticket_id)

    def list_by_status(self, status: Union[str, TicketStatus]) -> Iterator[Ticket]:
        return self.tickets.values_by_status(status)

    def queue_depths(self) -> Dict[str, int]:
        return {
            "priority": len(self.priority_queue),
            "regular": len(self.regular_queue),
        }

    @property
    def agents(self) -> tuple:
        return self.pool.members
