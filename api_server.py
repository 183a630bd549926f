# api_server.py
# FastAPI server: ticket intake, reprioritise, dispatch, resolve, listing, /health
# Handlers are async and never await inside a core call, so each operation
# runs to completion on the event loop before the next one starts.

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from config import LOG_FORMAT, LOG_LEVEL
from shared_types import Assignment, Outcome, SupportError, Ticket
from support_system import SupportSystem

logger = logging.getLogger(__name__)

# Swapped out by the tests for a fresh instance
system = SupportSystem()

app = FastAPI(
    title="Support Ticket Dispatch Engine",
    version="1.0.0",
)

# ── Request / Response Models ─────────────────────────────────────────────────

class RegularTicketRequest(BaseModel):
    description: str = Field(..., min_length=1)

class PriorityTicketRequest(BaseModel):
    description: str = Field(..., min_length=1)
    priority: int

class ReprioritizeRequest(BaseModel):
    priority: int

class TicketResponse(BaseModel):
    id: int
    description: str
    priority: int
    status: str
    assigned_agent: str
    lane: str

class AssignmentResponse(BaseModel):
    ticket: TicketResponse
    agent: str

class DispatchResponse(BaseModel):
    assignments: list[AssignmentResponse]
    queue_depth: dict[str, int]
    agents: list[str]

class HealthResponse(BaseModel):
    status: str
    queue_depth: dict[str, int]
    agents: list[str]

# ── Helpers ───────────────────────────────────────────────────────────────────

_ERROR_STATUS = {
    SupportError.TICKET_NOT_FOUND: 404,
    SupportError.NOT_IN_PRIORITY_QUEUE: 409,
    SupportError.INVALID_STATE: 409,
}

def _ticket_response(ticket: Ticket) -> TicketResponse:
    return TicketResponse(
        id=ticket.id,
        description=ticket.description,
        priority=ticket.priority,
        status=ticket.status.value,
        assigned_agent=ticket.assigned_agent,
        lane=ticket.lane,
    )

def _unwrap(outcome: Outcome) -> TicketResponse:
    """Turn a rejected outcome into the matching HTTP error."""
    if not outcome.ok:
        raise HTTPException(
            status_code=_ERROR_STATUS[outcome.error],
            detail={"error": outcome.error.value, "message": outcome.message},
        )
    return _ticket_response(outcome.ticket)

def _assignment_response(assignment: Assignment) -> AssignmentResponse:
    return AssignmentResponse(
        ticket=_ticket_response(assignment.ticket),
        agent=assignment.agent_id,
    )

# ── Intake ────────────────────────────────────────────────────────────────────

@app.post("/tickets/regular", status_code=201, response_model=TicketResponse)
async def add_regular_ticket(req: RegularTicketRequest):
    return _ticket_response(system.add_regular(req.description))

@app.post("/tickets/priority", status_code=201, response_model=TicketResponse)
async def add_priority_ticket(req: PriorityTicketRequest):
    return _ticket_response(system.add_priority(req.description, req.priority))

# ── Lifecycle ─────────────────────────────────────────────────────────────────

@app.post("/tickets/{ticket_id}/reprioritize", response_model=TicketResponse)
async def reprioritize_ticket(ticket_id: int, req: ReprioritizeRequest):
    return _unwrap(system.reprioritize(ticket_id, req.priority))

@app.post("/tickets/{ticket_id}/resolve", response_model=TicketResponse)
async def resolve_ticket(ticket_id: int):
    return _unwrap(system.resolve(ticket_id))

@app.post("/dispatch", response_model=DispatchResponse)
async def dispatch_tickets():
    """Run one assignment pass: every priority ticket first, then regular ones."""
    assignments = system.dispatch()
    return DispatchResponse(
        assignments=[_assignment_response(a) for a in assignments],
        queue_depth=system.queue_depths(),
        agents=list(system.agents),
    )

# ── Queries ───────────────────────────────────────────────────────────────────

@app.get("/tickets", response_model=list[TicketResponse])
async def list_tickets(status: str = Query(..., min_length=1)):
    """Status match is case-insensitive: open, in progress, resolved."""
    return [_ticket_response(t) for t in system.list_by_status(status)]

@app.get("/tickets/{ticket_id}", response_model=TicketResponse)
async def get_ticket(ticket_id: int):
    ticket: Optional[Ticket] = system.get(ticket_id)
    return _unwrap(Outcome(ticket=ticket, error=None if ticket else SupportError.TICKET_NOT_FOUND))

@app.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="ok",
        queue_depth=system.queue_depths(),
        agents=list(system.agents),
    )

# ── Entry Point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn
    from config import API_HOST, API_PORT
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    uvicorn.run("api_server:app", host=API_HOST, port=API_PORT)
