# tests/test_router.py

import os
import random
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from router import PriorityQueue, RegularQueue
from shared_types import REGULAR_PRIORITY, Ticket
from support_system import SupportSystem


def _ticket(ticket_id, priority=REGULAR_PRIORITY):
    return Ticket.create(ticket_id, f"ticket {ticket_id}", priority)


def test_priority_queue_orders_by_priority_then_id():
    rng = random.Random(7)
    tickets = [_ticket(i, rng.randint(-3, 5)) for i in range(1, 41)]
    shuffled = tickets[:]
    rng.shuffle(shuffled)

    q = PriorityQueue()
    for t in shuffled:
        q.insert(t)

    drained = []
    while True:
        t = q.extract_min()
        if t is None:
            break
        drained.append(t)

    assert drained == sorted(tickets, key=lambda t: (t.priority, t.id))


def test_equal_priorities_come_out_lowest_id_first():
    q = PriorityQueue()
    q.insert(_ticket(3, 1))
    q.insert(_ticket(1, 1))
    q.insert(_ticket(2, 1))

    assert [q.extract_min().id for _ in range(3)] == [1, 2, 3]


def test_extract_min_on_empty_queue_returns_none():
    assert PriorityQueue().extract_min() is None


def test_remove_ticket_from_middle_of_heap():
    q = PriorityQueue()
    tickets = [_ticket(i, i) for i in range(1, 6)]
    for t in tickets:
        q.insert(t)

    assert q.remove(tickets[2]) is True
    assert tickets[2] not in q
    assert len(q) == 4
    assert [q.extract_min().id for _ in range(4)] == [1, 2, 4, 5]
    assert q.extract_min() is None


def test_remove_missing_ticket_returns_false():
    q = PriorityQueue()
    q.insert(_ticket(1, 1))

    assert q.remove(_ticket(2, 1)) is False
    assert len(q) == 1


def test_remove_then_reinsert_with_new_priority():
    q = PriorityQueue()
    a, b, c = _ticket(1, 1), _ticket(2, 2), _ticket(3, 3)
    for t in (a, b, c):
        q.insert(t)

    assert q.remove(c)
    c.set_priority(0)
    q.insert(c)

    assert [t.id for t in q.snapshot()] == [3, 1, 2]
    assert [q.extract_min().id for _ in range(3)] == [3, 1, 2]


def test_heap_stays_bounded_under_repeated_reinsertion():
    q = PriorityQueue()
    tickets = [_ticket(i, i) for i in range(1, 4)]
    for t in tickets:
        q.insert(t)

    for n in range(300):
        t = tickets[n % 3]
        assert q.remove(t)
        t.set_priority(5 if n % 2 else -5)
        q.insert(t)
        assert len(q._heap) <= 2 * len(q) + 1

    assert len(q) == 3
    while q.extract_min() is not None:
        pass
    assert q._heap == []


def test_heap_is_empty_after_reprioritized_ticket_is_dispatched():
    system = SupportSystem(("Agent 1", "Agent 2"))
    ticket = system.add_priority("flapping", 1)
    for n in range(1000):
        assert system.reprioritize(ticket.id, 5 if n % 2 else -5).ok

    assert len(system.priority_queue._heap) == 1
    system.dispatch()

    assert len(system.priority_queue) == 0
    assert system.priority_queue._heap == []


def test_snapshot_does_not_consume():
    q = PriorityQueue()
    q.insert(_ticket(2, 5))
    q.insert(_ticket(1, 9))

    assert [t.id for t in q.snapshot()] == [2, 1]
    assert len(q) == 2


def test_regular_queue_is_fifo():
    q = RegularQueue()
    tickets = [_ticket(i) for i in (5, 2, 9, 1)]
    for t in tickets:
        q.enqueue(t)

    assert q.snapshot() == tickets
    assert [q.dequeue() for _ in range(4)] == tickets
    assert q.dequeue() is None
    assert len(q) == 0
