# agent_registry.py

from collections import deque
from typing import Deque, Iterable, List, Tuple

from config import AGENT_IDS


class AgentPool:
    """
    Agents not currently mid-assignment.

    A dispatch pass checks the whole pool out and hands every agent back
    when it finishes, so between passes the membership never changes.
    """

    def __init__(self, agent_ids: Iterable[str] = AGENT_IDS):
        self.available: List[str] = []
        for agent_id in agent_ids:
            if agent_id not in self.available:
                self.available.append(agent_id)

    def checkout(self) -> Deque[str]:
        agents, self.available = deque(self.available), []
        return agents

    def restore(self, *groups: Iterable[str]) -> None:
        for group in groups:
            for agent_id in group:
                if agent_id not in self.available:
                    self.available.append(agent_id)

    @property
    def members(self) -> Tuple[str, ...]:
        return tuple(self.available)

    def __len__(self) -> int:
        return len(self.available)
