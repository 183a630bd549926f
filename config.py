# config.py
# All configuration and environment variables live here.
# No hardcoded values anywhere in api_server.py or simulate.py

import os


def _parse_agents(raw: str) -> tuple[str, ...]:
    seen: list[str] = []
    for name in raw.split(","):
        name = name.strip()
        if name and name not in seen:
            seen.append(name)
    return tuple(seen)


# ── Agents ────────────────────────────────────────────────────────────────────
AGENT_IDS: tuple[str, ...] = _parse_agents(os.getenv("SUPPORT_AGENTS", "Agent 1,Agent 2"))
UNASSIGNED_AGENT: str = "Unassigned"

# ── API ───────────────────────────────────────────────────────────────────────
API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8000"))
API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8000")

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
