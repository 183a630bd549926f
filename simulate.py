# simulate.py  ──  replays the reference scenario against a running api_server
import logging

import httpx

from config import API_BASE_URL, LOG_FORMAT, LOG_LEVEL

logger = logging.getLogger("simulate")

PRIORITY_TICKETS = [
    ("Server is completely down", 1),
    ("Disk full on the billing database", 1),
    ("Customer cannot export invoices", 3),
]

REGULAR_TICKETS = [
    "Password reset",
    "How do I change my email address?",
]


def main() -> None:
    priority_ids = []
    with httpx.Client(base_url=API_BASE_URL, timeout=10) as client:
        for text, priority in PRIORITY_TICKETS:
            resp = client.post("/tickets/priority", json={"description": text, "priority": priority})
            resp.raise_for_status()
            priority_ids.append(resp.json()["id"])
            logger.info("🚨 #%d priority=%d | %s", resp.json()["id"], priority, text)

        for text in REGULAR_TICKETS:
            resp = client.post("/tickets/regular", json={"description": text})
            resp.raise_for_status()
            logger.info("✅ #%d regular | %s", resp.json()["id"], text)

        # bump the export ticket ahead of everything else
        export_id = priority_ids[-1]
        resp = client.post(f"/tickets/{export_id}/reprioritize", json={"priority": 0})
        logger.info("🔄 reprioritize #%d → HTTP %d", export_id, resp.status_code)

        resp = client.post("/dispatch")
        resp.raise_for_status()
        for item in resp.json()["assignments"]:
            ticket = item["ticket"]
            logger.info("👔 #%d → %s (%s)", ticket["id"], item["agent"], ticket["status"])

        resolved = client.get("/tickets", params={"status": "resolved"}).json()
        logger.info("📄 %d ticket(s) resolved, pool: %s",
                    len(resolved), client.get("/health").json()["agents"])


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    main()
