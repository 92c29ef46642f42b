from __future__ import annotations

from typing import Any, Protocol


class KpiSourcePort(Protocol):
    """Computes dashboard KPIs for a company (usually several aggregate queries)."""

    async def fetch(self, company_id: int) -> dict[str, Any]:
        """Returns the KPI payload. Raises on failure; nothing is cached then."""
        ...
