from __future__ import annotations

import logging
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


DEFAULT_TAX_RATE: float = 0.08

# Transfer tax (ITP) on second-hand homes by autonomous community
ITP_RATES: Dict[str, float] = {
    "Andalucía": 0.08,
    "Aragón": 0.08,
    "Asturias": 0.08,
    "Baleares": 0.08,
    "Canarias": 0.065,
    "Cantabria": 0.10,
    "Castilla - La Mancha": 0.09,
    "Castilla León": 0.08,
    "Cataluña": 0.10,
    "Ceuta": 0.06,
    "Comunidad de Madrid": 0.06,
    "Comunidad Valenciana": 0.10,
    "Extremadura": 0.08,
    "Galicia": 0.09,
    "La Rioja": 0.07,
    "Melilla": 0.06,
    "Murcia": 0.08,
    "Navarra": 0.06,
    "País Vasco": 0.04,
}

COMMUNITIES: List[str] = list(ITP_RATES)


def tax_rate_for(community: Optional[str]) -> float:
    """Return the ITP rate for a community, or the 8% default if unknown."""
    rate = ITP_RATES.get(community) if community else None
    if rate is None:
        logger.warning("No ITP rate for community %r, using default %.1f%%", community, DEFAULT_TAX_RATE * 100)
        return DEFAULT_TAX_RATE
    return rate
