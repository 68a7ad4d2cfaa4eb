"""French display strings for prices and performance dates."""
import logging
from datetime import datetime

from boxoffice.services.availability.types import TicketTier

logger = logging.getLogger(__name__)

# datetime.weekday(): Monday is 0
DAYS = ["Lundi", "Mardi", "Mercredi", "Jeudi", "Vendredi", "Samedi", "Dimanche"]
MONTHS = [
    "janvier", "février", "mars", "avril", "mai", "juin",
    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
]


def format_price(price: float) -> str:
    """18 -> '18€', 12.5 -> '12,50€'."""
    if float(price).is_integer():
        return f"{int(price)}€"
    return f"{price:.2f}".replace(".", ",") + "€"


def format_tier(tier: TicketTier) -> str:
    """Pricing line, e.g. 'Adulte: 18€'."""
    return f"{tier.name}: {format_price(tier.price)}"


def parse_start(start: str) -> datetime:
    """Billetweb local start, 'YYYY-MM-DD HH:MM' with optional seconds."""
    return datetime.fromisoformat(start.strip().replace(" ", "T"))


def format_session_date(start: str) -> tuple[str, str]:
    """
    ('Vendredi 24 avril', '20h00') for '2026-04-24 20:00'.
    A start that is not ISO comes back as (start, '') so the widget still renders it.
    """
    try:
        d = parse_start(start)
    except ValueError:
        logger.warning("Unparseable session start %r, showing it as is", start)
        return start, ""
    day = f"{DAYS[d.weekday()]} {d.day} {MONTHS[d.month - 1]}"
    time = f"{d.hour}h{d.minute:02d}"
    return day, time


def format_session_label(start: str) -> str:
    """'Vendredi 24 avril à 20h00'."""
    day, time = format_session_date(start)
    return f"{day} à {time}" if time else day
