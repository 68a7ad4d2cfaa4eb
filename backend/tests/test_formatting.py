"""French display strings."""
import pytest

from boxoffice.services.availability import TicketTier
from boxoffice.services.availability.formatting import (
    format_price,
    format_session_date,
    format_session_label,
    format_tier,
)


@pytest.mark.parametrize("price, expected", [(18, "18€"), (18.0, "18€"), (12.5, "12,50€")])
def test_format_price(price, expected):
    assert format_price(price) == expected


def test_format_tier():
    tier = TicketTier(id="a", name="Adulte", price=18, visibility="0")
    assert format_tier(tier) == "Adulte: 18€"


@pytest.mark.parametrize(
    "start, expected",
    [
        ("2026-04-24 20:00", ("Vendredi 24 avril", "20h00")),
        ("2026-04-26 15:30:00", ("Dimanche 26 avril", "15h30")),
        ("2026-08-03 09:05", ("Lundi 3 août", "9h05")),
    ],
)
def test_format_session_date(start, expected):
    assert format_session_date(start) == expected


def test_format_session_label():
    assert format_session_label("2026-04-25 20:00") == "Samedi 25 avril à 20h00"


def test_unparseable_start_is_shown_as_is():
    assert format_session_date("samedi soir") == ("samedi soir", "")
    assert format_session_label("samedi soir") == "samedi soir"
