"""
Static copy for "Esperanza", the i-Majine musical sold on Billetweb.

Used for the tool description, the structured summary and the narrative shown to the user.
Background facts are only for answering follow-up questions; the narrative says so.
"""
from typing import TypedDict


class EventInfo(TypedDict):
    title: str  # structured summary title
    name: str  # short name for widget headers
    subtitle: str
    venue: str
    summary: str  # first narrative line
    pricing_summary: str  # second narrative line
    background: list[str]  # "use only if asked" facts
    tool_description: str


ESPERANZA: EventInfo = {
    "title": "ESPERANZA - Spectacle Musical par i-Majine",
    "name": "Esperanza",
    "subtitle": "Spectacle Musical par i-Majine",
    "venue": "La Longère de Beaupuy, Mouilleron-le-Captif",
    "summary": (
        "Esperanza — Spectacle Musical par i-Majine. 4 représentations du 24 au 26 avril 2026 "
        "à La Longère de Beaupuy, Mouilleron-le-Captif."
    ),
    "pricing_summary": "Tarifs : 10€ (-12 ans), 14€ (12-25 ans), 18€ (26 ans et plus).",
    "background": [
        "i-Majine est une association vendéenne de comédie musicale. Esperanza est le 6e spectacle de l'association.",
        "23 artistes vendéens et bénévoles chantent, dansent et jouent la comédie en live.",
        "L'équipe de bénévoles, la Dream Team, travaille à la confection des costumes et décors : tout est fait par l'association.",
        "Le spectacle est accessible aux PMR. Il suffit d'envoyer un mail à i-majine@live.fr pour valider la disponibilité des places PMR.",
        "Un tarif de groupe est accessible à partir de 12 personnes.",
        "Pour les entreprises, un tarif CSE est disponible sur simple demande.",
        "Ne mentionne pas le nombre total de places restantes sauf si l'utilisateur le demande explicitement.",
    ],
    "tool_description": (
        'Show ticket purchasing widget for "Esperanza", a musical by i-Majine in April 2026 at '
        "La Longère de Beaupuy, Mouilleron-le-Captif. Use when the user wants to see Esperanza, "
        "buy tickets for the show, or asks about the musical Esperanza."
    ),
}

BACKGROUND_HEADER = "Informations complémentaires à utiliser UNIQUEMENT si l'utilisateur pose des questions :"


def get_event_info() -> EventInfo:
    """Return the event copy used by the buy-tickets tool."""
    return ESPERANZA
