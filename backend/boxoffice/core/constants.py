"""
Centralized constants for the Billetweb integration and availability rules.

Change URLs or the low-stock cutoff here instead of scattering literals across services.
"""

# Billetweb API; credentials and event id come from settings.
DEFAULT_API_BASE = "https://www.billetweb.fr/api"
API_VERSION = "1"
BILLETWEB_DOMAIN = "https://www.billetweb.fr"

# Resource names under /event/{id}/
RESOURCE_DATES = "dates"
RESOURCE_TICKETS = "tickets"
RESOURCE_AVAIL = "avail"

# Checkout handoff and widget poster
DEFAULT_SHOP_URL = "https://www.billetweb.fr/shop.php?event=esperanza-spectacle-musical"
DEFAULT_COVER_URL = "https://www.billetweb.fr/files/page/esperanza-spectacle-musical.png"

# Sessions with 0 < remaining <= this many seats are flagged as running low (inclusive)
LOW_AVAILABILITY_THRESHOLD = 30

# Billetweb ticket visibility: "0" = public; anything else is hidden/internal
PUBLIC_VISIBILITY = "0"

TOOL_NAME = "buy-tickets"
SERVER_NAME = "esperanza"
SERVER_VERSION = "0.0.1"
