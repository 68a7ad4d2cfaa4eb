"""Widget-side logic for the buy-tickets UI fragment."""
from boxoffice.widgets.buy_tickets import (
    BookingWizard,
    InvalidTransitionError,
    SelectionRejectedError,
    WizardError,
    WizardNotReadyError,
    WizardStep,
)

__all__ = [
    "BookingWizard",
    "InvalidTransitionError",
    "SelectionRejectedError",
    "WizardError",
    "WizardNotReadyError",
    "WizardStep",
]
