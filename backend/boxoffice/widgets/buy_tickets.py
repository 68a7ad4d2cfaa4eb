"""
Booking wizard for the buy-tickets widget.

Walks the user through Intro -> DateSelection -> TierSelection -> Confirmation, then hands
the checkout URL to the host's "open external URL" capability. All state is local to one
wizard instance (one per UI mount); every render re-derives the view from the tool metadata.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from pydantic import BaseModel

from boxoffice.data.esperanza import EventInfo, get_event_info
from boxoffice.services.availability.formatting import format_price, format_session_date, format_session_label
from boxoffice.services.availability.types import AggregatedSession, SessionStatus

logger = logging.getLogger(__name__)

LOADING_LABEL = "Chargement..."
START_LABEL = "Réserver des places"
CHECKOUT_LABEL = "Réserver sur Billetweb"
TOTAL_STEPS = 3


class WizardStep(IntEnum):
    INTRO = 0
    DATE_SELECTION = 1
    TIER_SELECTION = 2
    CONFIRMATION = 3


class WizardError(Exception):
    """Base class for rejected wizard interactions. State is unchanged when raised."""


class WizardNotReadyError(WizardError):
    """Metadata has not been delivered yet; only the loading view is available."""


class InvalidTransitionError(WizardError):
    """The action does not apply to the current step."""


class SelectionRejectedError(WizardError):
    """Sold-out or unknown session, or unknown tier."""


class WidgetTicket(BaseModel):
    id: str
    name: str
    price: float


class WidgetMeta(BaseModel):
    """Tool metadata as received by the widget (_meta)."""

    sessions: list[AggregatedSession]
    tickets: list[WidgetTicket]
    shopBase: str
    coverUrl: str


@dataclass(frozen=True)
class LoadingView:
    label: str = LOADING_LABEL


@dataclass(frozen=True)
class PriceTag:
    label: str  # "18€"
    name: str


@dataclass(frozen=True)
class IntroView:
    cover_url: str
    title: str
    subtitle: str
    venue: str
    prices: list[PriceTag]
    cta_label: str = START_LABEL


@dataclass(frozen=True)
class DateOption:
    session_id: str
    day: str
    time: str
    badge: str  # "Complet", "5 places" or "Disponible"
    status: SessionStatus
    disabled: bool
    note: str = ""


@dataclass(frozen=True)
class DateSelectionView:
    title: str
    step: int
    total_steps: int
    options: list[DateOption]


@dataclass(frozen=True)
class TierOption:
    ticket_id: str
    name: str
    price_label: str
    selected: bool


@dataclass(frozen=True)
class TierSelectionView:
    title: str
    step: int
    total_steps: int
    chosen_session: str
    options: list[TierOption]


@dataclass(frozen=True)
class ConfirmationView:
    title: str
    step: int
    total_steps: int
    session_label: str
    tier_label: str
    checkout_url: str
    cta_label: str = CHECKOUT_LABEL


WizardView = LoadingView | IntroView | DateSelectionView | TierSelectionView | ConfirmationView


def _badge(session: AggregatedSession) -> str:
    if session.status is SessionStatus.SOLD_OUT:
        return "Complet"
    if session.status is SessionStatus.LOW_STOCK:
        return f"{session.remaining} places"
    return "Disponible"


class BookingWizard:
    """
    Client-side booking state machine over one aggregated snapshot.

    Transitions are synchronous and raise a WizardError (leaving state untouched) when the
    interaction is not allowed. Back-edges only clear the selection made at the step being left.
    """

    def __init__(
        self,
        meta: Mapping[str, Any] | None = None,
        *,
        open_external: Callable[[str], None] | None = None,
        event: EventInfo | None = None,
    ) -> None:
        self._meta: WidgetMeta | None = None
        self._open_external = open_external
        self._event = event or get_event_info()
        self.step = WizardStep.INTRO
        self.selected_session_id = ""
        self.selected_ticket_id = ""
        if meta is not None:
            self.deliver(meta)

    # --- data -------------------------------------------------------------

    def deliver(self, meta: Mapping[str, Any]) -> None:
        """Hand over the tool metadata once the host has it. Starts again from the intro."""
        self._meta = WidgetMeta.model_validate(meta)
        self.step = WizardStep.INTRO
        self.selected_session_id = ""
        self.selected_ticket_id = ""

    @property
    def ready(self) -> bool:
        return self._meta is not None

    def _require_meta(self) -> WidgetMeta:
        if self._meta is None:
            raise WizardNotReadyError("Tool metadata not delivered yet")
        return self._meta

    def _require_step(self, step: WizardStep) -> WidgetMeta:
        meta = self._require_meta()
        if self.step is not step:
            raise InvalidTransitionError(f"Not allowed from {self.step.name}")
        return meta

    @property
    def selected_session(self) -> AggregatedSession | None:
        if self._meta is None or not self.selected_session_id:
            return None
        return next((s for s in self._meta.sessions if s.id == self.selected_session_id), None)

    @property
    def selected_ticket(self) -> WidgetTicket | None:
        if self._meta is None or not self.selected_ticket_id:
            return None
        return next((t for t in self._meta.tickets if t.id == self.selected_ticket_id), None)

    # --- transitions ------------------------------------------------------

    def start_booking(self) -> None:
        self._require_step(WizardStep.INTRO)
        self.step = WizardStep.DATE_SELECTION

    def select_session(self, session_id: str) -> None:
        """Only sessions that are not sold out move on; their controls are rendered disabled."""
        meta = self._require_step(WizardStep.DATE_SELECTION)
        session = next((s for s in meta.sessions if s.id == session_id), None)
        if session is None:
            raise SelectionRejectedError(f"Unknown session {session_id}")
        if session.sold_out:
            raise SelectionRejectedError(f"Session {session_id} is sold out")
        self.selected_session_id = session.id
        self.step = WizardStep.TIER_SELECTION

    def select_tier(self, ticket_id: str) -> None:
        """Tiers have no quota; any listed tier is accepted."""
        meta = self._require_step(WizardStep.TIER_SELECTION)
        if not any(t.id == ticket_id for t in meta.tickets):
            raise SelectionRejectedError(f"Unknown ticket {ticket_id}")
        self.selected_ticket_id = ticket_id
        self.step = WizardStep.CONFIRMATION

    def back(self) -> None:
        self._require_meta()
        if self.step is WizardStep.DATE_SELECTION:
            self.step = WizardStep.INTRO
        elif self.step is WizardStep.TIER_SELECTION:
            self.selected_session_id = ""
            self.step = WizardStep.DATE_SELECTION
        elif self.step is WizardStep.CONFIRMATION:
            self.selected_ticket_id = ""
            self.step = WizardStep.TIER_SELECTION
        else:
            raise InvalidTransitionError("Already at the first step")

    # --- handoff ----------------------------------------------------------

    def checkout_url(self) -> str:
        """shopBase + '&session=' + session id. The tier is chosen again on Billetweb."""
        meta = self._require_step(WizardStep.CONFIRMATION)
        return f"{meta.shopBase}&session={self.selected_session_id}"

    def book(self) -> str:
        """Open the checkout page through the host. Returns the URL that was opened."""
        url = self.checkout_url()
        if self._open_external is None:
            raise InvalidTransitionError("Host did not provide an open-external capability")
        logger.info("Checkout handoff for session %s", self.selected_session_id)
        self._open_external(url)
        return url

    # --- views ------------------------------------------------------------

    def render(self) -> WizardView:
        if self._meta is None:
            return LoadingView()
        meta = self._meta
        name = self._event["name"]
        if self.step is WizardStep.INTRO:
            return IntroView(
                cover_url=meta.coverUrl,
                title=name,
                subtitle=self._event["subtitle"],
                venue=self._event["venue"],
                prices=[PriceTag(label=format_price(t.price), name=t.name) for t in meta.tickets],
            )
        if self.step is WizardStep.DATE_SELECTION:
            options = []
            for s in meta.sessions:
                day, time = format_session_date(s.start)
                options.append(
                    DateOption(
                        session_id=s.id,
                        day=day,
                        time=time,
                        badge=_badge(s),
                        status=s.status,
                        disabled=s.sold_out,
                        note=s.description,
                    )
                )
            return DateSelectionView(title=name, step=1, total_steps=TOTAL_STEPS, options=options)
        session = self.selected_session
        if self.step is WizardStep.TIER_SELECTION and session is not None:
            return TierSelectionView(
                title=name,
                step=2,
                total_steps=TOTAL_STEPS,
                chosen_session=format_session_label(session.start),
                options=[
                    TierOption(
                        ticket_id=t.id,
                        name=t.name,
                        price_label=format_price(t.price),
                        selected=t.id == self.selected_ticket_id,
                    )
                    for t in meta.tickets
                ],
            )
        ticket = self.selected_ticket
        if session is None or ticket is None:
            # Selections are validated on the way in, so this only happens with broken metadata.
            raise InvalidTransitionError(f"No selection to render at {self.step.name}")
        return ConfirmationView(
            title=name,
            step=3,
            total_steps=TOTAL_STEPS,
            session_label=format_session_label(session.start),
            tier_label=f"{ticket.name} — {format_price(ticket.price)}",
            checkout_url=self.checkout_url(),
        )
