"""Application service: Checkout / order submission.

Orchestrates draft validation, pricing, the order store and the Cart
Engine:

    IDLE -> VALIDATING -> SUBMITTING -> SUCCEEDED | FAILED

A new submission may start from IDLE, SUCCEEDED or FAILED.  While one is
SUBMITTING any further ``submit()`` is rejected without touching the
order store, so a double click cannot create two orders.

Nothing raised by the order store escapes ``submit()``; callers only see
a ``SubmitResult`` and one notification per attempt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from storefront.application.cart_service import CartService
from storefront.application.notifications import (
    Notifier,
    NullNotifier,
    order_failed,
    order_invalid,
    order_submitted,
)
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import PlacedOrder
from storefront.domain.model.order_draft import OrderDraft
from storefront.domain.model.shipping import DEFAULT_SHIPPING_RATES, ShippingRates
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.order_numbers import OrderNumberGenerator
from storefront.domain.service.pricing import compute_total

logger = logging.getLogger("storefront.checkout")


class CheckoutState(Enum):
    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    SUBMITTING = "SUBMITTING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class ValidationResult:
    reasons: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.reasons


@dataclass(frozen=True)
class SubmitResult:
    order_id: str | None = None
    total: Money | None = None
    error: str | None = None
    reasons: tuple[str, ...] = ()
    rejected: bool = False

    @property
    def ok(self) -> bool:
        return self.order_id is not None


class CheckoutFlow:

    def __init__(
        self,
        cart_service: CartService,
        order_repo: OrderRepository,
        order_numbers: OrderNumberGenerator | None = None,
        shipping_rates: ShippingRates = DEFAULT_SHIPPING_RATES,
        notifier: Notifier | None = None,
    ) -> None:
        self._cart_service = cart_service
        self._order_repo = order_repo
        self._order_numbers = order_numbers or OrderNumberGenerator()
        self._shipping_rates = shipping_rates
        self._notifier = notifier or NullNotifier()
        self._state = CheckoutState.IDLE
        self._last_order_id: str | None = None

    @property
    def state(self) -> CheckoutState:
        return self._state

    @property
    def last_order_id(self) -> str | None:
        """Identifier of the most recent successful order, for confirmation."""
        return self._last_order_id

    def validate(self, draft: OrderDraft) -> ValidationResult:
        return ValidationResult(tuple(draft.problems()))

    def submit(self, draft: OrderDraft) -> SubmitResult:
        if self._state is CheckoutState.SUBMITTING:
            logger.warning("Ignoring checkout submit: a submission is in progress")
            return SubmitResult(error="A submission is already in progress", rejected=True)

        # Never trust that the caller validated.
        self._state = CheckoutState.VALIDATING
        validation = self.validate(draft)
        if not validation.is_valid:
            self._state = CheckoutState.FAILED
            self._notifier.notify(order_invalid(list(validation.reasons)))
            return SubmitResult(error="Order validation failed", reasons=validation.reasons)

        self._state = CheckoutState.SUBMITTING
        try:
            order = self._build_order(draft)
            self._order_repo.add(order)
        except DomainException as exc:
            logger.error("Order submission failed: %s", exc)
            return self._fail_submission()
        except Exception:
            logger.exception("Order submission failed with an unexpected store error")
            return self._fail_submission()

        self._cart_service.clear(silent=True)
        self._last_order_id = order.order_id
        self._state = CheckoutState.SUCCEEDED
        logger.info("Order %s submitted (total %s)", order.order_id, order.total_amount)
        self._notifier.notify(order_submitted(order.order_id))
        return SubmitResult(order_id=order.order_id, total=order.total_amount)

    # --- Internal helpers -----------------------------------------------------

    def _fail_submission(self) -> SubmitResult:
        self._state = CheckoutState.FAILED
        self._notifier.notify(order_failed())
        return SubmitResult(error="Order submission failed, please try again")

    def _build_order(self, draft: OrderDraft) -> PlacedOrder:
        return PlacedOrder(
            order_id=self._order_numbers.next_id(),
            total_amount=compute_total(draft.lines, draft.shipping_method, self._shipping_rates),
            notes=draft.summary_notes(),
            items=draft.line_items(),
        )
