"""Domain service: payment classification.

No gateway is called. The outcome is derived from the payment method
tag alone, and a failed outcome is still recorded on the order rather
than rejecting it.
"""

from __future__ import annotations

import re

from lessonshop.domain.model.order import PaymentOutcome

_CARD_LAST4_RE = re.compile(r"^\d{4}$")


def classify_payment(
    method: object,
    card_last4: object = None,
    card_brand: object = None,
) -> PaymentOutcome:
    tag = method.strip().lower() if isinstance(method, str) else ""
    brand = card_brand.strip() if isinstance(card_brand, str) and card_brand.strip() else None
    last4 = card_last4.strip() if isinstance(card_last4, str) else None

    if tag == "card":
        if last4 is None or not _CARD_LAST4_RE.match(last4):
            return PaymentOutcome(
                method=tag,
                success=False,
                message="Card payment declined: invalid card details",
                card_brand=brand,
            )
        return PaymentOutcome(
            method=tag,
            success=True,
            message=f"Card payment approved ({brand or 'card'} ending {last4})",
            card_last4=last4,
            card_brand=brand,
        )

    if tag == "paypal":
        return PaymentOutcome(method=tag, success=True, message="PayPal payment approved")

    return PaymentOutcome(method=tag or "other", success=True, message="Payment recorded")
