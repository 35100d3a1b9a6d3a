"""Value objects for payment domain."""

from spayd.domain.payment.value_objects.payment import CURRENCY_CZK, Payment

__all__ = [
    "CURRENCY_CZK",
    "Payment",
]
