"""Value objects for the checkout domain."""

from droppit.domain.value_objects.money import Money, format_amount

__all__ = ["Money", "format_amount"]
