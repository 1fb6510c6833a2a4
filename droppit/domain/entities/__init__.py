from droppit.domain.entities.checkout import CheckoutRequest, CheckoutSucceeded

__all__ = ["CheckoutRequest", "CheckoutSucceeded"]
