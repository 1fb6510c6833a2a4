# Local persistence keys shared with the web client
PENDING_BOOKING_KEY = "droppit_pending_booking"
BOOKINGS_KEY = "droppit_bookings"
LAST_PAID_ORDER_KEY = "droppit_last_paid_order"
CHECKOUT_SUCCESS_KEY = "droppit_checkout_success"

DEFAULT_CURRENCY = "usd"

# PaymentIntent statuses that count as a completed checkout
PAYMENT_SUCCESS_STATUSES = frozenset({"succeeded", "processing"})

GENERIC_PAYMENT_FAILURE_MESSAGE = "Payment failed. Please try again."
GENERIC_CONFIRMATION_ERROR_MESSAGE = "Something went wrong while confirming payment."
MISSING_CLIENT_SECRET_MESSAGE = "Server did not return clientSecret."
