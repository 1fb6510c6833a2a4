import unittest
from unittest.mock import MagicMock, patch

import stripe
from pybreaker import CircuitBreakerError

from droppit.application.interfaces.payment_provider import PaymentEntry
from droppit.infrastructure.circuit_breaker import stripe_breaker
from droppit.infrastructure.gateways.stripe_payment_provider import StripePaymentProvider

RETURN_URL = "http://shop.test/review?orderId=ord_1"


class TestStripePaymentProvider(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        stripe_breaker.close()
        self.provider = StripePaymentProvider(api_key="sk_test_123")
        self.entry = self.provider.create_entry("pi_123_secret_abc")
        self.entry.payment_method_id = "pm_card_visa"

    def tearDown(self):
        stripe_breaker.close()

    @patch("stripe.PaymentIntent.confirm")
    async def test_confirm_succeeded(self, mock_confirm):
        mock_confirm.return_value = MagicMock(status="succeeded", next_action=None)

        result = await self.provider.confirm_payment(self.entry, return_url=RETURN_URL)

        self.assertIsNone(result.error)
        self.assertEqual(result.payment_intent_status, "succeeded")
        self.assertIsNone(result.redirect_url)
        mock_confirm.assert_called_once_with(
            "pi_123",
            return_url=RETURN_URL,
            payment_method="pm_card_visa",
        )

    @patch("stripe.PaymentIntent.confirm")
    async def test_confirm_without_payment_method(self, mock_confirm):
        mock_confirm.return_value = MagicMock(status="processing", next_action=None)
        entry = PaymentEntry(client_secret="pi_9_secret_z")

        result = await self.provider.confirm_payment(entry, return_url=RETURN_URL)

        self.assertEqual(result.payment_intent_status, "processing")
        mock_confirm.assert_called_once_with("pi_9", return_url=RETURN_URL)

    @patch("stripe.PaymentIntent.confirm")
    async def test_requires_action_exposes_redirect(self, mock_confirm):
        next_action = MagicMock(type="redirect_to_url")
        next_action.redirect_to_url.url = "https://hooks.stripe.test/3ds"
        mock_confirm.return_value = MagicMock(status="requires_action", next_action=next_action)

        result = await self.provider.confirm_payment(self.entry, return_url=RETURN_URL)

        self.assertEqual(result.payment_intent_status, "requires_action")
        self.assertEqual(result.redirect_url, "https://hooks.stripe.test/3ds")

    @patch("stripe.PaymentIntent.confirm")
    async def test_redirect_always_falls_back_to_return_url(self, mock_confirm):
        mock_confirm.return_value = MagicMock(status="succeeded", next_action=None)

        result = await self.provider.confirm_payment(self.entry, return_url=RETURN_URL, redirect="always")

        self.assertEqual(result.redirect_url, RETURN_URL)

    @patch("stripe.PaymentIntent.confirm")
    async def test_card_decline_is_reported_not_raised(self, mock_confirm):
        mock_confirm.side_effect = stripe.CardError("Your card was declined.", None, "card_declined")

        result = await self.provider.confirm_payment(self.entry, return_url=RETURN_URL)

        self.assertEqual(result.error.message, "Your card was declined.")
        self.assertEqual(result.error.code, "card_declined")
        self.assertEqual(result.error.type, "card_error")
        self.assertIsNone(result.payment_intent_status)

    @patch("stripe.PaymentIntent.confirm")
    async def test_invalid_request_is_reported(self, mock_confirm):
        mock_confirm.side_effect = stripe.InvalidRequestError(
            "This PaymentIntent's payment_method could not be updated.", "payment_method"
        )

        result = await self.provider.confirm_payment(self.entry, return_url=RETURN_URL)

        self.assertEqual(result.error.type, "invalid_request_error")

    @patch("stripe.PaymentIntent.confirm")
    async def test_connection_error_propagates(self, mock_confirm):
        mock_confirm.side_effect = stripe.APIConnectionError("Network unreachable")

        with self.assertRaises(stripe.APIConnectionError):
            await self.provider.confirm_payment(self.entry, return_url=RETURN_URL)

    @patch("stripe.PaymentIntent.confirm")
    async def test_open_circuit_propagates(self, mock_confirm):
        stripe_breaker.open()

        with self.assertRaises(CircuitBreakerError):
            await self.provider.confirm_payment(self.entry, return_url=RETURN_URL)

        mock_confirm.assert_not_called()


if __name__ == "__main__":
    unittest.main()
