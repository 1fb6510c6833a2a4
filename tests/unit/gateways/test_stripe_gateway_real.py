import unittest
from unittest.mock import MagicMock, patch

import stripe

from droppit.domain.errors import PaymentIntentCreationError, PaymentProviderUnavailableError
from droppit.infrastructure.circuit_breaker import stripe_breaker
from droppit.infrastructure.gateways.stripe_gateway_real import StripeGatewayReal


class TestStripeGatewayReal(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        stripe_breaker.close()
        self.gateway = StripeGatewayReal(api_key="sk_test_123")

    def tearDown(self):
        stripe_breaker.close()

    @patch("stripe.PaymentIntent.create")
    async def test_create_success(self, mock_create):
        mock_create.return_value = MagicMock(
            id="pi_123",
            client_secret="pi_123_secret_abc",
            status="requires_payment_method",
        )

        result = await self.gateway.create_payment_intent(1999, "usd", "ord_1")

        self.assertEqual(result.client_secret, "pi_123_secret_abc")
        self.assertEqual(result.payment_intent_id, "pi_123")
        self.assertEqual(result.status, "requires_payment_method")
        mock_create.assert_called_once_with(
            amount=1999,
            currency="usd",
            automatic_payment_methods={"enabled": True},
            metadata={"orderId": "ord_1"},
        )

    @patch("stripe.PaymentIntent.create")
    async def test_empty_order_id_is_sent_as_empty_string(self, mock_create):
        mock_create.return_value = MagicMock(id="pi_1", client_secret="pi_1_secret_x", status="x")

        await self.gateway.create_payment_intent(500, "usd", None)

        self.assertEqual(mock_create.call_args.kwargs["metadata"], {"orderId": ""})

    @patch("stripe.PaymentIntent.create")
    async def test_stripe_error_is_wrapped(self, mock_create):
        mock_create.side_effect = stripe.InvalidRequestError("Amount must be at least 50 cents", "amount")

        with self.assertRaises(PaymentIntentCreationError) as ctx:
            await self.gateway.create_payment_intent(10, "usd", "ord_1")

        self.assertEqual(ctx.exception.order_id, "ord_1")
        self.assertEqual(ctx.exception.reason, "Amount must be at least 50 cents")

    @patch("stripe.PaymentIntent.create")
    async def test_open_circuit_fails_fast(self, mock_create):
        stripe_breaker.open()

        with self.assertRaises(PaymentProviderUnavailableError):
            await self.gateway.create_payment_intent(1999, "usd", "ord_1")

        mock_create.assert_not_called()

    @patch("stripe.PaymentIntent.create")
    async def test_repeated_outages_open_circuit(self, mock_create):
        mock_create.side_effect = stripe.APIConnectionError("Network unreachable")

        for _ in range(stripe_breaker.fail_max - 1):
            with self.assertRaises(PaymentIntentCreationError):
                await self.gateway.create_payment_intent(1999, "usd", "ord_1")

        # the call that trips the breaker surfaces as unavailable
        with self.assertRaises(PaymentProviderUnavailableError):
            await self.gateway.create_payment_intent(1999, "usd", "ord_1")
        self.assertEqual(stripe_breaker.current_state, "open")


if __name__ == "__main__":
    unittest.main()
