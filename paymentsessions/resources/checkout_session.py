from paymentsessions.domain.checkout_session.entities import CheckoutSession
from paymentsessions.domain.checkout_session.entities import (
    CreateCheckoutSessionParams,
)
from paymentsessions.repository.payment_api_client import PaymentApiClient

PATH = "/checkout/sessions"


async def create(
    client: PaymentApiClient, params: CreateCheckoutSessionParams
) -> CheckoutSession:
    """
    Creates a Checkout Session.

    Errors raised by the client are not handled here.
    For details see https://stripe.com/docs/api/checkout/sessions/create
    """
    return await client.post_form(PATH, params, CheckoutSession)
