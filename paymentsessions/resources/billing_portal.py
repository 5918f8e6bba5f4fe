from paymentsessions.domain.billing_portal.entities import BillingPortal
from paymentsessions.domain.billing_portal.entities import CreateBillingPortalParams
from paymentsessions.repository.payment_api_client import PaymentApiClient

PATH = "/billing_portal/sessions"


async def create(
    client: PaymentApiClient, params: CreateBillingPortalParams
) -> BillingPortal:
    return await client.post_form(PATH, params, BillingPortal)
