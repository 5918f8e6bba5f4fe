from unittest.mock import AsyncMock

import httpx
import pytest

from paymentsessions.domain.billing_portal.entities import BillingPortal
from paymentsessions.domain.billing_portal.entities import CreateBillingPortalParams
from paymentsessions.domain.errors import ApiResponseError
from paymentsessions.repository.payment_api_client import PaymentApiClient
from paymentsessions.resources import billing_portal


async def test_success():
    client = AsyncMock(spec=PaymentApiClient)
    client.post_form.return_value = BillingPortal(url="https://billing/session")
    params = CreateBillingPortalParams(customer="cus_123")

    response = await billing_portal.create(client, params)

    assert response.url == "https://billing/session"
    client.post_form.assert_called_once_with(
        "/billing_portal/sessions", params, BillingPortal
    )


async def test_without_customer_still_posts():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"url": "https://billing/session"})

    client = PaymentApiClient(
        api_key="sk_test_123",
        api_base_url="https://api.example.com/v1/",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    response = await billing_portal.create(client, CreateBillingPortalParams())

    assert response == BillingPortal(url="https://billing/session")
    assert len(requests) == 1
    assert requests[0].url.path == "/v1/billing_portal/sessions"
    assert requests[0].content == b""


async def test_api_error_is_not_handled():
    client = AsyncMock(spec=PaymentApiClient)
    error = ApiResponseError(404, message="No such customer: 'cus_123'")
    client.post_form.side_effect = error

    with pytest.raises(ApiResponseError) as e:
        await billing_portal.create(client, CreateBillingPortalParams(customer="cus_123"))
    assert e.value is error
