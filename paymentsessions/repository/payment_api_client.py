from typing import Dict
from typing import Optional
from typing import Type
from typing import TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError

import settings
from paymentsessions import api_logger
from paymentsessions.domain.errors import ApiResponseError
from paymentsessions.domain.errors import ResponseDecodingError
from paymentsessions.repository import form_encoding
from paymentsessions.utils.timer import async_timer

logger = api_logger.get()

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class PaymentApiClient:
    """
    Sends form-encoded requests to the payment API and decodes JSON responses.
    Holds no per-request state, one instance can be shared by concurrent callers.
    `timeout` applies to every request, including those sent through an injected client.
    """

    def __init__(
        self,
        api_key: Optional[str],
        api_base_url: str = "https://api.stripe.com/v1/",
        api_version: Optional[str] = None,
        account: Optional[str] = None,
        timeout: float = 30,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.api_base_url = api_base_url
        self.api_version = api_version
        self.account = account
        self.timeout = timeout
        self._http_client = http_client

    @classmethod
    def from_settings(cls) -> "PaymentApiClient":
        return cls(
            api_key=settings.STRIPE_SECRET_KEY,
            api_base_url=settings.STRIPE_API_BASE_URL,
            api_version=settings.STRIPE_API_VERSION,
            account=settings.STRIPE_ACCOUNT,
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
        )

    @async_timer("payment_api_client.post_form", logger=logger)
    async def post_form(
        self,
        path: str,
        params: BaseModel,
        response_model: Type[ResponseModel],
    ) -> ResponseModel:
        body = form_encoding.to_form_body(params)
        logger.debug(f"POST {path}")
        if self._http_client is not None:
            response = await self._send(self._http_client, path, body)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await self._send(client, path, body)
        logger.debug(f"POST {path} returned {response.status_code}")

        if not response.is_success:
            error = _to_api_error(response)
            logger.warning(f"Payment API error on {path}: {error.to_message()}")
            raise error
        return _decode(path, response, response_model)

    async def _send(
        self, client: httpx.AsyncClient, path: str, body: str
    ) -> httpx.Response:
        return await client.post(
            _join_url(self.api_base_url, path),
            content=body,
            headers=self._get_headers(),
            timeout=self.timeout,
        )

    def _get_headers(self) -> Dict[str, str]:
        headers = {"Content-Type": FORM_CONTENT_TYPE}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if self.api_version:
            headers["Stripe-Version"] = self.api_version
        if self.account:
            headers["Stripe-Account"] = self.account
        return headers


def _join_url(api_base_url: str, path: str) -> str:
    # urljoin would drop the version segment of the base url for absolute paths
    return api_base_url.rstrip("/") + "/" + path.lstrip("/")


def _decode(
    path: str, response: httpx.Response, response_model: Type[ResponseModel]
) -> ResponseModel:
    try:
        payload = response.json()
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError for non UTF-8 bodies
        raise ResponseDecodingError(path, f"invalid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise ResponseDecodingError(
            path, f"expected a JSON object, got {type(payload).__name__}"
        )
    try:
        return response_model.model_validate(payload)
    except ValidationError as e:
        raise ResponseDecodingError(path, str(e)) from e


def _to_api_error(response: httpx.Response) -> ApiResponseError:
    try:
        payload = response.json()
    except ValueError:
        return ApiResponseError(response.status_code, message=response.text or None)
    error = payload.get("error") if isinstance(payload, dict) else None
    if not isinstance(error, dict):
        return ApiResponseError(response.status_code)
    return ApiResponseError(
        response.status_code,
        message=error.get("message"),
        error_type=error.get("type"),
        code=error.get("code"),
        param=error.get("param"),
    )
