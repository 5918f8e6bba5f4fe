from typing import Optional


class PaymentApiError(Exception):
    """Base class for other exceptions"""


class SerializationError(PaymentApiError):
    """
    Raised when a request value has no form representation.
    Only reachable through a model declaring an unsupported field type.
    """

    def __init__(self, key: str, value: object):
        self.key = key
        self.value = value
        super().__init__(
            f"Cannot serialize {type(value).__name__} value for key '{key}'"
        )


class ApiResponseError(PaymentApiError):
    """
    Non-success HTTP status from the payment API.
    Fields come from the `{"error": {...}}` envelope when present.
    """

    def __init__(
        self,
        status_code: int,
        message: Optional[str] = None,
        error_type: Optional[str] = None,
        code: Optional[str] = None,
        param: Optional[str] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.error_type = error_type
        self.code = code
        self.param = param
        super().__init__(self.to_message())

    def to_message(self) -> str:
        result = f"Payment API error ({self.status_code})"
        if self.error_type:
            result += f" {self.error_type}"
        if self.message:
            result += f" - {self.message}"
        return result


class ResponseDecodingError(PaymentApiError):
    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Failed to decode response from {path}: {message}")
