"""Errors raised while talking to the BART API.

Every error carries enough context (URL, operation, field, raw text) to tell
which request failed and which part of the upstream document drifted.
"""


class BartApiError(Exception):
    """Base class for all BART API client errors."""


class TransportError(BartApiError):
    """The request could not be sent."""

    def __init__(self, url: str, cause: BaseException) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f'requesting "{url}": {cause}')


class HTTPStatusError(BartApiError):
    """The API answered with a status code other than 200."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f'received non-200 status code ({status_code}) requesting "{url}"')


class DecodeError(BartApiError):
    """The response body is not the XML document the operation expects."""

    def __init__(self, operation: str, cause: BaseException | str) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"decoding '{operation}' response: {cause}")


class ParseError(BartApiError):
    """A field's raw text does not match its expected format."""

    def __init__(
        self, field: str, raw: str, operation: str, cause: BaseException | str
    ) -> None:
        self.field = field
        self.raw = raw
        self.operation = operation
        self.cause = cause
        super().__init__(f"'{operation}': parsing <{field}> value {raw!r}: {cause}")


class ValidationError(BartApiError):
    """A field's value is well formed but outside its allowed set."""

    def __init__(self, value: str, operation: str, allowed: tuple[str, ...] = ()) -> None:
        self.value = value
        self.operation = operation
        self.allowed = allowed
        expected = f" (must be one of {', '.join(allowed)})" if allowed else ""
        super().__init__(f"'{operation}': {value!r} is not a valid value{expected}")
