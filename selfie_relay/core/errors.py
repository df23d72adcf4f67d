"""Failure taxonomy for the selfie flow.

Every stage raises one of these and never retries. Adapters (CLI/HTTP) are the
only layer that converts them into user-visible output.

Hierarchy:
    SelfieRelayError (RuntimeError)
      - ConfigurationError: missing credential, checked before any I/O.
      - TransportError: network or HTTP-layer failure on an outbound call.
      - UpstreamError: image service reported failure in its own envelope.
      - EmptyResultError: success envelope without a usable image URL.
      - DispatchError: the delivery transport failed.
"""


class SelfieRelayError(RuntimeError):
    """Base class for all terminal flow failures."""


class ConfigurationError(SelfieRelayError):
    pass


class TransportError(SelfieRelayError):
    """Outbound call failed below the application protocol.

    Attributes:
        status_code: HTTP status when a response was received, else `None`.
        body: Raw response text when available.
    """

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UpstreamError(SelfieRelayError):
    """Image service answered with a non-zero `base_resp.status_code`."""

    def __init__(self, message: str, status_code: int | None = None, status_msg: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.status_msg = status_msg


class EmptyResultError(SelfieRelayError):
    pass


class DispatchError(SelfieRelayError):
    """Delivery transport rejected or failed to send the message.

    Attributes:
        body: Gateway response body or CLI stderr output.
        returncode: CLI exit status (CLI transport only).
    """

    def __init__(self, message: str, body: str | None = None, returncode: int | None = None):
        super().__init__(message)
        self.body = body
        self.returncode = returncode
