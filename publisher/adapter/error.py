"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class RemoteAPIError(ProviderError):
    """Non-success HTTP response from the Halo backend.

    Never retried; surfaces immediately to the caller.
    """

    def __init__(
        self,
        status_code: int,
        reason: str,
        method: str = "GET",
        url: str = "",
    ):
        self.status_code = status_code
        self.reason = reason
        self.method = method
        self.url = url
        super().__init__(f"API request failed: {status_code} {reason}")


class HaloConnectionError(ProviderError):
    """The Halo backend could not be reached."""

    pass


class HaloResponseError(ProviderError):
    """The Halo backend answered successfully but the body was not valid JSON."""

    pass
