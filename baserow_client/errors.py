"""Baserow client errors."""


class RemoteStoreError(Exception):
    """A call to the Baserow API did not succeed.

    ``status_code`` is the HTTP status of the failed response, or ``None`` when
    no response arrived (connection failure, timeout).
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    @property
    def retryable(self) -> bool:
        """Transport failures and 5xx responses are worth another attempt."""
        return self.status_code is None or self.status_code >= 500
