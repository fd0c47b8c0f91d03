"""Client exception hierarchy.

Every public operation either returns its result or raises exactly one
subclass of ``OramaCoreError``.
"""


class OramaCoreError(Exception):
    """Base client exception."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(OramaCoreError):
    """Caller input rejected before any request was sent."""

    def __init__(self, message: str = "Validation error"):
        super().__init__(message)


class ConfigError(OramaCoreError):
    """An instance precondition is not met."""


class CollectionNotSetError(ConfigError):
    """No collection is bound and none was passed to the call."""

    def __init__(
        self,
        message: str = "No collection specified. Make sure to call set_collection() first.",
    ):
        super().__init__(message)


class MissingWriteKeyError(ConfigError):
    """A write operation was attempted without a write API key."""

    def __init__(self, operation: str = "write"):
        self.operation = operation
        super().__init__(
            f"Cannot perform write operation ({operation}) as there is no write_api_key set."
        )


class HttpError(OramaCoreError):
    """The service answered with a non-success status."""

    def __init__(self, status_code: int, body: str, url: str | None = None):
        self.status_code = status_code
        self.body = body
        self.url = url
        target = f' to "{url}"' if url else ""
        super().__init__(f"Request{target} failed with status {status_code}: {body}")


class NotFoundError(HttpError):
    """The service reported the resource as missing (404)."""


class TransportError(OramaCoreError):
    """The request could not be sent or no response was received."""


class SerializationError(OramaCoreError):
    """A request body could not be encoded or a response could not be decoded."""
