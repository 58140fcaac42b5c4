"""Error types raised by maintenance workflows."""


class PreconditionError(RuntimeError):
    """A required record or input is missing; no work was attempted."""


class AssetProbeError(RuntimeError):
    """The local uploads directory could not be inspected."""


class ApiResponseError(RuntimeError):
    """The storefront API answered with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API returned {status_code}: {body}")
        self.status_code = status_code
        self.body = body
