"""Error taxonomy for the route-to-OpenAPI pipeline.

Discovery failures abort the run. Every other condition is scoped to a
single route: it is reported and the route is left out of the document.
"""


class RouteDocError(Exception):
    """Base class for all pipeline errors."""

    kind = "error"


class DiscoveryFailure(RouteDocError):
    """The route walk could not start (missing or invalid root)."""

    kind = "discovery-failure"


class GenerationError(RouteDocError):
    """The generation service call failed."""

    kind = "generation-error"


class TransportTimeout(GenerationError):
    kind = "transport-timeout"


class ServiceError(GenerationError):
    """The generation service answered with a non-success status."""

    kind = "service-error"

    def __init__(self, status_code: int | None, message: str = ""):
        self.status_code = status_code
        super().__init__(message or f"generation service returned status {status_code}")


class ProtocolError(GenerationError):
    """The response body is not a valid reply envelope."""

    kind = "protocol-error"


class MalformedReply(RouteDocError):
    """No route documentation could be recovered from the model reply."""

    kind = "malformed-reply"

    def __init__(self, text: str, reason: str = ""):
        self.text = text
        self.reason = reason
        super().__init__(reason or "reply is not valid route documentation JSON")
