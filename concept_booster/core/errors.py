"""Error taxonomy shared by the gateway, the contract pipeline and the HTTP layer."""

from __future__ import annotations


class TutorError(Exception):
    status_code: int = 500
    default_message: str = "Unknown error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class RateLimited(TutorError):
    status_code = 429
    default_message = "Rate limit exceeded. Please try again in a moment."


class QuotaExhausted(TutorError):
    status_code = 402
    default_message = "AI credits exhausted. Please try later."


class GatewayError(TutorError):
    status_code = 500
    default_message = "AI gateway error"


class MalformedResponse(TutorError):
    status_code = 500
    default_message = "Failed to parse AI response"


class ConfigurationError(TutorError):
    status_code = 500
    default_message = "AI_GATEWAY_API_KEY is not configured"


class InvalidRequest(TutorError):
    status_code = 422
    default_message = "Invalid request"


class TooManyRequests(TutorError):
    """Inbound throttling by this service, distinct from upstream `RateLimited`."""

    status_code = 429
    default_message = "Too many requests from this device. Please slow down."
