"""Kraken error envelope model."""

from pydantic import BaseModel, ConfigDict, ValidationError


class ErrorEnvelope(BaseModel):
    """Error body Twitch returns in place of a normal payload.

    Wire format: ``{"error": "Not Found", "status": 404, "message": "..."}``
    """

    model_config = ConfigDict(extra="allow")

    error: str
    status: int
    message: str

    @classmethod
    def from_body(cls, body: str) -> "ErrorEnvelope | None":
        """Parse an error envelope from a raw response body.

        Args:
            body: Raw response text

        Returns:
            ErrorEnvelope or None if the body is not an error envelope
        """
        try:
            return cls.model_validate_json(body)
        except ValidationError:
            return None

    def to_exception_message(self) -> str:
        """Convert the envelope to an exception message."""
        return f"TwitchError: (Status: {self.status}, Error: {self.error}, Message: {self.message})"
