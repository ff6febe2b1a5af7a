from datetime import datetime
from typing import Any, Mapping


class ErrorResponse:
    """Envelope returned for every failed request."""

    def __init__(
        self,
        status: int,
        error: str,
        message: str,
        path: str,
        timestamp: datetime | None = None,
    ) -> None:
        self.timestamp = timestamp or datetime.now()
        self.status = status
        self.error = error
        self.message = message
        self.path = path

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ErrorResponse":
        """Build an instance from a raw mapping."""

        if not isinstance(payload, Mapping):
            raise TypeError("Error payload must be a mapping")

        missing = [key for key in ("status", "error", "message", "path") if key not in payload]
        if missing:
            raise ValueError(f"Error payload is missing required keys: {missing}")

        timestamp_raw = payload.get("timestamp")
        timestamp = datetime.fromisoformat(timestamp_raw) if timestamp_raw else None

        return cls(
            status=int(payload["status"]),
            error=str(payload["error"]),
            message=str(payload["message"]),
            path=str(payload["path"]),
            timestamp=timestamp,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "status": self.status,
            "error": self.error,
            "message": self.message,
            "path": self.path,
        }
