"""Generic API response envelope model.

Every payload the backend hands to a caller is wrapped in this envelope:
{ status: bool, message: str | None, additionalPayload: T | None }

The envelope is a plain container. Nothing is validated beyond the presence of
``status``; fields can be reassigned freely after construction and the payload
is stored by reference, so a mutable payload stays shared with whoever passed it.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Response(BaseModel, Generic[T]):
    """JSON envelope for all API responses."""

    model_config = ConfigDict(populate_by_name=True)

    status: bool
    message: str | None = None
    additional_payload: T | None = Field(default=None, alias="additionalPayload")

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, status: bool, message: str | None, payload: Any = None) -> Response[T]:
        """Build an envelope from the three values given positionally."""
        return cls(status=status, message=message, additional_payload=payload)

    @classmethod
    def ok(cls, message: str | None = None, payload: Any = None) -> Response[T]:
        """Build a success envelope (``status=True``)."""
        return cls(status=True, message=message, additional_payload=payload)

    @classmethod
    def fail(cls, message: str | None = None, payload: Any = None) -> Response[T]:
        """Build a failure envelope (``status=False``)."""
        return cls(status=False, message=message, additional_payload=payload)

    # ------------------------------------------------------------------
    # Copy-with-modification
    # ------------------------------------------------------------------

    def with_status(self, status: bool) -> Response[T]:
        return self.model_copy(update={"status": status})

    def with_message(self, message: str | None) -> Response[T]:
        return self.model_copy(update={"message": message})

    def with_payload(self, payload: Any) -> Response[T]:
        """Return a copy carrying ``payload``; the payload itself is not copied."""
        return self.model_copy(update={"additional_payload": payload})

    # ------------------------------------------------------------------
    # Wire form
    # ------------------------------------------------------------------

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON-compatible dict sent over HTTP.

        Payload values JSON cannot represent are rendered with ``str()``.
        """
        return self.model_dump(mode="json", by_alias=True, fallback=str)

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> Response[T]:
        return cls.model_validate(data)
