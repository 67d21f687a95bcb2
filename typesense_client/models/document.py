"""
Deferred document decoding.

Document shapes are defined by the caller, so the client keeps the raw body
bytes and decodes only when the caller names a target type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from typesense_client.core.exceptions import DecodeError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DocumentResponse:
    """Raw result of a document operation.

    Attributes:
        data: Response body, untouched
        error: Error classified from the response, if any
        status_code: HTTP status of the response, None on transport failure

    When ``error`` is set, ``data`` must not be interpreted.
    """

    data: bytes = b""
    error: Exception | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def decode(self, target: type[T] | Any = dict) -> T:
        """Decode the document into ``target``.

        ``target`` can be anything pydantic can validate: dict, a dataclass,
        a TypedDict or a BaseModel subclass.

        Args:
            target: Type to decode the document into

        Returns:
            The decoded document

        Raises:
            The stored error, if the operation failed
            DecodeError: If the body does not match ``target``
        """
        if self.error is not None:
            raise self.error
        try:
            return TypeAdapter(target).validate_json(self.data)
        except ValidationError as e:
            raise DecodeError(
                f"could not decode document into {getattr(target, '__name__', target)}: {e}",
                status_code=self.status_code,
            ) from e
