"""Field lookup outcome entities."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class LookupStatus(str, Enum):
    """How a field lookup against an index ended."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"
    BOUNDARY_FAILURE = "boundary_failure"


@dataclass(frozen=True)
class FieldLookup:
    """Logical field names of one index, or the reason they are unavailable."""

    index: str
    status: LookupStatus
    field_names: tuple[str, ...]
    error_message: str | None

    @property
    def available(self) -> bool:
        return self.status == LookupStatus.FOUND

    def contains(self, field: str) -> bool:
        return self.available and field in self.field_names

    def contains_all(self, fields: Iterable[str]) -> bool:
        if not self.available:
            return False
        return all(field in self.field_names for field in fields)

    @staticmethod
    def found(index: str, field_names: Iterable[str]) -> FieldLookup:
        return FieldLookup(
            index=index,
            status=LookupStatus.FOUND,
            field_names=tuple(field_names),
            error_message=None,
        )

    @staticmethod
    def not_found(index: str) -> FieldLookup:
        return FieldLookup(
            index=index,
            status=LookupStatus.NOT_FOUND,
            field_names=(),
            error_message=f"Index not found: {index}",
        )

    @staticmethod
    def malformed(index: str, error: Exception) -> FieldLookup:
        return FieldLookup(
            index=index,
            status=LookupStatus.MALFORMED,
            field_names=(),
            error_message=f"Unexpected mapping shape for {index}: {error!r}",
        )

    @staticmethod
    def boundary_failure(index: str, error: Exception) -> FieldLookup:
        return FieldLookup(
            index=index,
            status=LookupStatus.BOUNDARY_FAILURE,
            field_names=(),
            error_message=str(error),
        )
