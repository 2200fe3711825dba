"""Result and error values for tag validation."""

from dataclasses import dataclass
from enum import Enum


class TagErrorKind(str, Enum):
    """Why a tag list was rejected."""

    TOO_MANY_TAGS = "TOO_MANY_TAGS"
    TOO_SHORT = "TOO_SHORT"
    ESCAPE_FAILED = "ESCAPE_FAILED"

    @property
    def reason(self) -> str:
        return _REASONS[self]


_REASONS = {
    TagErrorKind.TOO_MANY_TAGS: "tags field: too many tags",
    TagErrorKind.TOO_SHORT: "too short",
    TagErrorKind.ESCAPE_FAILED: "escape failed",
}


@dataclass(frozen=True)
class TagError:
    """A rejected tag list.

    Attributes:
        kind: Failure classification
        index: 0-based position of the offending entry, None for list-level failures
    """

    kind: TagErrorKind
    index: int | None = None

    @property
    def message(self) -> str:
        if self.index is None:
            return self.kind.reason
        return f"custom tag n{self.index}: {self.kind.reason}"

    def __str__(self) -> str:
        return self.message


class TagSyntaxError(ValueError):
    """Raised when a single custom tag cannot be escaped."""

    def __init__(self, kind: TagErrorKind):
        super().__init__(kind.reason)
        self.kind = kind


class TagValidationError(ValueError):
    """Raised by TagsResult.unwrap() for a failed validation."""

    def __init__(self, error: TagError):
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class TagsResult:
    """Outcome of validating a tag list: either tags or an error, never both."""

    tags: tuple[str, ...] | None = None
    error: TagError | None = None

    @classmethod
    def success(cls, tags) -> "TagsResult":
        return cls(tags=tuple(tags))

    @classmethod
    def failure(cls, error: TagError) -> "TagsResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[str]:
        """Return a fresh list of the validated tags.

        Raises:
            TagValidationError: If validation failed.
        """
        if self.error is not None:
            raise TagValidationError(self.error)
        return list(self.tags)
