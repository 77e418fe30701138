"""Typed error hierarchy with explicit failure states.

This module provides a consistent Result/Error pattern for the board:
- All domain errors extend BoardError and carry structured context
- Persistence operations return Ok/Err instead of swallowing failures
- Errors can be caught at the CLI boundary and formatted cleanly
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

T = TypeVar("T")


# -----------------------------------------------------------------------------
# Result Type
# -----------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result containing a value.

    Invariants:
        - value is never None (use Optional[T] inside if needed)
    """
    value: T


@dataclass(frozen=True, slots=True)
class Err:
    """Failed result containing an error.

    Invariants:
        - error is always a BoardError subclass
    """
    error: "BoardError"


Result = Union[Ok[T], Err]
"""Discriminated union for operation results. Check with isinstance(result, Ok)."""


def is_ok(result: Result[T]) -> bool:
    """Type guard for successful results."""
    return isinstance(result, Ok)


def is_err(result: Result[T]) -> bool:
    """Type guard for error results."""
    return isinstance(result, Err)


def unwrap(result: Result[T]) -> T:
    """Extract value from Ok, or raise the error from Err.

    Raises:
        BoardError: If result is Err
    """
    if isinstance(result, Ok):
        return result.value
    raise result.error


# -----------------------------------------------------------------------------
# Error Hierarchy
# -----------------------------------------------------------------------------

class BoardError(RuntimeError):
    """Base error for all board operations.

    Subclasses provide structured context; the message is built once in
    __init__. Never raise a raw BoardError; always use a specific subclass.
    """
    pass


class NotFoundError(BoardError, KeyError):
    """Image or category is not available in the current context.

    This is the expected outcome of a misclick, so callers usually recover
    from it by ignoring the selection.

    Attributes:
        entity_type: "Image" or "Category"
        key: The key that was looked up
    """
    def __init__(self, entity_type: str, key: str) -> None:
        self.entity_type = entity_type
        self.key = key
        super().__init__(f"{entity_type} '{key}' not found in current context")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class BoardFormatError(BoardError):
    """Board text could not be parsed.

    Attributes:
        source: Where the text came from (file path or "<string>")
        line_number: 1-based line of the problem
        detail: Explanation of the problem
    """
    def __init__(self, source: str, line_number: int, detail: str) -> None:
        self.source = source
        self.line_number = line_number
        self.detail = detail
        super().__init__(f"{source}:{line_number}: {detail}")


class BoardIOError(BoardError):
    """Board file could not be read or written.

    Attributes:
        path: The file involved
        detail: Underlying OS error message
    """
    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Cannot access board file {path}: {detail}")


class ValidationError(BoardError):
    """Board failed consistency validation.

    Attributes:
        issues: List of validation error messages
    """
    def __init__(self, issues: list[str]) -> None:
        self.issues = issues
        joined = "\n".join(f" - {issue}" for issue in issues[:30])
        extra = "" if len(issues) <= 30 else f"\n - ... and {len(issues) - 30} more"
        super().__init__(f"Validation failed:\n{joined}{extra}")


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Single validation issue with structured location.

    Attributes:
        path: Location of the problem (e.g., "home[img/food/plate.png]")
        message: Human-readable description of the problem
        severity: "error" for blocking issues, "warning" for advisories
    """
    path: str
    message: str
    severity: str = "error"

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class ValidationResult:
    """Aggregated validation result.

    Invariants:
        - is_valid is True iff no issue has severity "error"
    """
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True if no errors (warnings don't count)."""
        return all(issue.severity != "error" for issue in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity != "error"]

    def add(self, path: str, message: str, *, severity: str = "error") -> None:
        """Record a validation issue."""
        self.issues.append(ValidationIssue(path=path, message=message, severity=severity))

    def merge(self, other: "ValidationResult") -> None:
        """Combine issues from another result."""
        self.issues.extend(other.issues)

    def to_error(self) -> ValidationError:
        """Convert to a ValidationError for raising."""
        return ValidationError([str(issue) for issue in self.errors])

    def __bool__(self) -> bool:
        """True if valid (no blocking errors)."""
        return self.is_valid
