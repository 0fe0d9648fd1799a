"""
Adapter for reporting zspace errors through a validation issue collector.

The value types never import this module; they raise :class:`ZSpaceError`
subclasses whose ``as_dict`` form is converted here.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from .errors import ZSpaceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationIssue:
    type: str
    summary: str
    message: str | None = None
    context: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @classmethod
    def from_error(cls, error: ZSpaceError, **context: Any) -> "ValidationIssue":
        data = error.as_dict()
        return cls(
            type=data["kind"],
            summary=data["message"],
            context={"operands": data["operands"], **context},
        )

    def to_display_string(self) -> str:
        lines = [f"* Error [{self.type}]: {self.summary}"]
        if self.message:
            lines.append("")
            lines.extend(f"  {line}" for line in self.message.splitlines())
        for name, value in self.context.items():
            lines.append(f"  - {name}: {value}")
        return "\n".join(lines)


def issues_to_display_string(issues: list[ValidationIssue] | None) -> str:
    if not issues:
        return "No Validation Issues"
    return (
        f"Validation failed with {len(issues)} issues:\n\n"
        + "\n\n".join(issue.to_display_string() for issue in issues)
        + "\n"
    )


class ValidationError(Exception):
    def __init__(self, issues: list[ValidationIssue]):
        super().__init__(issues_to_display_string(issues))
        self.issues = issues


class ValidationIssueCollector:
    """
    Accumulates issues so that several independent checks can be reported
    together.
    """

    def __init__(self):
        self.issues: list[ValidationIssue] = []

    def add_issue(self, issue: ValidationIssue) -> None:
        self.issues.append(issue)

    @property
    def is_empty(self) -> bool:
        return not self.issues

    @contextmanager
    def capture(self, **context: Any) -> Iterator["ValidationIssueCollector"]:
        """
        Record a :class:`ZSpaceError` raised in the block as an issue instead of
        propagating it. Other exceptions propagate unchanged.
        """
        try:
            yield self
        except ZSpaceError as e:
            logger.debug("captured %s: %s", e.kind, e.message)
            self.add_issue(ValidationIssue.from_error(e, **context))

    def check(self) -> None:
        """
        Raises:
            ValidationError: If any issues were collected.
        """
        if self.issues:
            raise ValidationError(list(self.issues))
