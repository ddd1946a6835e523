"""Monitor tag pattern value object."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TagPattern:
    """
    Pattern selecting which application registrations are monitored.

    The pattern is treated as a regular expression and matches a tag when it
    is found anywhere in it. A pattern that does not compile falls back to
    exact string comparison instead of failing the run.
    """

    pattern: str
    _regex: re.Pattern[str] | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compile the pattern, degrading to exact match on syntax errors."""
        try:
            regex: re.Pattern[str] | None = re.compile(self.pattern)
        except re.error as e:
            logger.warning(
                "Monitor tag %r is not a valid regular expression (%s); using exact match",
                self.pattern,
                e,
            )
            regex = None
        object.__setattr__(self, "_regex", regex)

    @property
    def is_regex(self) -> bool:
        """Check if the pattern compiled as a regular expression."""
        return self._regex is not None

    def matches(self, tags: Iterable[str]) -> bool:
        """Return True if any of the given tags matches the pattern."""
        if self._regex is None:
            return any(tag == self.pattern for tag in tags)
        return any(self._regex.search(tag) for tag in tags)

    def __str__(self) -> str:
        return self.pattern
