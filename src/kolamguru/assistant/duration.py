"""Duration extraction from free-form utterances.

Hides the phrase rules used to detect how much time the user has.
Rules are tried in order and the first match decides the result.
"""

import re
from dataclasses import dataclass

from .config import (
    AMPLE_SESSION_MINUTES,
    BRIEF_SESSION_MINUTES,
    HALF_HOUR_MINUTES,
    QUARTER_HOUR_MINUTES,
    WHOLE_DAY_MINUTES,
)


@dataclass(frozen=True)
class DurationRule:
    """One phrase rule mapping a match to a number of minutes.

    A rule either multiplies the captured number (``multiplier``)
    or yields a fixed ``value``.
    """

    name: str
    pattern: re.Pattern[str]
    multiplier: int | None = None
    value: int | None = None

    def evaluate(self, text: str) -> int | None:
        """Return minutes if the rule matches, otherwise None."""
        match = self.pattern.search(text)
        if match is None:
            return None
        if self.value is not None:
            return self.value
        return int(match.group(1)) * (self.multiplier or 1)


DURATION_RULES: tuple[DurationRule, ...] = (
    DurationRule("minutes", re.compile(r"(\d+)\s*minutes?", re.IGNORECASE), multiplier=1),
    DurationRule("hours", re.compile(r"(\d+)\s*hours?", re.IGNORECASE), multiplier=60),
    DurationRule("half_hour", re.compile(r"half\s*hour|30\s*min", re.IGNORECASE), value=HALF_HOUR_MINUTES),
    DurationRule("quarter_hour", re.compile(r"quarter\s*hour|15\s*min", re.IGNORECASE), value=QUARTER_HOUR_MINUTES),
    DurationRule("whole_day", re.compile(r"whole\s*day|all\s*day|entire\s*day", re.IGNORECASE), value=WHOLE_DAY_MINUTES),
    DurationRule("brief", re.compile(r"quick|fast|short", re.IGNORECASE), value=BRIEF_SESSION_MINUTES),
    DurationRule("ample", re.compile(r"long|extended|plenty\s*time", re.IGNORECASE), value=AMPLE_SESSION_MINUTES),
)


def extract_duration(
    text: str,
    rules: tuple[DurationRule, ...] = DURATION_RULES
) -> int | None:
    """Extract the available time, in minutes, from an utterance.

    Args:
        text: Raw user text
        rules: Ordered rules to try (first match wins)

    Returns:
        Minutes from the first matching rule, or None if nothing matched.
        A matching rule may yield 0 (e.g. "0 minutes"); callers treat
        that the same as no duration.
    """
    for rule in rules:
        minutes = rule.evaluate(text)
        if minutes is not None:
            return minutes
    return None
