"""Line patterns recognised by the locator.

Each rule is a named regex whose named groups are the extracted fields.
Rules run against a single whitespace-trimmed line; there is no parsing
across lines, so declarations split over several lines are not seen.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True, slots=True)
class PatternRule:
    """A named line matcher with its extracted groups."""

    name: str
    pattern: re.Pattern[str]

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None

    def extract(self, line: str) -> dict[str, str] | None:
        match = self.pattern.search(line)
        if match is None:
            return None
        return match.groupdict()


# func (s *SuiteType) TestMethod(
RECEIVER_METHOD = PatternRule(
    "receiver_method",
    re.compile(r"func\s+\(\w+\s+\*\s*(?P<suite>\w+)\)\s+(?P<method>Test\w*)\s*\("),
)

# func TestMethod(t *testing.T)
STANDALONE_TEST = PatternRule(
    "standalone_test",
    re.compile(r"func\s+(?P<method>Test\w*)\s*\(.*\*\s*testing\.T\s*\)"),
)

# "subtest name": {
MAP_KEY_CASE = PatternRule(
    "map_key_case",
    re.compile(r'"(?P<name>[^"]+)":\s*\{'),
)

# name: "subtest name"
NAMED_FIELD_CASE = PatternRule(
    "named_field_case",
    re.compile(r'\bname\s*:\s*"(?P<name>[^"]+)"'),
)

# Receiver methods win over standalone functions on the same line.
DECLARATION_RULES: tuple[PatternRule, ...] = (RECEIVER_METHOD, STANDALONE_TEST)
SUBTEST_RULES: tuple[PatternRule, ...] = (MAP_KEY_CASE, NAMED_FIELD_CASE)


@lru_cache(maxsize=128)
def suite_registration(suite_type: str) -> PatternRule:
    """Rule for ``x.Run(t, new(SuiteType))`` or ``x.Run(t, &SuiteType{...})``.

    The type name must match exactly; ``FirstSuite`` does not match
    ``FirstSuiteV2``.
    """
    name = re.escape(suite_type)
    return PatternRule(
        f"suite_registration[{suite_type}]",
        re.compile(
            rf"\.Run\(\s*\w+\s*,\s*(?:new\(\s*{name}\s*\)|&\s*{name}\s*\{{)"
        ),
    )
