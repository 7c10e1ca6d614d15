# src/lab_analyzer/processors/lab/matcher.py
"""
Dictionary Matcher - locate values for known parameters in OCR text

For every dictionary entry (in dictionary order) each candidate name is
tried against five layouts, most specific first:

    1. name_value       "Hemoglobin : 14.2", "Hemoglobin 14.2"
    2. name_paren_value "Hemoglobin (12.0-15.5) : 14.2"
    3. value_name       "14.2 Hemoglobin"
    4. name_value_unit  "Hemoglobin  ...  14.2 g/dL"   (expected unit follows)
    5. name_loose       "Hemoglobin ... 14.2"          (nearest number after name)

Each layout is searched for its first occurrence in the text. A value that
is not a positive number is discarded and the next layout (then the next
candidate name) is tried. The first accepted value ends the search for
that entry.

A name hit that lies inside a longer candidate name of another entry is
skipped and the layout is searched again further on: "cholesterol" (alias
of total cholesterol) does not match the tail of "HDL Cholesterol: 50".
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Pattern, Tuple

from .utils.parsing import NUMBER_PATTERN, parse_numeric_value
from ...core.context.parameter_definition import ParameterDefinition

logger = logging.getLogger(__name__)

PATTERN_ORDER = (
    "name_value",
    "name_paren_value",
    "value_name",
    "name_value_unit",
    "name_loose",
)

# (longer name, offset of the shorter name inside it)
Shadow = Tuple[str, int]


@dataclass(frozen=True)
class ValueMatch:
    """Raw value located for one dictionary entry, before classification."""
    definition: ParameterDefinition
    matched_name: str
    pattern: str
    value: str
    numeric_value: float


def build_patterns(name: str, unit: str) -> List[Tuple[str, Pattern]]:
    """
    Compile the five layouts for one candidate name.

    Names and units are escaped, so "vitamin b12" or "K/µL" match literally.
    Every pattern exposes the groups "name" and "value".
    """
    n = rf'(?P<name>{re.escape(name)})'
    u = re.escape(unit)
    num = rf'(?P<value>{NUMBER_PATTERN})'
    sources = (
        rf'\b{n}\s*:?\s*{num}',
        rf'\b{n}\s*\([^)]*\)\s*:?\s*{num}',
        rf'{num}\s+\b{n}\b',
        rf'\b{n}\s+.*?{num}\s+{u}',
        rf'\b{n}\b.*?{num}',
    )
    return [
        (label, re.compile(source, re.IGNORECASE))
        for label, source in zip(PATTERN_ORDER, sources)
    ]


def find_shadows(
    candidate: str,
    owner: ParameterDefinition,
    dictionary: Iterable[ParameterDefinition]
) -> Tuple[Shadow, ...]:
    """
    Longer candidate names of other entries that contain `candidate` as a
    whole word, with the offset at which it appears.
    """
    word = re.compile(rf'\b{re.escape(candidate)}\b', re.IGNORECASE)
    shadows = []
    for definition in dictionary:
        if definition.canonical_name == owner.canonical_name:
            continue
        for other in definition.candidate_names:
            if len(other) <= len(candidate):
                continue
            for hit in word.finditer(other):
                shadows.append((other.lower(), hit.start()))
    return tuple(shadows)


def is_shadowed(text: str, position: int, shadows: Iterable[Shadow]) -> bool:
    """True when a name found at `position` is part of a longer shadowing name."""
    for longer, offset in shadows:
        start = position - offset
        if start < 0:
            continue
        if text[start:start + len(longer)].lower() == longer:
            return True
    return False


class DictionaryMatcher:
    """
    Match the normalized text against an ordered parameter dictionary.

    Patterns are compiled once per instance; matching keeps no state
    between calls.
    """

    def __init__(self, dictionary: Iterable[ParameterDefinition]):
        self.dictionary = tuple(dictionary)
        self._compiled: Dict[str, List[Tuple[str, Tuple[Shadow, ...], List[Tuple[str, Pattern]]]]] = {
            definition.canonical_name: [
                (
                    candidate,
                    find_shadows(candidate, definition, self.dictionary),
                    build_patterns(candidate, definition.unit),
                )
                for candidate in definition.candidate_names
            ]
            for definition in self.dictionary
        }

    def match(self, text: str) -> List[ValueMatch]:
        """
        Find at most one value per canonical name.

        Returns:
            Matches in dictionary order (not text order)
        """
        if not text:
            return []

        matches = []
        seen = set()

        for definition in self.dictionary:
            if definition.canonical_name in seen:
                # Only reachable with a duplicated entry
                continue

            found = self.match_definition(definition, text)
            if found:
                matches.append(found)
                seen.add(definition.canonical_name)

        logger.debug(f"Dictionary matcher found {len(matches)} parameters")
        return matches

    def match_definition(
        self,
        definition: ParameterDefinition,
        text: str
    ) -> Optional[ValueMatch]:
        """Try each candidate name, each layout, in priority order."""
        for candidate, shadows, patterns in self._compiled[definition.canonical_name]:
            for label, pattern in patterns:
                match = self._search(pattern, text, shadows)
                if not match:
                    continue

                raw_value = match.group("value")
                numeric = parse_numeric_value(raw_value)
                if numeric is None:
                    logger.debug(
                        f"{definition.canonical_name}: rejected {raw_value!r} "
                        f"from {label} ({candidate!r})"
                    )
                    continue

                logger.debug(
                    f"{definition.canonical_name}: {raw_value} via {label} ({candidate!r})"
                )
                return ValueMatch(
                    definition=definition,
                    matched_name=candidate,
                    pattern=label,
                    value=raw_value,
                    numeric_value=numeric,
                )

        return None

    @staticmethod
    def _search(pattern: Pattern, text: str, shadows: Tuple[Shadow, ...]):
        """First match whose name is not part of another entry's longer name."""
        pos = 0
        while True:
            match = pattern.search(text, pos)
            if match is None or not shadows:
                return match
            if not is_shadowed(text, match.start("name"), shadows):
                return match
            pos = match.start("name") + 1
