# ============================================================================
# src/lab_analyzer/core/context/parameter_definition.py
# ============================================================================
"""
Dictionary entry for one known clinical parameter
- Canonical name + aliases used for matching
- Display unit, reference range, category
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .range_spec import RangeSpec, parse_range_spec
from ...utils.text_normalizer import capitalize_words

@dataclass(frozen=True)
class ParameterDefinition:
    canonical_name: str
    unit: str
    range_spec: str
    category: str
    aliases: Tuple[str, ...] = ()

    # Parsed once at construction; None when range_spec is malformed
    range: Optional[RangeSpec] = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "aliases", tuple(self.aliases))
        object.__setattr__(self, "range", parse_range_spec(self.range_spec))

    @property
    def display_name(self) -> str:
        return capitalize_words(self.canonical_name)

    @property
    def candidate_names(self) -> Tuple[str, ...]:
        """Canonical name first, then aliases in declared order."""
        return (self.canonical_name,) + self.aliases
