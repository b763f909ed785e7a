"""Result shapes for parameter checks and batch validation."""
import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class MatchResult:
    # exists mirrors exact_match; both fields are kept for callers reading either
    exists: bool
    exact_match: bool
    similar_matches: list = field(default_factory=list)
    all_properties: list = field(default_factory=list)

    def to_dict(self):
        return {
            "exists": self.exists,
            "exactMatch": self.exact_match,
            "similarMatches": list(self.similar_matches),
            "allProperties": list(self.all_properties),
        }


@dataclass(frozen=True)
class ParameterResult:
    parameter: str
    found: bool
    similar_matches: list = field(default_factory=list)

    def to_dict(self):
        return {
            "parameter": self.parameter,
            "found": self.found,
            "similarMatches": list(self.similar_matches),
        }


@dataclass(frozen=True)
class ValidationSummary:
    total: int
    found: int
    missing: int
    success_rate: int
    missing_parameters: list = field(default_factory=list)

    @classmethod
    def from_results(cls, results):
        total = len(results)
        found = sum(1 for r in results if r.found)
        return cls(
            total=total,
            found=found,
            missing=total - found,
            success_rate=success_rate(found, total),
            missing_parameters=[r.parameter for r in results if not r.found],
        )

    def to_dict(self):
        return {
            "total": self.total,
            "found": self.found,
            "missing": self.missing,
            "successRate": self.success_rate,
            "missingParameters": list(self.missing_parameters),
        }


def success_rate(found, total):
    """Percentage of found parameters, rounded half up."""
    if not total:
        return 0
    return int(math.floor(found / total * 100 + 0.5))
