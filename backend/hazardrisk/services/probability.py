"""
Approximate annual-probability buckets for NRI scores.

NRI scores are relative risk indices, not probabilities. The buckets below
are a fixed display heuristic: each score range maps to a pre-written text,
detail line and nominal odds value. Nothing here is computed from the score
itself, and the boundaries are part of the public output.

    score <=  5   < 0.1%
    score <= 15   ~0.1–0.5%
    score <= 30   ~0.5–2%
    score <= 50   ~2–5%
    score <= 70   ~5–15%
    score <= 85   ~15–30%
    otherwise     > 30%
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProbabilityDescriptor:
    text: str
    detail: str
    odds: float | None = None  # display only

    @property
    def has_data(self) -> bool:
        return self.odds is not None


@dataclass(frozen=True)
class ProbabilityBand:
    max_score: float
    descriptor: ProbabilityDescriptor


PROBABILITY_BANDS: tuple[ProbabilityBand, ...] = (
    ProbabilityBand(5, ProbabilityDescriptor("< 0.1%", "Less than 1 in 1,000 chance per year", 0.001)),
    ProbabilityBand(15, ProbabilityDescriptor("~0.1–0.5%", "Roughly 1 in 200 to 1 in 1,000 per year", 0.003)),
    ProbabilityBand(30, ProbabilityDescriptor("~0.5–2%", "Roughly 1 in 50 to 1 in 200 per year", 0.01)),
    ProbabilityBand(50, ProbabilityDescriptor("~2–5%", "Roughly 1 in 20 to 1 in 50 per year", 0.035)),
    ProbabilityBand(70, ProbabilityDescriptor("~5–15%", "Roughly 1 in 7 to 1 in 20 per year", 0.1)),
    ProbabilityBand(85, ProbabilityDescriptor("~15–30%", "Roughly 1 in 3 to 1 in 7 per year", 0.225)),
)

HIGHEST_PROBABILITY = ProbabilityDescriptor("> 30%", "Greater than 1 in 3 chance per year", 0.4)

INSUFFICIENT_DATA = ProbabilityDescriptor("Insufficient data", "")


def estimate(score: float | None) -> ProbabilityDescriptor:
    """Look up the annual-probability bucket for a risk score."""
    if score is None or score < 0:
        return INSUFFICIENT_DATA
    for band in PROBABILITY_BANDS:
        if score <= band.max_score:
            return band.descriptor
    return HIGHEST_PROBABILITY
