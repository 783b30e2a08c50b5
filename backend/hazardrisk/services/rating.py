"""
Risk rating bands for NRI scores (0-100).

    Very Low              0 - 15
    Relatively Low       15 - 30
    Relatively Moderate  30 - 50
    Relatively High      50 - 70
    Very High            70 - 100

Upper bounds are inclusive, so a score of exactly 30 is "Relatively Low".
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RatingBand:
    label: str
    max_score: float | None
    color: str
    bg: str

    @property
    def is_no_data(self) -> bool:
        return self.max_score is None


RISK_RATINGS: tuple[RatingBand, ...] = (
    RatingBand(label="Very Low", max_score=15, color="#4a8c6a", bg="#eef6f1"),
    RatingBand(label="Relatively Low", max_score=30, color="#6aab7b", bg="#f0f7f2"),
    RatingBand(label="Relatively Moderate", max_score=50, color="#c4a24d", bg="#faf6ec"),
    RatingBand(label="Relatively High", max_score=70, color="#c48a4d", bg="#f9f3ec"),
    RatingBand(label="Very High", max_score=100, color="#b85c4a", bg="#f7efed"),
)

NO_DATA_BAND = RatingBand(label="No Data", max_score=None, color="#95a5a6", bg="#f0f0f0")


def classify(score: float | None) -> RatingBand:
    """Map a risk score to its rating band; absent or negative scores get NO_DATA_BAND."""
    if score is None or score < 0:
        return NO_DATA_BAND
    for band in RISK_RATINGS:
        if score <= band.max_score:
            return band
    return RISK_RATINGS[-1]
