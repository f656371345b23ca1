"""Simulator caption bands for a rounded win-probability percentage."""

from enum import Enum


class CaptionBand(Enum):
    BEHIND = "behind"
    EVEN = "even"
    AHEAD = "ahead"


BEHIND_BELOW = 40   # pct < 40 -> behind
EVEN_UP_TO = 60     # 40 <= pct <= 60 -> even

CAPTIONS = {
    CaptionBand.BEHIND: (
        "Your team is statistically behind based on the first 10 minutes, "
        "but comebacks are still possible."
    ),
    CaptionBand.EVEN: (
        "The game is relatively even at 10 minutes. Small decisions and "
        "teamfights can swing the outcome."
    ),
    CaptionBand.AHEAD: (
        "Your team has a strong early lead. Historically, teams in this "
        "position convert their advantage into a win."
    ),
}


def band_for(pct: int) -> CaptionBand:
    if pct < BEHIND_BELOW:
        return CaptionBand.BEHIND
    if pct <= EVEN_UP_TO:
        return CaptionBand.EVEN
    return CaptionBand.AHEAD


def caption_for(pct: int) -> tuple[CaptionBand, str]:
    band = band_for(pct)
    return band, CAPTIONS[band]
