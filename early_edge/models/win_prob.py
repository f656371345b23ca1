"""
Early-game win probability: fixed-coefficient logistic model.

Inputs at the 10-minute mark:
  1. gold difference (scaled to thousands)
  2. kill difference
  3. first dragon taken by this team (0/1)

The coefficients are constants from an offline fit; nothing is trained here.
"""

import logging
import math
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coefficients:
    b0: float  # intercept
    b1: float  # gold diff at 10, in thousands
    b2: float  # kill diff at 10
    b3: float  # first dragon


DEFAULT_COEFFICIENTS = Coefficients(
    b0=-0.39750995,
    b1=1.00495136,
    b2=-0.06700415,
    b3=0.79456393,
)


def logistic(z: float) -> float:
    """1 / (1 + e^-z), without overflow for large |z|."""
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    ez = math.exp(z)
    return ez / (1.0 + ez)


def linear_score(
    gold_diff_10: float,
    kills_diff_10: int,
    first_dragon: int,
    coefficients: Coefficients = DEFAULT_COEFFICIENTS,
) -> float:
    c = coefficients
    return (
        c.b0
        + c.b1 * (gold_diff_10 / 1000.0)
        + c.b2 * kills_diff_10
        + c.b3 * first_dragon
    )


def predict(
    gold_diff_10: float,
    kills_diff_10: int,
    first_dragon: int,
    coefficients: Coefficients = DEFAULT_COEFFICIENTS,
) -> float:
    """P(win) given the three 10-minute inputs. Strictly inside (0, 1)."""
    if first_dragon not in (0, 1):
        raise ValueError(f"first_dragon must be 0 or 1, got {first_dragon!r}")
    if not math.isfinite(gold_diff_10) or not math.isfinite(kills_diff_10):
        raise ValueError(
            f"inputs must be finite, got gold={gold_diff_10}, kills={kills_diff_10}"
        )
    z = linear_score(gold_diff_10, kills_diff_10, int(first_dragon), coefficients)
    # Keep the open interval even where the float saturates.
    return min(max(logistic(z), math.ulp(0.0)), math.nextafter(1.0, 0.0))


def to_percent(probability: float) -> int:
    """Round a probability to an integer percentage (halves round up)."""
    return math.floor(probability * 100 + 0.5)


class WinProbabilityModel:
    """Logistic win-probability model on 10-minute features."""

    def __init__(self, coefficients: Coefficients = DEFAULT_COEFFICIENTS):
        self.coefficients = coefficients

    @classmethod
    def from_config(cls, cfg: dict | None) -> "WinProbabilityModel":
        """Build from the `model.coefficients` config block (defaults if absent)."""
        coef = (cfg or {}).get("coefficients")
        if not coef:
            return cls()
        try:
            c = Coefficients(**{k: float(coef[k]) for k in ("b0", "b1", "b2", "b3")})
        except KeyError as e:
            raise ValueError(f"Missing model coefficient: {e.args[0]}") from None
        log.info(f"Win probability model: {c}")
        return cls(c)

    def predict(self, gold_diff_10: float, kills_diff_10: int, first_dragon: int = 0) -> float:
        return predict(gold_diff_10, kills_diff_10, first_dragon, self.coefficients)

    def predict_percent(self, gold_diff_10: float, kills_diff_10: int, first_dragon: int = 0) -> int:
        return to_percent(self.predict(gold_diff_10, kills_diff_10, first_dragon))

