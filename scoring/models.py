# scoring/models.py
"""
PlayerFuel — Scoring Models
===========================
Enumerated context tags, the frozen analysis input/result models and the
boundary normalisation that maps loose caller values onto them.
"""

import math
from enum import Enum
from typing import Any, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================
class QualityTier(str, Enum):
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"


class MealTiming(str, Enum):
    PRE_GAME = "pre-game"
    DURING_GAME = "during-game"
    POST_GAME = "post-game"
    AFTER_PRACTICE = "after-practice"
    RECOVERY = "recovery"
    REGULAR = "regular"


class AgeGroup(str, Enum):
    AGE_10_12 = "10-12"
    AGE_13_15 = "13-15"
    AGE_16_18 = "16-18"
    AGE_19_25 = "19-25"


class TimeOfDay(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


# =============================================================================
# ERRORS
# =============================================================================
class UnknownContextTagError(ValueError):
    """Raised in strict mode when a context tag is not a legal value."""

    def __init__(self, field: str, value: Any, allowed: Tuple[str, ...]):
        self.field = field
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Unknown {field} {value!r}; expected one of: {', '.join(allowed)}"
        )


# =============================================================================
# BOUNDARY NORMALISATION
# =============================================================================
def normalize_tag(
    enum_cls: Type[Enum],
    value: Any,
    field: str,
    strict: bool = False
) -> Optional[Enum]:
    """
    Map a caller-supplied tag onto a member of enum_cls.

    Accepts enum members and their string values (case and surrounding
    whitespace ignored). Unrecognised values become None, or raise
    UnknownContextTagError when strict is set. None and "" are always None.
    """
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value

    text = str(value).strip().lower()
    if not text:
        return None

    for member in enum_cls:
        if member.value == text:
            return member

    if strict:
        raise UnknownContextTagError(field, value, tuple(m.value for m in enum_cls))
    return None


def normalize_age(value: Any) -> Optional[int]:
    """
    Whole years from a caller-supplied age.

    Fractional ages and numeric strings are truncated to an int (12.5 -> 12).
    Anything that is not a finite number counts as no age at all.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        age = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(age):
        return None
    return int(age)


# =============================================================================
# INPUT / RESULT
# =============================================================================
class AnalysisInput(BaseModel):
    """A single meal to score. Build with from_raw() to normalise loose tags."""
    model_config = ConfigDict(frozen=True)

    description: str = ""
    timing: Optional[MealTiming] = None
    player_age: Optional[int] = None
    age_group: Optional[AgeGroup] = None

    @classmethod
    def from_raw(
        cls,
        description: Optional[str],
        timing: Any = None,
        player_age: Any = None,
        age_group: Any = None,
        strict: bool = False
    ) -> "AnalysisInput":
        return cls(
            description=description or "",
            timing=normalize_tag(MealTiming, timing, "meal timing", strict),
            player_age=normalize_age(player_age),
            age_group=normalize_tag(AgeGroup, age_group, "age group", strict),
        )


class AnalysisResult(BaseModel):
    """Outcome of scoring one meal. Owned by the caller."""
    model_config = ConfigDict(frozen=True)

    quality_tier: QualityTier
    score: int = Field(..., ge=0, le=100)
    suggestions: Tuple[str, ...] = ()
    age_bonus: Optional[int] = Field(None, ge=0)

    def to_dict(self) -> dict:
        return {
            "quality_tier": self.quality_tier.value,
            "score": self.score,
            "suggestions": list(self.suggestions),
            "age_bonus": self.age_bonus,
        }


__all__ = [
    "QualityTier",
    "MealTiming",
    "AgeGroup",
    "TimeOfDay",
    "UnknownContextTagError",
    "normalize_tag",
    "normalize_age",
    "AnalysisInput",
    "AnalysisResult",
]
