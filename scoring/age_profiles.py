# scoring/age_profiles.py
"""
PlayerFuel — Age-specific Nutrition
===================================
Reference needs per age group plus the age-based score adjustments and
reminders applied after the base score is known.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Optional

from scoring.models import AgeGroup, MealTiming, QualityTier

# =============================================================================
# REFERENCE NEEDS
# =============================================================================
@dataclass(frozen=True)
class AgeGroupProfile:
    age_group: AgeGroup
    calories_per_day: int
    protein_grams_per_kg: float
    focus: str


AGE_SPECIFIC_NEEDS = MappingProxyType({
    AgeGroup.AGE_10_12: AgeGroupProfile(
        AgeGroup.AGE_10_12, 2000, 1.0, "Growth and development, adequate calcium and iron"
    ),
    AgeGroup.AGE_13_15: AgeGroupProfile(
        AgeGroup.AGE_13_15, 2400, 1.2, "Increased energy needs, muscle development"
    ),
    AgeGroup.AGE_16_18: AgeGroupProfile(
        AgeGroup.AGE_16_18, 2800, 1.4, "Peak performance, muscle recovery"
    ),
    AgeGroup.AGE_19_25: AgeGroupProfile(
        AgeGroup.AGE_19_25, 3000, 1.6, "Maintenance and optimization"
    ),
})

DAIRY_TERMS = ("milk", "cheese", "yogurt")
PORTION_TERMS = ("large", "extra", "double")
RECOVERY_TERMS = ("recovery", "protein shake", "chocolate milk")
DRINK_TERMS = ("water", "drink")

YOUNG_PLAYER_SCORE_FLOOR = 20


def _mentions(description: str, terms) -> bool:
    return any(term in description for term in terms)


def get_age_group(age: int) -> AgeGroup:
    """Bucket a player's age into its age group."""
    if age <= 12:
        return AgeGroup.AGE_10_12
    if age <= 15:
        return AgeGroup.AGE_13_15
    if age <= 18:
        return AgeGroup.AGE_16_18
    return AgeGroup.AGE_19_25


# =============================================================================
# AGE-GROUP ADJUSTMENT
# =============================================================================
def get_age_specific_bonus(
    age_group: AgeGroup,
    quality: QualityTier,
    description: str,
    score: int,
    excellent_count: int = 0,
    timing: Optional[MealTiming] = None
) -> Dict[str, Any]:
    """
    Age-group bonus points and suggestions for an already scored meal.

    Args:
        age_group: Player's age group
        quality: Tier from the score calculator
        description: Lowercased meal description
        score: Base score from the score calculator
        excellent_count: Excellent-tier keyword hits
        timing: Meal timing, if known

    Returns:
        {"bonus": non-negative int, "suggestions": [str, ...]}
    """
    suggestions: List[str] = []
    bonus = 0

    if age_group == AgeGroup.AGE_10_12:
        # Younger players: reward good choices, soften poor ones
        if quality in (QualityTier.GOOD, QualityTier.EXCELLENT):
            bonus = 10
            suggestions.append("Great job making healthy choices at your age!")
        elif quality == QualityTier.POOR:
            bonus = max(0, YOUNG_PLAYER_SCORE_FLOOR - score)
            suggestions.append("Try to choose healthier options to grow strong!")

        if _mentions(description, DAIRY_TERMS):
            bonus += 5
            suggestions.append("Good calcium intake for strong bones!")
        else:
            suggestions.append("Add milk, yogurt or cheese for calcium to build strong bones.")

    elif age_group == AgeGroup.AGE_13_15:
        # Growth spurt: calories and protein
        if excellent_count > 0 and "protein" in description:
            bonus = 8
            suggestions.append("Perfect for your growth and development!")
        if _mentions(description, PORTION_TERMS):
            bonus += 3
            suggestions.append("Good portion size for your active lifestyle!")

    elif age_group == AgeGroup.AGE_16_18:
        if quality == QualityTier.EXCELLENT and timing != MealTiming.REGULAR:
            bonus = 5
            suggestions.append("Excellent choice for peak performance!")
        if _mentions(description, RECOVERY_TERMS):
            bonus += 5
            suggestions.append("Great recovery choice for your training intensity!")

    elif age_group == AgeGroup.AGE_19_25:
        # Adult standards, no bonus
        if quality in (QualityTier.POOR, QualityTier.FAIR):
            suggestions.append("At your age, focus on professional-level nutrition.")
        elif quality == QualityTier.EXCELLENT:
            suggestions.append("Professional-level nutrition choice! Keep it up!")

    return {"bonus": bonus, "suggestions": suggestions}


# =============================================================================
# RAW AGE REMINDERS
# =============================================================================
def get_player_age_reminders(age: int, description: str) -> List[str]:
    """Calcium and protein reminders keyed on the player's numeric age."""
    reminders = []
    if age <= 12 and not _mentions(description, DAIRY_TERMS):
        reminders.append("Growing bones need calcium - include milk, yogurt or cheese today.")
    if age >= 16:
        reminders.append("Include protein after training to support muscle recovery.")
    return reminders


def get_age_hydration_reminder(
    age: int,
    description: str,
    timing: Optional[MealTiming] = None
) -> Optional[str]:
    """Hydration reminder for the player's age, or None."""
    has_drink = _mentions(description, DRINK_TERMS)

    if age <= 12 and not has_drink:
        return "Remember to drink water with your meal!"
    if age >= 16 and timing in (MealTiming.POST_GAME, MealTiming.AFTER_PRACTICE) and not has_drink:
        return "Don't forget to rehydrate after training!"
    if timing == MealTiming.AFTER_PRACTICE and not has_drink:
        return "💧 Important: Rehydrate after practice for better recovery!"
    return None


__all__ = [
    "AgeGroupProfile",
    "AGE_SPECIFIC_NEEDS",
    "DAIRY_TERMS",
    "get_age_group",
    "get_age_specific_bonus",
    "get_player_age_reminders",
    "get_age_hydration_reminder",
]
