# scoring/food_analyzer.py
"""
PlayerFuel — Food Quality Analyzer
==================================
Scores a free-text meal description into a quality tier, a 0-100 score and
coaching suggestions, using the keyword taxonomy plus optional meal timing
and age context. Also produces generic time-of-day meal recommendations.

Every function here is pure: no state, no I/O.
"""

from typing import Any, Dict, List, Optional, Tuple

from scoring.config import SETTINGS, ScoringSettings
from scoring.food_categories import KeywordSet, TIER_KEYWORDS, TOTAL_KEYWORD_COUNT
from scoring.timing_foods import TIMING_PROFILES
from scoring.age_profiles import (
    get_age_specific_bonus,
    get_player_age_reminders,
    get_age_hydration_reminder,
)
from scoring.models import (
    AnalysisInput,
    AnalysisResult,
    MealTiming,
    QualityTier,
    TimeOfDay,
    normalize_tag,
)

print(f"✅ Scoring Engine: {TOTAL_KEYWORD_COUNT} quality keywords, {len(TIMING_PROFILES)} timing profiles")

# =============================================================================
# CONSTANTS
# =============================================================================
JUNK_TOKEN = "junk"
JUNK_SUGGESTION = "Try to avoid junk food. Choose whole foods instead."

TIMING_BONUS = 10

# timing -> (matched suggestion, missed suggestion)
TIMING_SUGGESTIONS = {
    MealTiming.PRE_GAME: ("Good pre-game fuel choice!", "Consider carb-rich foods 2-3 hours before game"),
    MealTiming.POST_GAME: ("Excellent recovery meal!", "Add protein for better recovery"),
}

TIER_SUGGESTIONS = {
    "processed": "This meal is high in processed foods. Try adding more whole foods.",
    "excellent": "Excellent nutritional choice for a young athlete!",
    "good": "Good balanced meal. Keep it up!",
    "fair": "Decent choice. Try adding more vegetables or lean protein.",
    "empty": "Consider adding more nutritious foods to your meal.",
}


# =============================================================================
# MATCHER
# =============================================================================
def count_matches(description: str, keyword_set: KeywordSet) -> int:
    """Number of phrases in keyword_set found in the description."""
    desc = description.lower()
    return sum(1 for kw in keyword_set.keywords if kw in desc)


def count_tier_matches(description: str) -> Dict[QualityTier, int]:
    return {tier: count_matches(description, kw_set) for tier, kw_set in TIER_KEYWORDS.items()}


# =============================================================================
# TIMING ADJUSTER
# =============================================================================
def apply_timing(description: str, timing: Optional[MealTiming]) -> Dict[str, Any]:
    """
    Timing bonus for pre-game and post-game meals.

    Returns {"bonus": 0 or 10, "suggestions": [...]}; other timings and None
    give no bonus and no suggestion.
    """
    if timing not in TIMING_SUGGESTIONS:
        return {"bonus": 0, "suggestions": []}

    matched, missed = TIMING_SUGGESTIONS[timing]
    if count_matches(description, TIMING_PROFILES[timing].keyword_set) > 0:
        return {"bonus": TIMING_BONUS, "suggestions": [matched]}
    return {"bonus": 0, "suggestions": [missed]}


# =============================================================================
# SCORE CALCULATOR
# =============================================================================
def calculate_base_score(
    poor_count: int,
    fair_count: int,
    good_count: int,
    excellent_count: int,
    timing_bonus: int = 0
) -> Tuple[QualityTier, int, str]:
    """
    Tier, base score and outcome suggestion from keyword counts.

    Rules are checked in order and the first match wins:
      1. poor >= 2, or poor outweighs good + excellent  -> poor
      2. excellent >= 2 with at least one good           -> excellent
      3. good >= 2, or any good with any excellent       -> good
      4. any fair or any good                            -> fair
      5. nothing recognised                              -> poor, flat 25
    """
    if poor_count >= 2 or poor_count > good_count + excellent_count:
        return QualityTier.POOR, max(0, 25 - poor_count * 5), TIER_SUGGESTIONS["processed"]

    if excellent_count >= 2 and good_count >= 1:
        score = min(100, 85 + excellent_count * 5 + timing_bonus)
        return QualityTier.EXCELLENT, score, TIER_SUGGESTIONS["excellent"]

    if good_count >= 2 or (good_count > 0 and excellent_count > 0):
        score = min(85, 65 + good_count * 5 + excellent_count * 10 + timing_bonus)
        return QualityTier.GOOD, score, TIER_SUGGESTIONS["good"]

    if fair_count >= 1 or good_count >= 1:
        score = min(65, 40 + fair_count * 5 + good_count * 10 + timing_bonus)
        return QualityTier.FAIR, score, TIER_SUGGESTIONS["fair"]

    # Reported as poor even though it sits below the fair rule
    return QualityTier.POOR, 25, TIER_SUGGESTIONS["empty"]


# =============================================================================
# ENTRY POINTS
# =============================================================================
def analyze_input(
    analysis_input: AnalysisInput,
    settings: ScoringSettings = SETTINGS
) -> AnalysisResult:
    """Score an already normalised AnalysisInput."""
    desc = analysis_input.description.lower()

    if JUNK_TOKEN in desc:
        return AnalysisResult(
            quality_tier=QualityTier.POOR,
            score=0,
            suggestions=(JUNK_SUGGESTION,),
        )

    counts = count_tier_matches(desc)
    timing = analysis_input.timing

    timing_adjustment = apply_timing(desc, timing)
    quality, score, outcome = calculate_base_score(
        counts[QualityTier.POOR],
        counts[QualityTier.FAIR],
        counts[QualityTier.GOOD],
        counts[QualityTier.EXCELLENT],
        timing_adjustment["bonus"],
    )

    suggestions: List[str] = list(timing_adjustment["suggestions"])
    suggestions.append(outcome)

    age_bonus = None
    if analysis_input.age_group is not None:
        adjustment = get_age_specific_bonus(
            analysis_input.age_group,
            quality,
            desc,
            score,
            excellent_count=counts[QualityTier.EXCELLENT],
            timing=timing,
        )
        age_bonus = adjustment["bonus"]
        suggestions.extend(adjustment["suggestions"])
        score = min(100, score + age_bonus)

    if analysis_input.player_age is not None:
        suggestions.extend(get_player_age_reminders(analysis_input.player_age, desc))
        hydration = get_age_hydration_reminder(analysis_input.player_age, desc, timing)
        if hydration:
            suggestions.append(hydration)

    return AnalysisResult(
        quality_tier=quality,
        score=score,
        suggestions=tuple(suggestions),
        age_bonus=age_bonus,
    )


def analyze(
    description: Optional[str],
    timing: Any = None,
    player_age: Any = None,
    age_group: Any = None,
    settings: ScoringSettings = SETTINGS
) -> AnalysisResult:
    """
    Analyze meal quality from its description and context.

    Args:
        description: Free-text meal description, e.g. "grilled chicken with rice"
        timing: "pre-game", "post-game", "after-practice", "regular" (or a MealTiming)
        player_age: Player's age in years; fractions are truncated, non-numbers ignored
        age_group: "10-12", "13-15", "16-18", "19-25" (or an AgeGroup)
        settings: Scoring settings; strict_tags rejects unknown tags

    Returns:
        AnalysisResult with quality_tier, score (0-100), suggestions, age_bonus

    Example:
        >>> analyze("protein shake with banana", timing="post-game").score
        100
    """
    analysis_input = AnalysisInput.from_raw(
        description,
        timing=timing,
        player_age=player_age,
        age_group=age_group,
        strict=settings.strict_tags,
    )
    return analyze_input(analysis_input, settings)


# =============================================================================
# RECOMMENDATION GENERATOR
# =============================================================================
def recommend(
    time_of_day: Any,
    is_training_day: bool,
    last_meal_quality: Any = None,
    settings: ScoringSettings = SETTINGS
) -> List[str]:
    """
    Generic meal advice for a time of day.

    Unrecognised times of day get the evening advice unless strict_tags is
    set. A poor last meal puts a warning first.
    """
    slot = normalize_tag(TimeOfDay, time_of_day, "time of day", settings.strict_tags)
    last_quality = normalize_tag(QualityTier, last_meal_quality, "meal quality", settings.strict_tags)

    recommendations = []

    if slot == TimeOfDay.MORNING:
        recommendations.append("Start with oatmeal or whole grain toast")
        recommendations.append("Add eggs for protein")
        recommendations.append("Include fruit for vitamins")
        if is_training_day:
            recommendations.append("Extra carbs needed - add banana or honey")
    elif slot == TimeOfDay.AFTERNOON:
        recommendations.append("Balanced lunch with protein and vegetables")
        recommendations.append("Stay hydrated with water")
        if is_training_day:
            recommendations.append("Light meal if training soon, heavier if post-training")
    else:
        recommendations.append("Lean protein with vegetables")
        recommendations.append("Complex carbs if you trained today")
        recommendations.append("Avoid heavy, fatty foods before bed")

    if last_quality == QualityTier.POOR:
        recommendations.insert(0, "WARNING: Your last meal was low quality - make this one count!")

    return recommendations


__all__ = [
    "count_matches",
    "count_tier_matches",
    "apply_timing",
    "calculate_base_score",
    "analyze_input",
    "analyze",
    "recommend",
    "JUNK_SUGGESTION",
    "TIMING_BONUS",
]
