# unit_tests/test_scoring_taxonomy.py
"""
Unit Tests for Keyword Taxonomy, Models and Settings
====================================================
Run with: python -m pytest unit_tests/test_scoring_taxonomy.py -v
"""

import os
import sys
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest
from pydantic import ValidationError

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from scoring.food_categories import (
    KeywordSet,
    TIER_KEYWORDS,
    TOTAL_KEYWORD_COUNT,
    GOOD_QUALITY_FOODS,
)
from scoring.timing_foods import TIMING_PROFILES, POST_GAME_FOODS
from scoring.models import (
    AgeGroup,
    AnalysisInput,
    AnalysisResult,
    MealTiming,
    QualityTier,
    UnknownContextTagError,
    normalize_age,
    normalize_tag,
)
from scoring.config import ScoringSettings, load_settings


def test_tier_keyword_sets():
    """Four ordered tiers of lowercase, de-duplicated phrases."""
    assert list(TIER_KEYWORDS) == [
        QualityTier.POOR, QualityTier.FAIR, QualityTier.GOOD, QualityTier.EXCELLENT
    ]
    assert TOTAL_KEYWORD_COUNT == sum(len(s) for s in TIER_KEYWORDS.values())

    for tier, kw_set in TIER_KEYWORDS.items():
        assert kw_set.description, f"{tier.value} needs a description"
        assert all(kw == kw.lower() for kw in kw_set.keywords)
        assert len(set(kw_set.keywords)) == len(kw_set.keywords), f"{tier.value} has duplicates"

    assert GOOD_QUALITY_FOODS.keywords.count("water") == 1

    from scoring.food_analyzer import analyze
    result = analyze("water")
    assert (result.quality_tier, result.score) == (QualityTier.FAIR, 50), "Listed twice, counted once"
    print(f"✅ {TOTAL_KEYWORD_COUNT} tier keywords")


def test_keyword_set_build():
    kw_set = KeywordSet.build(["Oats", "oats", "Milk"], "test")
    assert kw_set.keywords == ("oats", "milk")
    assert len(kw_set) == 2


def test_taxonomy_is_read_only():
    with pytest.raises(FrozenInstanceError):
        GOOD_QUALITY_FOODS.description = "changed"
    with pytest.raises(TypeError):
        TIER_KEYWORDS[QualityTier.POOR] = GOOD_QUALITY_FOODS
    with pytest.raises(TypeError):
        TIMING_PROFILES[MealTiming.REGULAR] = POST_GAME_FOODS


def test_timing_profiles():
    assert set(TIMING_PROFILES) == {
        MealTiming.PRE_GAME, MealTiming.DURING_GAME, MealTiming.POST_GAME, MealTiming.RECOVERY
    }
    assert "chocolate milk" in POST_GAME_FOODS.keywords
    assert POST_GAME_FOODS.window == "Within 30 minutes"
    for profile in TIMING_PROFILES.values():
        assert profile.keywords and profile.description and profile.window


def test_normalize_tag():
    assert normalize_tag(MealTiming, " Pre-Game ", "meal timing") == MealTiming.PRE_GAME
    assert normalize_tag(MealTiming, MealTiming.POST_GAME, "meal timing") == MealTiming.POST_GAME
    assert normalize_tag(AgeGroup, "16-18", "age group") == AgeGroup.AGE_16_18
    assert normalize_tag(AgeGroup, None, "age group") is None
    assert normalize_tag(AgeGroup, "", "age group", strict=True) is None
    assert normalize_tag(AgeGroup, "8-9", "age group") is None
    assert normalize_tag(MealTiming, "After-Practice", "meal timing") == MealTiming.AFTER_PRACTICE

    with pytest.raises(UnknownContextTagError) as exc_info:
        normalize_tag(AgeGroup, "8-9", "age group", strict=True)
    assert exc_info.value.field == "age group"
    assert exc_info.value.value == "8-9"
    assert "10-12" in exc_info.value.allowed
    assert isinstance(exc_info.value, ValueError)


def test_analysis_input():
    analysis_input = AnalysisInput.from_raw(None, timing="post-game", player_age=15, age_group="bogus")
    assert analysis_input.description == ""
    assert analysis_input.timing == MealTiming.POST_GAME
    assert analysis_input.age_group is None

    with pytest.raises(ValidationError):
        analysis_input.description = "changed"


def test_normalize_age():
    assert normalize_age(12.5) == 12
    assert normalize_age(17) == 17
    assert normalize_age(" 16 ") == 16
    assert normalize_age("abc") is None
    assert normalize_age(None) is None
    assert normalize_age(True) is None
    assert normalize_age(float("nan")) is None

    analysis_input = AnalysisInput.from_raw("pasta", player_age=12.5)
    assert analysis_input.player_age == 12
    assert AnalysisInput.from_raw("pasta", player_age="abc").player_age is None


def test_analysis_result():
    result = AnalysisResult(quality_tier=QualityTier.GOOD, score=80, suggestions=("a", "b"))
    assert result.to_dict() == {
        "quality_tier": "good",
        "score": 80,
        "suggestions": ["a", "b"],
        "age_bonus": None,
    }
    with pytest.raises(ValidationError):
        AnalysisResult(quality_tier=QualityTier.GOOD, score=101)
    with pytest.raises(ValidationError):
        result.score = 50


def test_load_settings():
    keys = ["PLAYERFUEL_STRICT_TAGS", "PLAYERFUEL_API_PORT"]
    saved = {k: os.environ.get(k) for k in keys}
    try:
        os.environ["PLAYERFUEL_STRICT_TAGS"] = "Yes"
        os.environ["PLAYERFUEL_API_PORT"] = "9001"
        settings = load_settings()
        assert settings.strict_tags is True
        assert settings.api_port == 9001
    finally:
        for k, v in saved.items():
            if v is None:
                os.environ.pop(k, None)
            else:
                os.environ[k] = v

    defaults = ScoringSettings()
    assert defaults.strict_tags is False
    assert defaults.api_port == 8000
    assert not hasattr(defaults, "max_description_chars")


def test_settings_fixtures(lenient_settings, strict_settings):
    from scoring.food_analyzer import analyze

    assert analyze("salad", timing="brunch", settings=lenient_settings).score == 50
    with pytest.raises(UnknownContextTagError):
        analyze("salad", timing="brunch", settings=strict_settings)
