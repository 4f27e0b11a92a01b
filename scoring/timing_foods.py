# scoring/timing_foods.py
"""
PlayerFuel — Timing-based Foods
===============================
Foods suited to each window around a game or training session.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable

from scoring.food_categories import KeywordSet
from scoring.models import MealTiming


@dataclass(frozen=True)
class TimingProfile:
    timing: MealTiming
    keyword_set: KeywordSet
    window: str

    @property
    def keywords(self):
        return self.keyword_set.keywords

    @property
    def description(self) -> str:
        return self.keyword_set.description


def _profile(timing: MealTiming, keywords: Iterable[str], window: str, description: str) -> TimingProfile:
    return TimingProfile(timing=timing, keyword_set=KeywordSet.build(keywords, description), window=window)


PRE_GAME_FOODS = _profile(
    MealTiming.PRE_GAME,
    [
        "pasta", "rice", "banana", "toast with honey", "oatmeal",
        "energy bar", "bagel", "fruit", "sports drink", "water",
        "puuro", "kaurapuuro", "riisipuuro", "pannukakku", "smoothie bowl",
        "whole grain toast", "dates", "raisins", "energy balls",
    ],
    "2-3 hours before",
    "High carbs, low fat, easy to digest",
)

DURING_GAME_FOODS = _profile(
    MealTiming.DURING_GAME,
    [
        "water", "sports drink", "banana", "orange slices",
        "energy gel", "isotonic drink", "electrolyte drink",
        "diluted juice", "coconut water", "hydration salts",
        "grape slices", "watermelon", "cantaloupe",
    ],
    "Halftime or breaks",
    "Quick energy and hydration",
)

POST_GAME_FOODS = _profile(
    MealTiming.POST_GAME,
    [
        "chocolate milk", "protein shake", "recovery drink",
        "chicken sandwich", "tuna sandwich", "protein bar",
        "greek yogurt", "nuts and fruit", "smoothie bowl",
        "rahka", "viili", "kefir", "turkey wrap", "egg sandwich",
        "quinoa salad", "cottage cheese with berries",
    ],
    "Within 30 minutes",
    "Protein and carbs for recovery",
)

RECOVERY_FOODS = _profile(
    MealTiming.RECOVERY,
    [
        "grilled chicken", "salmon", "eggs", "quinoa bowl",
        "turkey wrap", "protein smoothie", "cottage cheese",
        "lean beef", "fish and rice", "protein pancakes",
        "lohikeitto", "jauhelihakastike", "lihapullat",
        "grilled fish", "chicken salad", "beef stir fry",
        "tofu scramble", "tempeh bowl", "legume curry",
    ],
    "1-2 hours after",
    "Complete meal for muscle recovery",
)

TIMING_PROFILES = MappingProxyType({
    p.timing: p for p in (PRE_GAME_FOODS, DURING_GAME_FOODS, POST_GAME_FOODS, RECOVERY_FOODS)
})


__all__ = [
    "TimingProfile",
    "PRE_GAME_FOODS",
    "DURING_GAME_FOODS",
    "POST_GAME_FOODS",
    "RECOVERY_FOODS",
    "TIMING_PROFILES",
]
