# scoring/food_categories.py
"""
PlayerFuel — Food Quality Categories
====================================
Keyword sets for the four quality tiers. Phrases are matched as lowercase
substrings of a meal description.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Tuple

from scoring.models import QualityTier


@dataclass(frozen=True)
class KeywordSet:
    """
    Ordered, de-duplicated lowercase phrases plus what they represent.

    A phrase listed twice is stored and counted once. The good tier lists
    "water" under both its general and hydration entries; a lone "water"
    is one good hit (tier fair, score 50), not two (tier good, score 75).
    """
    keywords: Tuple[str, ...]
    description: str

    @classmethod
    def build(cls, keywords: Iterable[str], description: str) -> "KeywordSet":
        seen = []
        for kw in keywords:
            kw = kw.lower()
            if kw not in seen:
                seen.append(kw)
        return cls(keywords=tuple(seen), description=description)

    def __len__(self) -> int:
        return len(self.keywords)


# =============================================================================
# POOR (0-25 points) — should be limited
# =============================================================================
POOR_QUALITY_FOODS = KeywordSet.build(
    [
        # Junk food
        "candy", "sweets", "chips", "soda", "cola", "burger", "fries",
        "pizza", "donut", "cake", "chocolate", "ice cream", "fast food",
        "cookies", "pastry", "fried", "deep fried", "milkshake",
        "sugary", "processed", "instant noodles",
        "white bread", "croissant", "muffin", "brownie",
        # Chains
        "mcdonald", "burger king", "kfc", "subway cookies", "taco bell",
        "hesburger", "kotipizza", "chicken wings", "onion rings",
        # Snacks and drinks
        "monster", "red bull", "gummy bears", "liquorice",
        "salmiakki", "fazer chocolate", "marabou", "haribo",
        "carbonated drink", "sprite", "fanta", "pepsi",
    ],
    "High sugar, high fat, low nutritional value",
)

# =============================================================================
# FAIR (26-50 points) — acceptable occasionally
# =============================================================================
FAIR_QUALITY_FOODS = KeywordSet.build(
    [
        "sandwich", "toast", "cereal", "juice", "smoothie",
        "pancakes", "waffles", "bagel", "crackers", "popcorn",
        "granola bar", "trail mix", "dried fruit", "jam",
        "honey", "maple syrup", "peanut butter", "cheese",
        # Nordic
        "pulla", "korvapuusti", "munkki", "laskiaispulla",
        "mämmi", "vispipuuro", "riisipuuro", "mannapuuro",
        # Healthier restaurant options
        "subway sandwich", "pizza salad", "wrap", "quesadilla",
        "pasta salad", "soup", "chili", "baked potato",
        # Kid-friendly snacks
        "fruit snacks", "rice cakes", "pretzels", "string cheese",
        "chocolate milk", "fruit juice", "sports drink diluted", "energy drink",
        "muesli", "cornflakes", "granola", "oat cookies",
    ],
    "Moderate nutritional value, okay in moderation",
)

# =============================================================================
# GOOD (51-75 points) — regular consumption
# =============================================================================
GOOD_QUALITY_FOODS = KeywordSet.build(
    [
        "vegetable", "fruit", "salad", "chicken", "fish", "rice",
        "oatmeal", "eggs", "milk", "yogurt", "nuts", "beans", "whole grain", "water",
        "turkey", "lean meat", "tuna", "salmon", "cottage cheese",
        "quinoa", "brown rice", "sweet potato", "avocado", "berries",
        "banana", "apple", "orange", "grapes", "melon",
        # Nordic
        "rye bread", "ruisleipä", "porridge", "puuro", "kalakeitto",
        "lohikeitto", "hernekeitto", "makaronilaatikko", "karjalanpiirakka",
        "lihapullat", "jauhelihakastike", "kalapuikot", "mustikka", "lakka",
        "tyrni", "peruna", "porkkana", "kaali", "sipuli",
        # Sports-friendly
        "whole wheat bread", "lean pork", "lean beef", "cod", "mackerel",
        "almonds", "walnuts", "cashews", "pumpkin seeds", "sunflower seeds",
        "strawberries", "raspberries", "blackberries", "kiwi", "pear",
        "broccoli", "cauliflower", "zucchini", "bell pepper", "tomato",
        # Hydration
        "water", "coconut water", "herbal tea", "green tea", "sparkling water",
        "low fat milk", "plant milk", "kombucha", "electrolyte water",
    ],
    "Nutritious choices supporting athletic performance",
)

# =============================================================================
# EXCELLENT (76-100 points) — optimal for athletes
# =============================================================================
EXCELLENT_QUALITY_FOODS = KeywordSet.build(
    [
        "protein", "vitamins", "balanced", "grilled", "steamed", "fresh", "organic",
        # Sports nutrition
        "protein shake", "whey protein", "recovery drink", "electrolytes",
        "sports drink", "protein bar", "bcaa", "creatine",
        "lean protein", "complex carbs", "omega-3", "antioxidants",
        "superfood", "kale", "spinach", "broccoli", "blueberries",
        "chia seeds", "flax seeds", "hemp seeds", "spirulina",
        # Pre/post game
        "pasta with vegetables", "grilled chicken salad", "salmon with rice",
        "protein smoothie", "greek yogurt", "overnight oats",
        "whole wheat pasta", "lean beef", "tofu", "tempeh",
        # Nordic athlete foods
        "kaurapuuro", "rahka", "viili", "skyr", "kefiiri",
        "siemennäkkileipä", "täysjyväleipä", "paistettu kala",
        # Supplements
        "casein protein", "amino acids", "glutamine", "beta alanine",
        "nitric oxide", "pre workout", "post workout", "mass gainer",
        "hydration mix", "isotonic drink", "hypotonic drink",
        # Timing
        "carb loading", "protein timing", "nutrient timing",
        "recovery nutrition", "endurance fuel", "power meal",
        # Premium whole foods
        "wild salmon", "grass fed beef", "free range eggs",
        "ancient grains", "fermented foods", "probiotic",
        "collagen protein", "bone broth", "matcha",
    ],
    "Optimal nutrition for peak athletic performance",
)

# Ordered worst to best
TIER_KEYWORDS = MappingProxyType({
    QualityTier.POOR: POOR_QUALITY_FOODS,
    QualityTier.FAIR: FAIR_QUALITY_FOODS,
    QualityTier.GOOD: GOOD_QUALITY_FOODS,
    QualityTier.EXCELLENT: EXCELLENT_QUALITY_FOODS,
})

TOTAL_KEYWORD_COUNT = sum(len(kw_set) for kw_set in TIER_KEYWORDS.values())


__all__ = [
    "KeywordSet",
    "POOR_QUALITY_FOODS",
    "FAIR_QUALITY_FOODS",
    "GOOD_QUALITY_FOODS",
    "EXCELLENT_QUALITY_FOODS",
    "TIER_KEYWORDS",
    "TOTAL_KEYWORD_COUNT",
]
