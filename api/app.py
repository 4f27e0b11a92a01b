"""
PlayerFuel — FastAPI Backend
============================
Thin HTTP surface over the nutrition scoring engine for the meal-logging app.
"""

import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, Dict, Any, List

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
import uvicorn

from scoring.config import SETTINGS
from scoring.food_analyzer import analyze, recommend
from scoring.food_categories import TIER_KEYWORDS, TOTAL_KEYWORD_COUNT
from scoring.timing_foods import TIMING_PROFILES
from scoring.age_profiles import AGE_SPECIFIC_NEEDS, get_age_group
from scoring.models import UnknownContextTagError

APP_VERSION = "1.0.0"


# =============================================================================
# PYDANTIC MODELS
# =============================================================================
class AnalyzeRequest(BaseModel):
    description: str = Field("", max_length=10000)
    meal_timing: Optional[str] = None
    player_age: Optional[int] = Field(None, ge=0, le=120)
    age_group: Optional[str] = None


class AnalyzeResponse(BaseModel):
    quality_tier: str
    score: int
    suggestions: List[str]
    age_bonus: Optional[int] = None
    age_group: Optional[str] = None
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())


class RecommendationsResponse(BaseModel):
    time_of_day: str
    is_training_day: bool
    recommendations: List[str]
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())


class HealthResponse(BaseModel):
    status: str
    system: str
    keywords: Dict[str, int]
    strict_tags: bool
    timestamp: str


# =============================================================================
# APP SETUP
# =============================================================================
app = FastAPI(
    title="PlayerFuel Scoring API",
    version=APP_VERSION,
    description="Meal quality scoring and recommendations for young athletes",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# ENDPOINTS
# =============================================================================
@app.get("/")
async def root():
    return {
        "system": "PlayerFuel Scoring API",
        "version": APP_VERSION,
        "docs": "/docs",
    }


@app.get("/api/v1/health", response_model=HealthResponse)
async def health_check():
    keywords = {tier.value: len(kw_set) for tier, kw_set in TIER_KEYWORDS.items()}
    keywords["total"] = TOTAL_KEYWORD_COUNT
    return HealthResponse(
        status="healthy",
        system="PlayerFuel Scoring API",
        keywords=keywords,
        strict_tags=SETTINGS.strict_tags,
        timestamp=datetime.now().isoformat(),
    )


# -----------------------------------------------------------------------------
# Nutrition
# -----------------------------------------------------------------------------
@app.post("/api/v1/nutrition/analyze", response_model=AnalyzeResponse)
async def analyze_meal(request: AnalyzeRequest):
    """Score a meal description. Derives the age group from player_age when missing."""
    print(f"🥗 Analyzing meal: {request.description[:50]}")

    age_group = request.age_group
    if not age_group and request.player_age is not None:
        age_group = get_age_group(request.player_age).value

    try:
        result = analyze(
            request.description,
            timing=request.meal_timing,
            player_age=request.player_age,
            age_group=age_group,
        )
    except UnknownContextTagError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return AnalyzeResponse(age_group=age_group, **result.to_dict())


@app.get("/api/v1/nutrition/recommendations", response_model=RecommendationsResponse)
async def get_recommendations(
    time_of_day: str = Query("morning"),
    is_training_day: bool = Query(False),
    last_meal_quality: Optional[str] = Query(None),
):
    try:
        recommendations = recommend(time_of_day, is_training_day, last_meal_quality)
    except UnknownContextTagError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return RecommendationsResponse(
        time_of_day=time_of_day,
        is_training_day=is_training_day,
        recommendations=recommendations,
    )


@app.get("/api/v1/nutrition/taxonomy")
async def get_taxonomy():
    """Reference tables: tier keyword counts, timing windows, age-group needs."""
    return {
        "tiers": {
            tier.value: {"description": kw_set.description, "keyword_count": len(kw_set)}
            for tier, kw_set in TIER_KEYWORDS.items()
        },
        "timing": {
            timing.value: {
                "window": profile.window,
                "description": profile.description,
                "keyword_count": len(profile.keyword_set),
            }
            for timing, profile in TIMING_PROFILES.items()
        },
        "age_groups": {
            group.value: {
                "calories_per_day": needs.calories_per_day,
                "protein_grams_per_kg": needs.protein_grams_per_kg,
                "focus": needs.focus,
            }
            for group, needs in AGE_SPECIFIC_NEEDS.items()
        },
        "total_keywords": TOTAL_KEYWORD_COUNT,
    }


# =============================================================================
# MAIN
# =============================================================================
if __name__ == "__main__":
    print("\n" + "=" * 50)
    print(f"🚀 PLAYERFUEL SCORING API v{APP_VERSION}")
    print("=" * 50)
    print(f"   • Keywords:    {TOTAL_KEYWORD_COUNT}")
    print(f"   • Strict tags: {'✅' if SETTINGS.strict_tags else '❌'}")
    print("=" * 50)
    print(f"🔗 API Docs: http://localhost:{SETTINGS.api_port}/docs")
    print("=" * 50 + "\n")

    uvicorn.run(app, host=SETTINGS.api_host, port=SETTINGS.api_port)
