# unit_tests/test_api_app.py
"""
Unit Tests for the Scoring API
==============================
Run with: python -m pytest unit_tests/test_api_app.py -v
"""

import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient

from api.app import app

client = TestClient(app)


def test_root_and_health():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["system"] == "PlayerFuel Scoring API"

    response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["keywords"]["total"] == sum(
        v for k, v in data["keywords"].items() if k != "total"
    )


def test_analyze_meal():
    response = client.post(
        "/api/v1/nutrition/analyze",
        json={"description": "protein shake with banana", "meal_timing": "post-game"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["quality_tier"] == "excellent"
    assert data["score"] == 100
    assert data["suggestions"][0] == "Excellent recovery meal!"
    assert data["age_bonus"] is None
    assert data["age_group"] is None


def test_analyze_derives_age_group():
    response = client.post(
        "/api/v1/nutrition/analyze",
        json={"description": "", "player_age": 11},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["age_group"] == "10-12"
    assert data["score"] == 25
    assert data["age_bonus"] == 0
    assert data["suggestions"][-1] == "Remember to drink water with your meal!"


def test_analyze_unknown_tags_are_ignored():
    response = client.post(
        "/api/v1/nutrition/analyze",
        json={"description": "pasta with chicken", "meal_timing": "brunch", "age_group": "99-100"},
    )
    assert response.status_code == 200
    assert response.json()["score"] == 50


def test_analyze_rejects_bad_age():
    response = client.post(
        "/api/v1/nutrition/analyze",
        json={"description": "pasta", "player_age": -3},
    )
    assert response.status_code == 422


def test_recommendations():
    response = client.get(
        "/api/v1/nutrition/recommendations",
        params={"time_of_day": "morning", "is_training_day": "true", "last_meal_quality": "poor"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["is_training_day"] is True
    assert len(data["recommendations"]) == 5
    assert data["recommendations"][0].startswith("WARNING")


def test_taxonomy():
    response = client.get("/api/v1/nutrition/taxonomy")
    assert response.status_code == 200
    data = response.json()
    assert list(data["tiers"]) == ["poor", "fair", "good", "excellent"]
    assert data["timing"]["post-game"]["window"] == "Within 30 minutes"
    assert data["age_groups"]["16-18"]["calories_per_day"] == 2800
