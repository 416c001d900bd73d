"""Tests for the HTTP API."""

from uuid import uuid4

from fastapi.testclient import TestClient

from fitness_tracker.api.app import create_app
from tests.conftest import USER_ID

HEADERS = {"X-User-Id": USER_ID}
PROFILE_STATS = {
    "current_weight": 180,
    "height_feet": 5,
    "height_inches": 10,
    "age": 30,
    "gender": "male",
    "activity_level": "moderate",
    "goal_weight": 170,
    "goal_weeks": 10,
}


def _client(container) -> TestClient:
    return TestClient(create_app(container))


def _rice(client: TestClient) -> dict[str, object]:
    response = client.get("/foods/search", params={"q": "rice"})
    assert response.status_code == 200
    return response.json()["foods"][0]


def test_health(container) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_requires_user_header(container) -> None:
    client = _client(container)

    assert client.get("/profile").status_code == 401
    assert client.get("/meals", headers={"X-User-Id": "  "}).status_code == 401


def test_search_lists_common_foods_first(container) -> None:
    client = _client(container)

    response = client.get("/foods/search", params={"q": "yogurt"})

    assert response.status_code == 200
    assert [food["id"] for food in response.json()["foods"]] == ["off:0001"]
    assert _rice(client)["id"] == "rice"


def test_barcode_lookup(container, off_client) -> None:
    client = _client(container)

    found = client.get("/foods/barcode/0123")
    off_client.product_payload = {"status": 0}
    missing = client.get("/foods/barcode/0999")

    assert found.status_code == 200
    assert found.json()["food"]["name"] == "Peanut Butter Cups"
    assert missing.status_code == 404
    assert missing.json()["code"] == "E_NOT_FOUND"


def test_preview_and_log_meal(container) -> None:
    client = _client(container)
    rice = _rice(client)
    portion = {"food": rice, "quantity": "2", "unit": "cup"}

    preview = client.post("/meals/preview", json=portion, headers=HEADERS)
    created = client.post(
        "/meals",
        json={**portion, "meal_type": "lunch", "day": "2024-03-12"},
        headers=HEADERS,
    )
    listed = client.get("/meals", params={"day": "2024-03-12"}, headers=HEADERS)

    assert preview.status_code == 200
    assert preview.json()["grams"] == 316
    assert created.status_code == 201
    meal = created.json()["meal"]
    assert meal["grams_consumed"] == 316
    assert meal["nutrition"] == preview.json()["nutrition"]
    assert meal["nutrition"]["calories"] == 411
    body = listed.json()
    assert body["day"] == "2024-03-12"
    assert len(body["meals"]) == 1
    assert body["totals"]["calories"] == 411
    assert body["totals"]["meal_count"] == 1


def test_log_meal_rejects_bad_quantity(container) -> None:
    client = _client(container)
    rice = _rice(client)

    response = client.post(
        "/meals",
        json={"food": rice, "quantity": "abc", "unit": "cup", "meal_type": "lunch"},
        headers=HEADERS,
    )

    assert response.status_code == 422
    assert response.json()["code"] == "E_INVALID_INPUT"


def test_log_meal_rejects_invalid_food(container) -> None:
    client = _client(container)
    food = {"id": "x", "name": "X", "calories": 10, "serving_grams": 0}

    response = client.post(
        "/meals",
        json={"food": food, "quantity": 1, "unit": "g", "meal_type": "lunch"},
        headers=HEADERS,
    )

    assert response.status_code == 422
    assert response.json()["code"] == "E_INVALID_INPUT"


def test_preview_rejects_non_finite_food(container) -> None:
    client = _client(container)
    rice = _rice(client)

    response = client.post(
        "/meals/preview",
        json={"food": {**rice, "calories": "NaN"}, "quantity": 1, "unit": "g"},
        headers=HEADERS,
    )

    assert response.status_code == 422
    assert response.json()["code"] == "E_INVALID_INPUT"


def test_profile_rejects_non_finite_weight(container) -> None:
    client = _client(container)

    response = client.patch("/profile", json={"current_weight": "inf"}, headers=HEADERS)
    recommendation = client.get("/profile/recommendation", headers=HEADERS)

    assert response.status_code == 422
    assert response.json()["code"] == "E_INVALID_INPUT"
    assert recommendation.status_code == 200


def test_delete_unknown_meal(container) -> None:
    response = _client(container).delete(f"/meals/{uuid4()}", headers=HEADERS)

    assert response.status_code == 404
    assert response.json()["code"] == "E_NOT_FOUND"


def test_delete_meal(container) -> None:
    client = _client(container)
    rice = _rice(client)
    created = client.post(
        "/meals",
        json={"food": rice, "quantity": 100, "unit": "g", "meal_type": "dinner"},
        headers=HEADERS,
    )
    meal_id = created.json()["meal"]["id"]

    deleted = client.delete(f"/meals/{meal_id}", headers=HEADERS)
    listed = client.get("/meals", headers=HEADERS)

    assert deleted.status_code == 204
    assert listed.json()["meals"] == []


def test_recipe_flow(container) -> None:
    client = _client(container)
    rice = _rice(client)

    created = client.post(
        "/recipes",
        json={
            "name": "Rice bowl",
            "ingredients": [{"food": rice, "quantity": 1, "unit": "cup"}],
        },
        headers=HEADERS,
    )
    recipe = created.json()["recipe"]
    logged = client.post(
        f"/recipes/{recipe['id']}/log", json={"day": "2024-03-12"}, headers=HEADERS
    )
    listed = client.get("/recipes", headers=HEADERS)
    meals = client.get("/meals", params={"day": "2024-03-12"}, headers=HEADERS)

    assert created.status_code == 201
    assert recipe["default_meal_type"] == "breakfast"
    assert recipe["totals"]["calories"] == 205
    assert logged.status_code == 201
    assert logged.json()["meals"][0]["grams_consumed"] == 158
    assert len(listed.json()["recipes"]) == 1
    assert meals.json()["meals"][0]["meal_type"] == "breakfast"


def test_edit_recipe(container) -> None:
    client = _client(container)
    rice = _rice(client)
    created = client.post(
        "/recipes",
        json={
            "name": "Rice bowl",
            "ingredients": [{"food": rice, "quantity": 1, "unit": "cup"}],
        },
        headers=HEADERS,
    )
    recipe_id = created.json()["recipe"]["id"]
    edit = {
        "name": "Big rice bowl",
        "ingredients": [{"food": rice, "quantity": 2, "unit": "cup"}],
        "default_meal_type": "dinner",
    }

    updated = client.put(f"/recipes/{recipe_id}", json=edit, headers=HEADERS)
    stranger = client.put(
        f"/recipes/{recipe_id}", json=edit, headers={"X-User-Id": "someone-else"}
    )
    unknown = client.put(f"/recipes/{uuid4()}", json=edit, headers=HEADERS)
    listed = client.get("/recipes", headers=HEADERS).json()["recipes"]

    assert updated.status_code == 200
    recipe = updated.json()["recipe"]
    assert recipe["id"] == recipe_id
    assert recipe["name"] == "Big rice bowl"
    assert recipe["default_meal_type"] == "dinner"
    assert recipe["totals"]["calories"] == 411
    assert stranger.status_code == 404
    assert unknown.status_code == 404
    assert [item["name"] for item in listed] == ["Big rice bowl"]


def test_profile_recommendation_flow(container) -> None:
    client = _client(container)

    empty = client.get("/profile/recommendation", headers=HEADERS)
    updated = client.patch("/profile", json=PROFILE_STATS, headers=HEADERS)
    recommendation = client.get("/profile/recommendation", headers=HEADERS)
    applied = client.post("/profile/recommendation/apply", headers=HEADERS)

    assert empty.json() == {"recommendation": None}
    assert updated.status_code == 200
    profile = updated.json()["profile"]
    assert profile["goal_type"] == "lose"
    assert profile["activity_description"].startswith("Moderate exercise")
    calculation = recommendation.json()["recommendation"]["calculation"]
    assert calculation == {
        "bmr": 1783,
        "tdee": 2763,
        "target_calories": 2263,
        "deficit": 500,
        "weekly_change": -1.0,
    }
    assert applied.json()["applied"] is True
    assert applied.json()["profile"]["calorie_goal"] == 2263
    assert applied.json()["profile"]["protein_goal"] == 180


def test_profile_update_validation(container) -> None:
    client = _client(container)

    response = client.patch("/profile", json={"height_inches": 14}, headers=HEADERS)

    assert response.status_code == 422
    assert response.json()["code"] == "E_INVALID_INPUT"


def test_stats_today_and_week(container) -> None:
    client = _client(container)
    rice = _rice(client)
    client.post(
        "/meals",
        json={"food": rice, "quantity": 100, "unit": "g", "meal_type": "lunch"},
        headers=HEADERS,
    )
    client.post(
        "/meals",
        json={
            "food": rice,
            "quantity": 200,
            "unit": "g",
            "meal_type": "lunch",
            "day": "2024-03-13",
        },
        headers=HEADERS,
    )

    today = client.get("/stats/today", headers=HEADERS).json()
    week = client.get("/stats/week", params={"start": "2024-03-13"}, headers=HEADERS)

    assert today["totals"]["calories"] == 130
    assert today["progress"]["goal"] == 2000
    assert today["progress"]["remaining"] == 1870
    body = week.json()
    assert body["week"]["start"] == "2024-03-10"
    assert body["week"]["total"]["calories"] == 260
    assert len(body["week"]["daily"]) == 7
    assert body["is_current_week"] is False


def test_workout_endpoints(container) -> None:
    client = _client(container)

    created = client.post(
        "/workouts",
        json={
            "name": "Legs",
            "day": "2024-03-12",
            "duration_minutes": 40,
            "exercises": [
                {
                    "exercise_id": "legs-8",
                    "sets": [{"reps": 5, "weight": 225, "completed": True}],
                }
            ],
        },
        headers=HEADERS,
    )
    unknown = client.post(
        "/workouts",
        json={"exercises": [{"exercise_id": "legs-99"}]},
        headers=HEADERS,
    )
    recent = client.get("/workouts/recent", headers=HEADERS)

    assert created.status_code == 201
    assert created.json()["workout"]["total_volume"] == 1125
    assert created.json()["workout"]["completed_sets"] == 1
    assert unknown.status_code == 404
    assert len(recent.json()["workouts"]) == 1


def test_exercise_catalog_endpoint(container) -> None:
    client = _client(container)

    chest = client.get(
        "/exercises", params={"category": "chest", "max_difficulty": "beginner"}
    )
    invalid = client.get("/exercises", params={"category": "wings"})

    assert len(chest.json()["exercises"]) == 3
    assert invalid.status_code == 422


def test_plan_endpoints(container) -> None:
    client = _client(container)

    plans = client.get(
        "/plans", params={"difficulty": "intermediate", "days_per_week": 5}
    )
    started = client.post(
        "/plans/beginner-fullbody/start",
        json={"start_date": "2024-03-10"},
        headers=HEADERS,
    )
    advanced = client.post("/plans/active/complete-day", headers=HEADERS)
    active = client.get("/plans/active", headers=HEADERS)
    cancelled = client.delete("/plans/active", headers=HEADERS)
    after_cancel = client.post("/plans/active/complete-day", headers=HEADERS)

    assert plans.json()["suggested"]["id"] == "intermediate-ppl"
    assert started.status_code == 201
    assert started.json()["active"]["current_day"]["name"] == "Full Body A"
    assert advanced.json()["active"]["progress"]["current_day"] == 2
    assert active.json()["active"]["week_number"] == 1
    assert cancelled.status_code == 204
    assert after_cancel.status_code == 404
    assert client.get("/plans/unknown").status_code == 404
