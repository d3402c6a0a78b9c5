"""Tests for the HTTP endpoints."""

from datetime import date, time

from fastapi.testclient import TestClient

from healthy_tracker.api.app import create_app
from healthy_tracker.domain.logs import MealSlot, WaterRecord, WeightRecord
from healthy_tracker.domain.models import UserProfile
from healthy_tracker.services.metrics import compute_bmr
from tests.conftest import Repositories

DAY = date(2025, 10, 25)


def _client(container) -> TestClient:
    return TestClient(create_app(container))


def _add_user(repositories: Repositories) -> None:
    repositories.users.add(
        UserProfile(id=1, age=30, gender="M", height_cm=175, initial_weight_kg=70)
    )


def test_health_endpoint(container) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_daily_calorie_endpoint(container, repositories: Repositories) -> None:
    _add_user(repositories)
    repositories.meals.add_meal(1, DAY, MealSlot.LUNCH, [(1, 200)])

    response = _client(container).get(
        "/api/weight-log/daily-calorie",
        params={"user_id": 1, "date": "2025-10-25"},
    )

    assert response.status_code == 200
    data = response.json()
    tdee = compute_bmr(70, 175, 30, "M") * 1.2
    assert data["lunch_kcal"] == 260
    assert data["breakfast_kcal"] == 0
    assert data["remain_calorie"] == round(tdee - 260)
    assert data["tdee"] == round(tdee)


def test_daily_calorie_unknown_user(container) -> None:
    response = _client(container).get(
        "/api/weight-log/daily-calorie",
        params={"user_id": 99, "date": "2025-10-25"},
    )

    assert response.status_code == 404
    assert response.json() == {"detail": "User 99 not found"}


def test_daily_calorie_invalid_date(container) -> None:
    response = _client(container).get(
        "/api/weight-log/daily-calorie",
        params={"user_id": 99, "date": "25/10/2025"},
    )

    assert response.status_code == 400
    assert "Invalid date format" in response.json()["detail"]


def test_body_info_endpoint(container, repositories: Repositories) -> None:
    _add_user(repositories)

    response = _client(container).get(
        "/api/weight-log/body-info", params={"user_id": 1}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["weight"] == 70
    assert data["bmi"] == 22.9
    assert data["body_fat"] is None


def test_add_weight_endpoint(container, repositories: Repositories) -> None:
    _add_user(repositories)

    response = _client(container).post(
        "/api/weight-log/add",
        json={
            "user_id": 1,
            "weight": 72.5,
            "date": "2025-10-25",
            "time_of_day": "07:30",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["time"] == "07:30"
    assert data["body_fat"] is not None
    stored = repositories.weights.records[0]
    assert stored.day == DAY
    assert stored.weight_kg == 72.5


def test_add_weight_rejects_non_positive_weight(container) -> None:
    response = _client(container).post(
        "/api/weight-log/add", json={"user_id": 1, "weight": 0}
    )

    assert response.status_code == 422


def test_weight_records_endpoint(container, repositories: Repositories) -> None:
    repositories.weights.records = [
        WeightRecord(id=1, user_id=1, day=date(2025, 10, 24), weight_kg=71),
        WeightRecord(
            id=2, user_id=1, day=DAY, weight_kg=70.5, time_of_day=time(7, 5)
        ),
    ]

    response = _client(container).get(
        "/api/weight-log/records",
        params={"user_id": 1, "start": "2025-10-01", "end": "2025-10-31"},
    )

    assert response.status_code == 200
    assert response.json() == [
        {
            "date": "2025-10-25",
            "records": [{"id": 2, "time": "07:05", "weight": 70.5, "body_fat": None}],
        },
        {
            "date": "2025-10-24",
            "records": [{"id": 1, "time": "--", "weight": 71.0, "body_fat": None}],
        },
    ]


def test_water_records_today(container, repositories: Repositories) -> None:
    repositories.water.records = [
        WaterRecord(
            id=1,
            user_id=1,
            day=DAY,
            time_of_day=time(9, 15),
            drink="tea",
            amount_ml=300,
        ),
        WaterRecord(
            id=2,
            user_id=1,
            day=date(2025, 10, 24),
            time_of_day=None,
            drink="water",
            amount_ml=250,
        ),
    ]

    response = _client(container).get(
        "/api/water-log/records",
        params={"user_id": 1, "mode": "today", "date": "2025-10-25"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "date": "2025-10-25",
        "records": [{"id": 1, "time": "09:15:00", "drink": "tea", "amount": 300.0}],
    }


def test_water_records_history(container, repositories: Repositories) -> None:
    repositories.water.records = [
        WaterRecord(
            id=1, user_id=1, day=DAY, time_of_day=None, drink="water", amount_ml=250
        ),
    ]

    response = _client(container).get(
        "/api/water-log/records", params={"user_id": 1}
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data[0]["date"] == "2025-10-25"
    assert data[0]["records"][0]["time"] is None


def test_meal_records_today(container, repositories: Repositories) -> None:
    repositories.meals.add_meal(1, DAY, MealSlot.BREAKFAST, [(3, 150)])

    response = _client(container).get(
        "/api/meal-log/records",
        params={"user_id": 1, "mode": "today", "date": "2025-10-25"},
    )

    assert response.status_code == 200
    records = response.json()["records"]
    assert records["breakfast"] == [
        {"id": 1, "name": "Apple", "amount": 150.0, "calorie": 78.0}
    ]
    assert records["lunch"] == []


def test_meal_records_history(container, repositories: Repositories) -> None:
    repositories.meals.add_meal(1, DAY, MealSlot.DINNER, [(2, 100)])

    response = _client(container).get(
        "/api/meal-log/records", params={"user_id": 1, "mode": "all"}
    )

    assert response.status_code == 200
    assert response.json() == [
        {
            "date": "2025-10-25",
            "meals": [
                {
                    "type": "dinner",
                    "items": [
                        {
                            "id": 1,
                            "name": "Chicken breast",
                            "amount": 100.0,
                            "calorie": 165.0,
                        }
                    ],
                }
            ],
        }
    ]
