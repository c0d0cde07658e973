"""API tests for the food catalog and service endpoints."""

import logging

from schemas.enums import Food
from utils.logger import setup_logger


async def test_list_foods(client):
    response = await client.get("/foods")

    assert response.status_code == 200
    foods = response.json()
    assert len(foods) == 20
    assert {food["id"] for food in foods} == {food.value for food in Food}
    assert foods[0] == {
        "id": "chicken_breast",
        "name": "Cooked chicken breast",
        "macrosPer100g": {"protein": 31, "carbs": 0, "fat": 3.6, "kcal": 165},
    }


async def test_get_food_by_id(client):
    response = await client.get("/foods/olive_oil")

    assert response.status_code == 200
    assert response.json()["macrosPer100g"]["fat"] == 100


async def test_get_unknown_food(client):
    response = await client.get("/foods/pizza")

    assert response.status_code == 404
    assert response.json()["message"] == "Food not found"


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_setup_logger_attaches_one_handler():
    first = setup_logger("dietplan.test_logger")
    second = setup_logger("dietplan.test_logger")

    assert first is second
    assert len(second.handlers) == 1
    assert isinstance(second.handlers[0], logging.StreamHandler)
