"""API tests for meal plans."""

from bson import ObjectId

DIET_PLAN = {
    "title": "Cutting plan",
    "meals": [
        {
            "name": "Breakfast",
            "time": "08:00",
            "items": [{"foodId": "oats", "quantityGrams": 60}, {"foodId": "skim_milk", "quantityGrams": 200}],
        }
    ],
}


async def add_plan(client, patient_id, headers, plan=DIET_PLAN):
    response = await client.post(f"/patients/{patient_id}/meal-plans", json=plan, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_add_creates_parent_and_links_patient(client, auth_headers, patient_id, db):
    body = await add_plan(client, patient_id, auth_headers)

    assert body["patientId"] == patient_id
    assert len(body["plans"]) == 1
    assert body["plans"][0]["title"] == "Cutting plan"
    assert ObjectId.is_valid(body["plans"][0]["_id"])

    patient = await db["patients"].find_one({"_id": ObjectId(patient_id)})
    assert str(patient["mealPlans"]) == body["id"]


async def test_get_meal_plans(client, auth_headers, patient_id):
    await add_plan(client, patient_id, auth_headers)

    response = await client.get(f"/patients/{patient_id}/meal-plans", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["plans"][0]["meals"][0]["items"][1]["foodId"] == "skim_milk"


async def test_get_without_plans_is_not_found(client, auth_headers, patient_id):
    response = await client.get(f"/patients/{patient_id}/meal-plans", headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {
        "statusCode": 404,
        "error": "Not Found",
        "message": "Meal plans not found for patient",
    }


async def test_patch_with_same_values_does_not_write(client, auth_headers, patient_id, db):
    body = await add_plan(client, patient_id, auth_headers)
    plan_id = body["plans"][0]["_id"]
    before = await db["meal_plans"].find_one({"_id": ObjectId(body["id"])})

    response = await client.patch(
        f"/patients/{patient_id}/meal-plans/{plan_id}",
        json={"title": DIET_PLAN["title"], "meals": DIET_PLAN["meals"]},
        headers=auth_headers,
    )

    assert response.status_code == 200
    after = await db["meal_plans"].find_one({"_id": ObjectId(body["id"])})
    assert after["updatedAt"] == before["updatedAt"]
    assert response.json() == body


async def test_patch_keeps_order_and_siblings(client, auth_headers, patient_id):
    await add_plan(client, patient_id, auth_headers)
    await add_plan(client, patient_id, auth_headers, {"title": "Maintenance", "meals": []})
    body = await add_plan(client, patient_id, auth_headers, {"title": "Bulking", "meals": []})
    target = body["plans"][1]

    response = await client.patch(
        f"/patients/{patient_id}/meal-plans/{target['_id']}",
        json={"title": "Maintenance v2"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    plans = response.json()["plans"]
    assert [plan["title"] for plan in plans] == ["Cutting plan", "Maintenance v2", "Bulking"]
    assert plans[1]["_id"] == target["_id"]
    assert plans[0] == body["plans"][0]
    assert plans[2] == body["plans"][2]


async def test_patch_unknown_plan_is_not_found(client, auth_headers, patient_id):
    await add_plan(client, patient_id, auth_headers)

    response = await client.patch(
        f"/patients/{patient_id}/meal-plans/{ObjectId()}",
        json={"title": "Ghost"},
        headers=auth_headers,
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Diet plan not found for patient"


async def test_patch_rejects_malformed_ids(client, auth_headers, patient_id):
    response = await client.patch(f"/patients/{patient_id}/meal-plans/xyz", json={"title": "A"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid plan id"

    response = await client.patch(f"/patients/xyz/meal-plans/{ObjectId()}", json={"title": "A"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid patient id"


async def test_patch_rejects_null_and_bad_time(client, auth_headers, patient_id):
    body = await add_plan(client, patient_id, auth_headers)
    plan_id = body["plans"][0]["_id"]

    response = await client.patch(
        f"/patients/{patient_id}/meal-plans/{plan_id}", json={"title": None}, headers=auth_headers
    )
    assert response.status_code == 400

    response = await client.patch(
        f"/patients/{patient_id}/meal-plans/{plan_id}",
        json={"meals": [{"name": "Dinner", "time": "25:00", "items": []}]},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json()["errors"]


async def test_add_rejects_unknown_food(client, auth_headers, patient_id):
    plan = {"title": "Bad", "meals": [{"name": "Lunch", "time": "12:00", "items": [{"foodId": "pizza", "quantityGrams": 1}]}]}

    response = await client.post(f"/patients/{patient_id}/meal-plans", json=plan, headers=auth_headers)

    assert response.status_code == 400


async def test_delete_plan(client, auth_headers, patient_id):
    await add_plan(client, patient_id, auth_headers)
    body = await add_plan(client, patient_id, auth_headers, {"title": "Second", "meals": []})

    response = await client.delete(
        f"/patients/{patient_id}/meal-plans/{body['plans'][0]['_id']}", headers=auth_headers
    )

    assert response.status_code == 200
    assert [plan["title"] for plan in response.json()["plans"]] == ["Second"]

    response = await client.delete(
        f"/patients/{patient_id}/meal-plans/{body['plans'][0]['_id']}", headers=auth_headers
    )
    assert response.status_code == 404


async def test_requires_authentication(client, patient_id):
    response = await client.get(f"/patients/{patient_id}/meal-plans")
    assert response.status_code == 401


async def test_other_users_are_forbidden(client, auth_headers, other_auth_headers, patient_id):
    await add_plan(client, patient_id, auth_headers)

    response = await client.get(f"/patients/{patient_id}/meal-plans", headers=other_auth_headers)

    assert response.status_code == 403
    assert response.json()["message"] == "Not allowed"


async def test_unknown_patient_is_not_found(client, auth_headers):
    response = await client.post(f"/patients/{ObjectId()}/meal-plans", json=DIET_PLAN, headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Patient not found"
