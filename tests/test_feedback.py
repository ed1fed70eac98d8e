"""AI feedback route."""

API = "/api/feedback"


async def test_record_and_list(client):
    response = await client.post(
        API,
        json={
            "responseId": "recipe-123",
            "responseType": "recipe",
            "rating": "positive",
            "comment": "Tasty",
            "context": {"cuisine": "Indian"},
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["feedbackId"]

    listed = (await client.get(API)).json()
    assert listed["count"] == 1
    item = listed["feedback"][0]
    assert item["responseId"] == "recipe-123"
    assert item["responseType"] == "recipe"
    assert item["rating"] == "positive"
    assert item["context"] == {"cuisine": "Indian"}
    assert item["timestamp"]


async def test_missing_ids(client):
    response = await client.post(API, json={"rating": "negative"})
    assert response.status_code == 400
    assert "responseId" in response.json()["error"]


async def test_invalid_rating(client):
    response = await client.post(API, json={"responseId": "r", "responseType": "t", "rating": "meh"})
    assert response.status_code == 422
