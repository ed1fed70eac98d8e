"""Recipe generation: prompt building, JSON extraction, fallback set and routes."""

import json
import random

import pytest

from vitalai.core.errors import LLMConfigurationError, LLMResponseError
from vitalai.core.recipe_data import INDIAN_FOOD_IMAGES, MOCK_INDIAN_RECIPES
from vitalai.schemas.recipes import IngredientRecipeRequest, RecipeSuggestionRequest
from vitalai.services import recipes

GENERATED = {
    "recipes": [
        {"title": "Chana Masala", "prepTime": 30, "calories": 400},
        {"title": "Aloo Gobi", "prepTime": 25, "calories": 250},
    ]
}


class TestPrompt:
    def test_includes_every_filter(self):
        req = RecipeSuggestionRequest(
            dietType=["vegetarian"],
            mealType="dinner",
            excludeIngredients=["peanuts"],
            maxPrepTime=30,
        )
        prompt = recipes.build_recipe_prompt(req)
        assert prompt.startswith(
            "Generate 3 Indian cuisine recipes suitable for vegetarian diet for dinner "
            "without peanuts that can be prepared in under 30 minutes"
        )
        assert '"spiceLevel"' in prompt

    def test_ingredient_prompt_lists_ingredients(self):
        req = IngredientRecipeRequest(ingredients=["spinach", "paneer"], mealType="lunch")
        prompt = recipes.build_ingredient_prompt(req)
        assert "spinach, paneer" in prompt
        assert "Dietary preferences: None specified" in prompt
        assert "Exclude these ingredients" not in prompt


class TestExtractJson:
    def test_plain_json(self):
        assert recipes.extract_json('{"recipes": []}') == {"recipes": []}

    def test_fenced_json(self):
        text = 'Here you go:\n```json\n{"recipes": [{"title": "Dal"}]}\n```\nEnjoy!'
        assert recipes.extract_json(text) == {"recipes": [{"title": "Dal"}]}

    def test_bare_fence(self):
        text = '```\n{"recipes": [{"title": "Dal"}]}\n```'
        assert recipes.extract_json(text)["recipes"][0]["title"] == "Dal"

    def test_object_inside_prose(self):
        text = 'Sure! {"recipes": [{"title": "Dal"}]} Let me know if you need more.'
        assert recipes.extract_json(text)["recipes"][0]["title"] == "Dal"

    def test_no_json_raises(self):
        with pytest.raises(LLMResponseError):
            recipes.extract_json("I cannot help with that.")


def test_enrich_recipes_assigns_ids_and_images():
    enriched = recipes.enrich_recipes(GENERATED["recipes"], now_ms=1700000000000, rng=random.Random(0))
    assert [r["id"] for r in enriched] == ["recipe-1700000000000-0", "recipe-1700000000000-1"]
    assert all(r["imageUrl"] in INDIAN_FOOD_IMAGES for r in enriched)
    assert enriched[0]["title"] == "Chana Masala"


def test_mock_recipes_is_a_copy():
    body = recipes.mock_recipes("boom")
    assert body["_source"] == "mock"
    assert body["_error"] == "boom"
    body["recipes"][0]["title"] = "changed"
    assert MOCK_INDIAN_RECIPES[0]["title"] == "Butter Chicken"


class TestSuggestRecipes:
    async def test_generated_recipes(self, fake_gemini):
        fake_gemini.responses = [f"```json\n{json.dumps(GENERATED)}\n```"]
        body = await recipes.suggest_recipes(fake_gemini, RecipeSuggestionRequest())
        assert body["_source"] == "gemini"
        assert len(body["recipes"]) == 2
        assert all(r["id"].startswith("recipe-") for r in body["recipes"])

    @pytest.mark.parametrize(
        "response",
        [
            LLMConfigurationError("Gemini API key is missing"),
            LLMResponseError("Gemini API error: 500"),
            "not json at all",
            '{"recipes": []}',
            '{"something": "else"}',
            '{"recipes": ["Butter chicken", "Dal"]}',
            '{"recipes": [{"title": "Dal"}, 42]}',
            '["Butter chicken"]',
        ],
    )
    async def test_falls_back_to_mock_set(self, fake_gemini, response):
        fake_gemini.responses = [response]
        body = await recipes.suggest_recipes(fake_gemini, RecipeSuggestionRequest())
        assert body["_source"] == "mock"
        assert len(body["recipes"]) == len(MOCK_INDIAN_RECIPES) > 0
        assert "_error" in body


class TestRecipesFromIngredients:
    async def test_strips_fences_and_fills_missing_ids(self, fake_gemini):
        data = {"recipes": [{"id": "kept", "name": "Palak Paneer"}, {"name": "Saag"}]}
        fake_gemini.responses = [f"```json\n{json.dumps(data)}\n```"]
        req = IngredientRecipeRequest(ingredients=["spinach"], responseId="abc")
        body = await recipes.recipes_from_ingredients(fake_gemini, req)
        assert [r["id"] for r in body["recipes"]] == ["kept", "recipe-abc-1"]

    async def test_invalid_json_raises(self, fake_gemini):
        fake_gemini.responses = ["Here are some recipes: pasta, salad"]
        with pytest.raises(LLMResponseError):
            await recipes.recipes_from_ingredients(
                fake_gemini, IngredientRecipeRequest(ingredients=["spinach"])
            )


class TestRoutes:
    async def test_recipes_route_without_body_uses_mock_on_failure(self, client):
        response = await client.post("/api/gemini/recipes")
        assert response.status_code == 200
        body = response.json()
        assert body["_source"] == "mock"
        assert body["recipes"]

    async def test_recipes_route_falls_back_when_items_are_not_objects(self, client, fake_gemini):
        fake_gemini.responses = ['{"recipes": ["Butter chicken", "Dal"]}']
        response = await client.post("/api/gemini/recipes", json={})
        assert response.status_code == 200
        body = response.json()
        assert body["_source"] == "mock"
        assert len(body["recipes"]) == len(MOCK_INDIAN_RECIPES)

    async def test_indian_cuisine_route_forces_cuisine(self, client, fake_gemini):
        fake_gemini.responses = [json.dumps(GENERATED)]
        response = await client.post("/api/gemini/indian-cuisine", json={"cuisine": "Thai", "mealType": "lunch"})
        assert response.status_code == 200
        assert response.json()["_source"] == "gemini"
        assert fake_gemini.prompts[0].startswith("Generate 3 Indian cuisine recipes for lunch")

    async def test_from_ingredients_requires_ingredients(self, client):
        response = await client.post("/api/recipes/from-ingredients", json={"ingredients": []})
        assert response.status_code == 400

    async def test_from_ingredients_requires_key(self, client, fake_gemini):
        fake_gemini.api_key = ""
        response = await client.post("/api/recipes/from-ingredients", json={"ingredients": ["rice"]})
        assert response.status_code == 500

    async def test_from_ingredients_sets_cookie(self, client, fake_gemini):
        fake_gemini.responses = [json.dumps({"recipes": [{"name": "Khichdi"}]})]
        response = await client.post(
            "/api/recipes/from-ingredients",
            json={"ingredients": ["rice", "lentils"], "responseId": "resp-1"},
        )
        assert response.status_code == 200
        assert response.json()["recipes"][0]["id"] == "recipe-resp-1-0"
        assert response.cookies.get("lastRecipeResponse") == "resp-1"

    async def test_from_ingredients_parse_failure(self, client, fake_gemini):
        fake_gemini.responses = ["nope"]
        response = await client.post("/api/recipes/from-ingredients", json={"ingredients": ["rice"]})
        assert response.status_code == 500
        assert response.json()["error"] == "Failed to parse AI response"

    async def test_gemini_health(self, client, fake_gemini):
        fake_gemini.responses = ["Hello!"]
        response = await client.get("/api/health/gemini")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    async def test_gemini_health_rejects_malformed_key(self, client, fake_gemini):
        fake_gemini.api_key = "sk-not-google"
        response = await client.get("/api/health/gemini")
        assert response.status_code == 400
