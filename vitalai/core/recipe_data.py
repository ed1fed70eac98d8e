"""Static recipe data: image pool for generated recipes and the fallback recipe set.

The fallback set is what /api/gemini/recipes returns when generation fails,
so it must never be empty.
"""

_IMG = "https://images.unsplash.com/photo-{}?ixlib=rb-1.2.1&auto=format&fit=crop&w=500&q=60"

# ── Image pool assigned to generated recipes ──
INDIAN_FOOD_IMAGES: list[str] = [
    _IMG.format("1585937421612-70a008356fbe"),  # Butter Chicken
    _IMG.format("1617692855027-33b14f061079"),  # Biryani
    _IMG.format("1565557623262-b51c2513a641"),  # Dosa
    _IMG.format("1631916969933-bcd1ab93edda"),  # Paneer Tikka
    _IMG.format("1613292443284-8d10ef9383fe"),  # Samosa
    _IMG.format("1601050690597-df0568f70950"),  # Curry
    _IMG.format("1505253758473-96b7015fcd40"),  # Naan
]

# ── Fallback recipes ──
MOCK_INDIAN_RECIPES: list[dict] = [
    {
        "id": "indian-recipe-1",
        "title": "Butter Chicken",
        "description": "Creamy tomato curry with tender chicken pieces, a classic North Indian dish.",
        "prepTime": 40,
        "calories": 550,
        "protein": 35,
        "carbs": 30,
        "fat": 30,
        "spiceLevel": "medium",
        "tags": ["high-protein", "north-indian", "chicken", "creamy"],
        "imageUrl": INDIAN_FOOD_IMAGES[0],
        "ingredients": [
            "500g boneless chicken, cut into pieces",
            "2 tbsp butter",
            "1 large onion, finely chopped",
            "2 tbsp ginger-garlic paste",
            "2 green chilies, slit",
            "1 cup tomato puree",
            "1 tsp red chili powder",
            "1 tsp garam masala",
            "1/2 tsp turmeric powder",
            "1/2 cup heavy cream",
            "Salt to taste",
            "Fresh coriander for garnish",
        ],
        "instructions": [
            "Marinate chicken with yogurt, salt, and spices for 30 minutes.",
            "Heat butter in a pan and sauté onions until golden brown.",
            "Add ginger-garlic paste and green chilies, cook for 2 minutes.",
            "Add tomato puree and cook until oil separates.",
            "Add chicken and cook for 15 minutes until tender.",
            "Stir in cream and simmer for 5 minutes.",
            "Garnish with fresh coriander and serve hot with naan or rice.",
        ],
    },
    {
        "id": "indian-recipe-2",
        "title": "Masala Dosa",
        "description": "Crispy fermented crepe filled with spiced potato filling, a South Indian breakfast staple.",
        "prepTime": 30,
        "calories": 350,
        "protein": 8,
        "carbs": 60,
        "fat": 10,
        "spiceLevel": "mild",
        "tags": ["vegetarian", "south-indian", "breakfast", "gluten-free"],
        "imageUrl": INDIAN_FOOD_IMAGES[2],
        "ingredients": [
            "2 cups rice",
            "1 cup urad dal (black gram)",
            "1/4 tsp fenugreek seeds",
            "Salt to taste",
            "4 potatoes, boiled and mashed",
            "1 onion, finely chopped",
            "1 tsp mustard seeds",
            "1 tsp cumin seeds",
            "2 green chilies, chopped",
            "1/2 tsp turmeric powder",
            "Few curry leaves",
            "Oil for cooking",
        ],
        "instructions": [
            "Wash and soak rice and dal separately for 6 hours.",
            "Grind them into a smooth batter and ferment overnight.",
            "For the filling, heat oil and add mustard seeds, cumin, curry leaves.",
            "Add onions, green chilies, and sauté until golden.",
            "Add turmeric, potatoes, and salt. Mix well.",
            "Heat a flat pan, pour a ladleful of batter and spread in a circular motion.",
            "Drizzle oil around the edges and cook until golden brown.",
            "Place potato filling in the center, fold, and serve hot with coconut chutney and sambar.",
        ],
    },
    {
        "id": "indian-recipe-3",
        "title": "Paneer Tikka",
        "description": "Grilled cottage cheese cubes marinated in spicy yogurt, a popular vegetarian appetizer.",
        "prepTime": 25,
        "calories": 320,
        "protein": 18,
        "carbs": 12,
        "fat": 22,
        "spiceLevel": "hot",
        "tags": ["vegetarian", "appetizer", "high-protein", "north-indian"],
        "imageUrl": INDIAN_FOOD_IMAGES[3],
        "ingredients": [
            "250g paneer (cottage cheese), cut into cubes",
            "1 bell pepper, cut into squares",
            "1 onion, cut into squares",
            "1/2 cup yogurt",
            "1 tbsp ginger-garlic paste",
            "1 tsp red chili powder",
            "1/2 tsp garam masala",
            "1/2 tsp chaat masala",
            "1/4 tsp turmeric powder",
            "1 tbsp lemon juice",
            "2 tbsp oil",
            "Salt to taste",
        ],
        "instructions": [
            "Mix yogurt with all the spices, ginger-garlic paste, lemon juice, and salt.",
            "Add paneer, bell pepper, and onion to the marinade and coat well.",
            "Refrigerate for at least 30 minutes or overnight for best results.",
            "Preheat oven to 200°C (400°F).",
            "Thread the marinated paneer and vegetables onto skewers.",
            "Brush with oil and bake for 15 minutes, turning once halfway.",
            "Alternatively, grill on a pan until charred on all sides.",
            "Sprinkle with chaat masala and serve hot with mint chutney.",
        ],
    },
]
