"""Request schemas for the LLM-backed recipe and nutrition routes.

Field names follow the frontend's camelCase JSON.
"""

from pydantic import BaseModel, ConfigDict, Field


class RecipeSuggestionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    cuisine: str = "Indian"
    diet_type: list[str] = Field(default_factory=list, alias="dietType")
    meal_type: str | None = Field(None, alias="mealType")
    ingredients: list[str] = Field(default_factory=list)
    exclude_ingredients: list[str] = Field(default_factory=list, alias="excludeIngredients")
    max_prep_time: int | None = Field(None, alias="maxPrepTime")


class IngredientRecipeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ingredients: list[str] = Field(default_factory=list)
    dietary_preferences: list[str] = Field(default_factory=list, alias="dietaryPreferences")
    meal_type: str = Field("", alias="mealType")
    health_focus: list[str] = Field(default_factory=list, alias="healthFocus")
    exclude_ingredients: list[str] = Field(default_factory=list, alias="excludeIngredients")
    response_id: str = Field("", alias="responseId")


class FitnessPlanRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    age: int = Field(..., ge=1, le=120)
    gender: str
    weight: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    activity_level: str = Field(..., alias="activityLevel")
    goal: str


class MacroSplit(BaseModel):
    protein: float
    carbs: float
    fats: float


class FitnessPlan(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    daily_calories: str | float = Field(..., alias="dailyCalories")
    macro_split: MacroSplit = Field(..., alias="macroSplit")
    workout_plan: str = Field(..., alias="workoutPlan")
    meal_plan: str = Field(..., alias="mealPlan")
    tips: list[str]


class FoodAnalysisRequest(BaseModel):
    description: str | None = None
    image: str | None = Field(None, description="Base64 image or data URL")
    log: bool = False


class FoodAnalysis(BaseModel):
    calories: float
    protein: float
    carbs: float
    fat: float
    analysis: str = ""
    description: str | None = None
    logged: bool = False
