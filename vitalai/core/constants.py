"""Application constants."""

import uuid

# Singleton user until auth: rows are owned by this id unless X-User-Id is sent.
DEFAULT_USER_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")

# Dashboard windows
RECENT_WORKOUT_DAYS = 30
FREQUENCY_WEEKS = 12

# Fasting
DEFAULT_FASTING_HOURS = 16
MIN_FASTING_HOURS = 1
MAX_FASTING_HOURS = 72

# Water (fl oz per ml)
ML_TO_OZ = 0.033814

# Preference defaults (fresh profile)
DEFAULT_FITNESS_LEVEL = "beginner"
DEFAULT_WORKOUT_DURATION = 30
DEFAULT_WORKOUT_FREQUENCY = 3
DEFAULT_FITNESS_GOALS = ["general fitness"]
DEFAULT_EQUIPMENT = ["bodyweight"]
DEFAULT_WATER_GOAL_ML = 2500
DEFAULT_CALORIE_GOAL = 2000
DEFAULT_PROTEIN_GOAL = 150
DEFAULT_CARBS_GOAL = 200
DEFAULT_FAT_GOAL = 70

# Recipe cookie (from-ingredients)
RECIPE_COOKIE_NAME = "lastRecipeResponse"
RECIPE_COOKIE_MAX_AGE = 60 * 60 * 24
