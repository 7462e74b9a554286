from typing import Final

MEAL_TYPES: Final[tuple[str, ...]] = ("breakfast", "lunch", "dinner", "snack")

# --- Difficulty estimation ---
BASELINE_DIFFICULTY: Final[float] = 3.0
MIN_DIFFICULTY: Final[float] = 1.0
MAX_DIFFICULTY: Final[float] = 5.0
LIGHTWEIGHT_MAX_DIFFICULTY: Final[float] = 3.0

DIFFICULTY_CUES: Final[dict[str, tuple[str, ...]]] = {
    "easy": ("easy", "simple", "quick"),
    "hard": ("advanced", "complex", "gourmet"),
}

TECHNIQUES: Final[dict[str, tuple[str, ...]]] = {
    "basic": (
        "boil", "simmer", "sauté", "fry", "bake", "roast", "grill", "microwave",
        "mix", "stir", "whisk", "chop", "dice", "slice", "blend", "cook",
    ),
    "advanced": (
        "sous vide", "temper", "caramelize", "flambé", "braise", "confit", "deglaze",
        "ferment", "emulsify", "render", "reduction", "julienne", "brunoise", "chiffonade",
        "blanch", "fold", "proof", "sweat", "sear", "pickle", "cure", "smoke",
    ),
}

COMPLEX_INGREDIENTS: Final[tuple[str, ...]] = (
    "lobster", "crab", "scallop", "tenderloin", "soufflé", "pastry", "fondant",
    "truffle", "foie gras", "puff pastry", "phyllo", "squid", "octopus", "oyster",
    "duck", "lamb", "risotto", "tempura", "croquette", "custard", "sorbet",
)

COMPLEX_CUISINES: Final[tuple[str, ...]] = (
    "french", "japanese", "molecular", "pastry", "patisserie", "haute", "gourmet",
    "fine dining", "michelin", "advanced",
)

PRECISION_RECIPE_TYPES: Final[tuple[str, ...]] = ("dessert", "pastry", "baking")

TIME_INDICATORS: Final[dict[str, tuple[str, ...]]] = {
    "any": (
        "overnight", "hours", "all day", "slow cook", "marinate", "rest", "proof",
        "quick", "instant", "5 minute", "fast", "easy", "simple", "beginner",
    ),
    "short": ("quick", "easy", "simple", "minute"),
    "long": ("overnight", "hours"),
}

# --- Cultural selection ---
QUOTA_OVERRIDE_WEIGHT: Final[float] = 0.8
OBJECTIVE_WEIGHT_THRESHOLD: Final[float] = 0.5
PACING_BOOST: Final[float] = 0.2
MEAL_TYPE_BIAS: Final[dict[str, float]] = {"dinner": 0.1, "breakfast": -0.1}
CLUSTER_WINDOW: Final[int] = 3
CLUSTER_LIMIT: Final[int] = 2
CLUSTER_PENALTY: Final[float] = 0.3
VARIETY_WINDOW: Final[int] = 5
SHORTLIST_SIZE: Final[int] = 3

COOK_TIME_BANDS: Final[tuple[tuple[int, float], ...]] = ((30, 1.0), (45, 0.7))
SLOW_COOK_SCORE: Final[float] = 0.4

CHEAP_INGREDIENTS: Final[tuple[str, ...]] = ("rice", "beans", "chicken", "eggs", "pasta", "potatoes")

REPEATED_CULTURE_SCORE: Final[float] = 0.3
NEW_CULTURE_SCORE: Final[float] = 1.0

MEAL_TYPE_WEIGHT: Final[float] = 0.2
MEAL_TYPE_KEYWORDS: Final[dict[str, tuple[str, ...]]] = {
    "breakfast": ("breakfast", "morning", "pancake", "egg", "oatmeal", "cereal"),
    "lunch": ("sandwich", "salad", "soup", "wrap"),
    "dinner": ("dinner", "roast", "steak", "curry"),
    "snack": ("snack", "bite", "bar", "smoothie"),
}
MEAL_TYPE_DEFAULTS: Final[dict[str, float]] = {"breakfast": 0.3, "lunch": 0.7, "dinner": 0.8, "snack": 0.2}
UNKNOWN_MEAL_TYPE_SCORE: Final[float] = 0.5

IDEAL_MACRO_SPLIT: Final[dict[str, float]] = {"protein": 0.3, "carbs": 0.4, "fat": 0.3}
CALORIE_BAND: Final[tuple[int, int]] = (300, 800)
NO_MACROS_SCORE: Final[float] = 0.5

# --- Cultural quota ---
CULTURAL_BASELINE_SHARE: Final[float] = 0.25
CULTURAL_WEIGHT_BONUS: Final[float] = 0.15
# (max plan size, min count, max count); the last row covers every larger plan
CULTURAL_QUOTA_BOUNDS: Final[tuple[tuple[int, int, int], ...]] = ((7, 1, 3), (14, 2, 4))
CULTURAL_QUOTA_LARGE_PLAN: Final[tuple[int, int]] = (3, 6)

GENERIC_MEAL_TITLE: Final[str] = "-"

# --- Catalog compatibility ---
DIETARY_KEYWORDS: Final[dict[str, tuple[str, ...]]] = {
    "meat": ("beef", "pork", "veal", "chicken", "turkey", "lamb", "fish", "salmon", "tuna", "shrimp",
             "meat", "bacon", "ham", "sausage"),
    "dairy": ("milk", "cheese", "butter", "cream", "yogurt", "dairy", "cheddar", "mozzarella", "parmesan"),
    "eggs": ("egg",),
    "gluten": ("wheat", "flour", "bread", "pasta", "noodles", "barley", "rye", "gluten"),
    "nuts": ("almond", "peanut", "walnut", "cashew", "pistachio", "hazelnut", "pecan", "nuts"),
    "high_sodium": ("soy sauce", "salt", "sodium", "canned", "processed", "pickle", "olives"),
}
# restriction -> keyword categories a compatible meal must not mention
DIETARY_EXCLUSIONS: Final[dict[str, tuple[str, ...]]] = {
    "vegetarian": ("meat",),
    "vegan": ("meat", "dairy", "eggs"),
    "gluten-free": ("gluten",),
    "dairy-free": ("dairy",),
    "nut-free": ("nuts",),
    "low-sodium": ("high_sodium",),
}
KETO_MAX_CARBS: Final[float] = 20.0

# --- Plan validation ---
CULTURAL_SHARE_RANGE: Final[tuple[float, float]] = (20.0, 35.0)
MIN_CULTURAL_VARIETY: Final[float] = 0.5
