"""Built-in rule tables.

Plain data validated into a ``RuleBook`` at startup. A JSON file with the same
shape can be supplied through ``Settings.rules_path`` to replace them.
"""

FOOD_TAXONOMY: dict[str, list[str]] = {
    "fruits": [
        "apple",
        "banana",
        "orange",
        "strawberry",
        "grape",
        "watermelon",
        "kiwi",
        "pineapple",
        "mango",
        "peach",
        "pear",
        "blueberry",
        "raspberry",
        "apricot",
        "cherry",
        "lemon",
        "lime",
        "plum",
        "fig",
        "date",
        "pomegranate",
        "coconut",
    ],
    "vegetables": [
        "tomato",
        "potato",
        "carrot",
        "broccoli",
        "cucumber",
        "lettuce",
        "spinach",
        "pepper",
        "onion",
        "garlic",
        "cauliflower",
        "cabbage",
        "eggplant",
        "peas",
        "beans",
        "corn",
        "asparagus",
        "celery",
        "radish",
        "beet",
        "turnip",
        "zucchini",
    ],
    "grains": [
        "rice",
        "bread",
        "pasta",
        "cereal",
        "oats",
        "wheat",
        "quinoa",
        "barley",
        "flour",
        "tortilla",
        "cracker",
        "bagel",
        "biscuit",
        "muffin",
        "croissant",
        "pancake",
    ],
    "dairy": [
        "milk",
        "cheese",
        "yogurt",
        "butter",
        "cream",
        "ice cream",
        "sour cream",
        "cottage cheese",
        "whipped cream",
        "custard",
    ],
    "proteins": [
        "chicken",
        "beef",
        "pork",
        "fish",
        "egg",
        "tofu",
        "beans",
        "nuts",
        "turkey",
        "lamb",
        "shrimp",
        "salmon",
        "tuna",
        "crab",
        "lobster",
        "ham",
        "bacon",
        "sausage",
    ],
}

GENERIC_FOOD_TERMS = ["food", "fruit", "vegetable", "produce", "meal", "dish"]

SPOILAGE_TERMS: list[tuple[str, float]] = [
    ("mold", -0.5),
    ("rotten", -0.5),
    ("spoiled", -0.5),
    ("stale", -0.4),
    ("bad", -0.3),
    ("decay", -0.4),
    ("black spot", -0.25),
    ("bruise", -0.2),
    ("soft spot", -0.25),
    ("discolored", -0.3),
    ("fermented", -0.3),
    ("mushy", -0.25),
    ("slimy", -0.4),
    ("wilted", -0.25),
    ("old", -0.2),
    ("shriveled", -0.3),
    ("wrinkled", -0.2),
    ("dry", -0.2),
    ("overripe", -0.2),
]

FRESHNESS_TERMS: list[tuple[str, float]] = [
    ("fresh", 0.2),
    ("ripe", 0.15),
    ("crisp", 0.15),
    ("firm", 0.1),
    ("bright", 0.05),
    ("vibrant", 0.05),
    ("juicy", 0.1),
]

SPOILAGE_VOCABULARY = [
    "rotten",
    "spoiled",
    "moldy",
    "decayed",
    "bad",
    "stale",
    "inedible",
    "overripe",
    "expired",
    "off",
    "sour",
    "fermented",
    "decomposed",
]

FOOD_RULES: list[dict[str, object]] = [
    {
        "food": "apple",
        "color_checks": [
            {
                "any_of": [
                    {
                        "red": {"above": 150},
                        "green": {"above": 70, "below": 120},
                        "blue": {"below": 80},
                    }
                ],
                "weight": -0.3,
                "marks_bad": True,
            },
            {
                "any_of": [
                    {
                        "red": {"below": 80},
                        "green": {"below": 80},
                        "blue": {"below": 80},
                    }
                ],
                "weight": -0.4,
                "marks_bad": True,
            },
            {
                "any_of": [
                    {
                        "red": {"above": 150},
                        "green": {"below": 100},
                        "blue": {"below": 100},
                    },
                    {
                        "red": {"below": 120},
                        "green": {"above": 150},
                        "blue": {"below": 120},
                    },
                ],
                "weight": 0.2,
            },
        ],
        "label_checks": [
            {"terms": ["shiny"], "weight": 0.15, "min_score": 0.6},
            {"terms": ["bruised"], "weight": -0.25, "min_score": 0.6},
            {"terms": ["mealy"], "weight": -0.4, "min_score": 0.6},
            {"terms": ["brown", "spot"], "weight": -0.3, "min_score": 0.6},
        ],
    },
    {
        "food": "banana",
        "color_checks": [
            {
                "any_of": [
                    {
                        "red": {"above": 200},
                        "green": {"above": 180},
                        "blue": {"below": 100},
                    }
                ],
                "weight": 0.2,
            },
            {
                "any_of": [
                    {
                        "red": {"above": 120},
                        "green": {"above": 80, "below": 120},
                        "blue": {"below": 80},
                    }
                ],
                "weight": -0.3,
                "basis": "pixel_fraction",
                "threshold": 0.5,
                "marks_bad": True,
            },
        ],
        "label_checks": [
            {"terms": ["green"], "weight": 0.2, "min_score": 0.7},
            {"terms": ["black"], "weight": -0.3, "min_score": 0.7},
        ],
    },
]

CATEGORY_EXPIRY_DAYS = {
    "fruits": 7,
    "vegetables": 5,
    "grains": 90,
    "dairy": 7,
    "proteins": 3,
    "unknown": 4,
    "other": 4,
}

# Order matters: the first food contained in the name wins.
FOOD_EXPIRY_DAYS: list[tuple[str, int]] = [
    ("banana", 5),
    ("strawberry", 3),
    ("bread", 6),
    ("milk", 7),
    ("yogurt", 10),
    ("chicken", 2),
    ("fish", 1),
    ("lettuce", 4),
    ("spinach", 3),
    ("avocado", 3),
    ("tomato", 5),
    ("apple", 14),
    ("orange", 10),
    ("carrot", 21),
    ("potato", 28),
    ("onion", 30),
    ("garlic", 90),
    ("rice", 365),
    ("pasta", 365),
    ("egg", 21),
]


def default_rules() -> dict[str, object]:
    """Return the built-in tables in ``RuleBook`` shape."""
    return {
        "taxonomy": FOOD_TAXONOMY,
        "generic_food_terms": GENERIC_FOOD_TERMS,
        "spoilage_terms": [
            {"term": term, "weight": weight} for term, weight in SPOILAGE_TERMS
        ],
        "freshness_terms": [
            {"term": term, "weight": weight} for term, weight in FRESHNESS_TERMS
        ],
        "food_rules": FOOD_RULES,
        "spoilage_vocabulary": SPOILAGE_VOCABULARY,
        "category_expiry_days": CATEGORY_EXPIRY_DAYS,
        "default_expiry_days": 4,
        "food_expiry_days": [
            {"food": food, "days": days} for food, days in FOOD_EXPIRY_DAYS
        ],
    }
