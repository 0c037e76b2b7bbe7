"""Grocery-store categories for shopping-list items."""

from enum import Enum


class GroceryCategory(str, Enum):
    """Store aisle an item is shelved in."""

    PRODUCE = "Produce"
    DAIRY = "Dairy & Eggs"
    MEAT = "Meat & Seafood"
    BAKERY = "Bakery"
    PANTRY = "Pantry"
    SPICES = "Spices & Seasonings"
    FROZEN = "Frozen"
    BEVERAGES = "Beverages"
    CANNED = "Canned & Jarred"
    CONDIMENTS = "Condiments & Sauces"
    SNACKS = "Snacks"
    OTHER = "Other"


_CATEGORY_KEYWORDS: dict[GroceryCategory, tuple[str, ...]] = {
    GroceryCategory.PRODUCE: (
        "tomato",
        "cherry tomato",
        "onion",
        "red onion",
        "green onion",
        "scallion",
        "shallot",
        "leek",
        "garlic",
        "potato",
        "sweet potato",
        "red potato",
        "yam",
        "carrot",
        "celery",
        "bell pepper",
        "jalapeño",
        "jalapeno",
        "serrano pepper",
        "poblano pepper",
        "habanero pepper",
        "lettuce",
        "spinach",
        "kale",
        "arugula",
        "mixed greens",
        "chard",
        "broccoli",
        "cauliflower",
        "cucumber",
        "zucchini",
        "squash",
        "mushroom",
        "cabbage",
        "corn",
        "corn on the cob",
        "green beans",
        "peas",
        "snow peas",
        "asparagus",
        "sugar snap peas",
        "butternut squash",
        "spaghetti squash",
        "acorn squash",
        "yellow squash",
        "portobello mushroom",
        "shiitake mushroom",
        "eggplant",
        "radish",
        "beet",
        "ginger",
        "cilantro",
        "parsley",
        "basil",
        "mint",
        "thyme",
        "rosemary",
        "apple",
        "banana",
        "orange",
        "lemon",
        "lime",
        "lemon zest",
        "lime zest",
        "strawberry",
        "blueberry",
        "raspberry",
        "blackberry",
        "grape",
        "mango",
        "pineapple",
        "watermelon",
        "peach",
        "pear",
        "plum",
        "cherry",
        "avocado",
    ),
    GroceryCategory.DAIRY: (
        "milk",
        "plant milk",
        "buttermilk",
        "cream",
        "heavy cream",
        "half and half",
        "sour cream",
        "butter",
        "cheese",
        "cheddar cheese",
        "mozzarella cheese",
        "parmesan cheese",
        "feta cheese",
        "goat cheese",
        "cream cheese",
        "ricotta cheese",
        "cottage cheese",
        "yogurt",
        "egg",
        "egg white",
        "egg yolk",
    ),
    GroceryCategory.MEAT: (
        "chicken",
        "chicken breast",
        "chicken thigh",
        "ground chicken",
        "whole chicken",
        "turkey",
        "ground turkey",
        "beef",
        "ground beef",
        "beef steak",
        "beef roast",
        "pork",
        "ground pork",
        "pork chop",
        "pork loin",
        "bacon",
        "sausage",
        "ham",
        "lamb",
        "fish",
        "salmon",
        "tuna",
        "cod",
        "tilapia",
        "shrimp",
        "scallop",
        "crab",
        "lobster",
        "mussel",
        "clam",
    ),
    GroceryCategory.BAKERY: (
        "bread",
        "baguette",
        "roll",
        "bun",
        "tortilla",
        "pita",
        "naan",
        "bagel",
        "croissant",
        "muffin",
    ),
    GroceryCategory.PANTRY: (
        "flour",
        "all-purpose flour",
        "bread flour",
        "cake flour",
        "whole wheat flour",
        "almond flour",
        "sugar",
        "brown sugar",
        "powdered sugar",
        "honey",
        "maple syrup",
        "oil",
        "olive oil",
        "vegetable oil",
        "coconut oil",
        "sesame oil",
        "vinegar",
        "rice",
        "white rice",
        "brown rice",
        "arborio rice",
        "pasta",
        "spaghetti",
        "penne",
        "fettuccine",
        "macaroni",
        "lasagna noodles",
        "noodle",
        "quinoa",
        "couscous",
        "oats",
        "cereal",
        "breadcrumbs",
        "cornstarch",
        "baking powder",
        "baking soda",
        "yeast",
        "vanilla extract",
        "cocoa powder",
        "chocolate chips",
        "baking chocolate",
        "almonds",
        "walnuts",
        "pecans",
        "cashews",
        "peanuts",
        "pine nuts",
        "peanut butter",
        "almond butter",
    ),
    GroceryCategory.SPICES: (
        "salt",
        "black pepper",
        "white pepper",
        "salt & pepper",
        "paprika",
        "cumin",
        "chili powder",
        "cayenne pepper",
        "oregano",
        "dried oregano",
        "dried basil",
        "dried thyme",
        "dried rosemary",
        "dried parsley",
        "dried sage",
        "sage",
        "bay leaf",
        "cinnamon",
        "nutmeg",
        "cloves",
        "allspice",
        "cardamom",
        "coriander",
        "turmeric",
        "curry powder",
        "garam masala",
        "red pepper flakes",
        "garlic powder",
        "garlic salt",
        "onion powder",
        "italian seasoning",
        "dill",
        "tarragon",
        "chives",
        "dry mustard",
    ),
    GroceryCategory.FROZEN: (
        "frozen peas",
        "frozen corn",
        "frozen vegetables",
        "frozen berries",
        "ice cream",
        "frozen pizza",
    ),
    GroceryCategory.BEVERAGES: (
        "water",
        "coffee",
        "tea",
        "juice",
        "soda",
        "beer",
        "wine",
        "broth",
        "chicken broth",
        "beef broth",
        "vegetable broth",
        "stock",
    ),
    GroceryCategory.CANNED: (
        "canned tomato",
        "sun-dried tomato",
        "tomato paste",
        "tomato sauce",
        "beans",
        "black beans",
        "kidney beans",
        "pinto beans",
        "white beans",
        "chickpeas",
        "lentils",
        "coconut milk",
        "olive",
        "pickle",
        "caper",
        "artichoke",
        "chipotle pepper",
    ),
    GroceryCategory.CONDIMENTS: (
        "ketchup",
        "mustard",
        "dijon mustard",
        "yellow mustard",
        "whole grain mustard",
        "mayonnaise",
        "hot sauce",
        "soy sauce",
        "worcestershire sauce",
        "fish sauce",
        "barbecue sauce",
        "salsa",
        "pesto",
        "hummus",
        "tahini",
        "salad dressing",
        "oil & vinegar",
        "lemon juice",
        "lime juice",
    ),
    GroceryCategory.SNACKS: (
        "chips",
        "crackers",
        "popcorn",
        "pretzel",
        "cookie",
        "candy",
        "chocolate",
    ),
}

INGREDIENT_CATEGORY_MAP: dict[str, GroceryCategory] = {
    keyword: category
    for category, keywords in _CATEGORY_KEYWORDS.items()
    for keyword in keywords
}

# Longest first so "sugar snap peas" wins over "sugar"
_KEYWORDS_BY_LENGTH: tuple[str, ...] = tuple(
    sorted(INGREDIENT_CATEGORY_MAP, key=len, reverse=True)
)


def categorize_ingredient(name: str | None) -> GroceryCategory:
    """
    Assign a grocery category to an ingredient name.

    Tries an exact keyword match, then the longest keyword contained in the
    name, and falls back to OTHER.

    Examples:
        "cheddar cheese" -> DAIRY
        "smoked paprika" -> SPICES
        "dragon fruit" -> OTHER
    """
    if not name:
        return GroceryCategory.OTHER

    normalized = name.strip().lower()
    if normalized in INGREDIENT_CATEGORY_MAP:
        return INGREDIENT_CATEGORY_MAP[normalized]

    for keyword in _KEYWORDS_BY_LENGTH:
        if keyword in normalized:
            return INGREDIENT_CATEGORY_MAP[keyword]

    return GroceryCategory.OTHER
