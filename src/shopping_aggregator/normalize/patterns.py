"""Static pattern tables used by the ingredient name normalizer.

Every table here is built once at import time and never mutated. The family
rules are evaluated in order and the first match wins, so within a family the
specific variants ("red onion", "onion powder") must come before the generic
rule ("onion") that would otherwise absorb them.
"""

import re
from dataclasses import dataclass

# =============================================================================
# Compound Phrases
# =============================================================================

# Exact multi-word idioms -> canonical form
COMPOUND_NORMALIZATIONS: dict[str, str] = {
    "salt and pepper": "salt & pepper",
    "salt & pepper": "salt & pepper",
    "salt n pepper": "salt & pepper",
    "salt pepper": "salt & pepper",
    "salt and black pepper": "salt & pepper",
    "salt & black pepper": "salt & pepper",
    "oil and vinegar": "oil & vinegar",
    "oil & vinegar": "oil & vinegar",
    "bread and butter": "bread & butter",
    "bread & butter": "bread & butter",
    "peanut butter and jelly": "peanut butter & jelly",
    "peanut butter & jelly": "peanut butter & jelly",
    "macaroni and cheese": "macaroni & cheese",
    "macaroni & cheese": "macaroni & cheese",
    "mac and cheese": "macaroni & cheese",
    "mac & cheese": "macaroni & cheese",
    "mac n cheese": "macaroni & cheese",
}

# =============================================================================
# Bell Peppers
# =============================================================================

BELL_PEPPER_COLORS = ("red", "green", "yellow", "orange")

_COLORS = "|".join(BELL_PEPPER_COLORS)

BELL_PEPPER_PATTERN = re.compile(rf"^(?:({_COLORS})\s+)?bell\s+peppers?$", re.IGNORECASE)

# "red pepper" without "bell"; plain "pepper" is left alone (could be black pepper)
COLOR_PEPPER_PATTERN = re.compile(rf"^({_COLORS})\s+peppers?$", re.IGNORECASE)

BELL_PEPPER_KEY = "bell pepper"
BELL_PEPPER_DISPLAY = "Bell peppers"

# =============================================================================
# Modifiers
# =============================================================================


def _words(*alternatives: str) -> re.Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(alternatives) + r")\b", re.IGNORECASE)


# Preparation, quality, size and temperature descriptors stripped before the
# second family lookup
MODIFIER_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Preparation methods
    _words(
        "shredded",
        "grated",
        "sliced",
        "diced",
        "chopped",
        "minced",
        "crushed",
        "ground",
        "whole",
        "halved",
        "quartered",
    ),
    _words(
        "cubed",
        "julienned",
        "chiffonade",
        r"rough[- ]?chopped",
        r"finely[- ]?chopped",
        r"coarsely[- ]?chopped",
        "finely",
        "coarsely",
        "thinly",
    ),
    _words("melted", "softened", r"room[- ]?temperature", "cold", "chilled", "frozen", "thawed"),
    _words(
        "toasted",
        "roasted",
        "sautéed",
        "sauteed",
        "fried",
        "baked",
        "grilled",
        "smoked",
        "cured",
        "dried",
        "dehydrated",
    ),
    _words("blanched", "steamed", "poached", "braised", "caramelized", "charred", "cooked"),
    _words("peeled", "unpeeled", "seeded", "unseeded", "cored", "pitted", "trimmed", "cleaned"),
    _words("beaten", "whisked", "whipped", "creamed", "mashed", "pureed", "puréed", "blended"),
    # Quality/grade descriptors
    _words(r"extra[- ]?sharp", "sharp", "mild", "medium", "aged", "young", "mature", "vintage"),
    _words(
        r"extra[- ]?virgin",
        "virgin",
        "pure",
        "refined",
        "unrefined",
        "raw",
        "organic",
        "natural",
    ),
    _words("fresh", "freshly", "dried", "dry", "canned", "jarred", "frozen", "preserved"),
    _words(
        r"low[- ]?fat",
        "lowfat",
        r"reduced[- ]?fat",
        r"fat[- ]?free",
        "skim",
        "whole",
        r"part[- ]?skim",
    ),
    re.compile(r"(?<!\w)[12]%(?!\w)"),
    _words(r"low[- ]?sodium", r"sodium[- ]?free", r"no[- ]?salt[- ]?added", r"reduced[- ]?sodium"),
    _words("unsweetened", "sweetened", r"sugar[- ]?free", r"no[- ]?sugar[- ]?added"),
    _words("light", "lite", "heavy", "thick", "thin", "regular"),
    # Size descriptors
    _words("large", "medium", "small", r"extra[- ]?large", "jumbo", "baby", "mini", "petite"),
    _words("big", "little", "tiny"),
    # Salting / butchery
    _words("unsalted", "salted", r"lightly[- ]?salted"),
    _words("boneless", "skinless", r"bone[- ]?in", r"skin[- ]?on"),
    # Packing
    _words("packed", r"loosely[- ]?packed", r"tightly[- ]?packed"),
)

# =============================================================================
# Ingredient Families
# =============================================================================


@dataclass(frozen=True)
class FamilyRule:
    """A pattern collapsing many spellings onto one canonical ingredient."""

    pattern: re.Pattern[str]
    canonical: str
    display: str

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _family(
    alternatives: str,
    canonical: str,
    display: str | None = None,
    *,
    whole: bool = False,
) -> FamilyRule:
    """
    Build a family rule from a regex alternation.

    Word-bounded rules accept a plural "s"/"es" suffix; whole-string rules only
    match when the alternation is the entire text.
    """
    if whole:
        source = rf"^(?:{alternatives})$"
    else:
        source = rf"\b(?:{alternatives})(?:e?s)?\b"
    return FamilyRule(
        pattern=re.compile(source, re.IGNORECASE),
        canonical=canonical,
        display=display or canonical[:1].upper() + canonical[1:],
    )


INGREDIENT_FAMILIES: tuple[FamilyRule, ...] = (
    # Cheeses
    _family(
        r"cheddar|sharp cheddar|mild cheddar|white cheddar|yellow cheddar|aged cheddar",
        "cheddar cheese",
    ),
    _family(r"mozzarella|fresh mozzarella|part[- ]?skim mozzarella", "mozzarella cheese"),
    _family(r"parmesan|parmigiano[- ]?reggiano|parm", "parmesan cheese"),
    _family(r"swiss(?!\s+chard)|gruyere|gruyère|emmental|emmentaler", "swiss cheese"),
    _family(r"feta", "feta cheese"),
    _family(r"goat cheese|chèvre|chevre", "goat cheese"),
    _family(r"cream cheese|neufchâtel|neufchatel", "cream cheese"),
    _family(r"ricotta", "ricotta cheese"),
    _family(r"cottage cheese", "cottage cheese"),
    _family(r"blue cheese|bleu cheese|gorgonzola|roquefort|stilton", "blue cheese"),
    _family(r"monterey jack|pepper jack|colby[- ]?jack|colby|jack cheese", "jack cheese"),
    _family(r"provolone", "provolone cheese"),
    _family(r"american cheese", "american cheese", "American cheese"),
    _family(r"brie", "brie cheese"),
    _family(r"camembert", "camembert cheese"),
    _family(r"manchego", "manchego cheese"),
    _family(r"asiago", "asiago cheese"),
    _family(r"fontina", "fontina cheese"),
    _family(r"havarti", "havarti cheese"),
    _family(r"gouda", "gouda cheese"),
    _family(r"pecorino romano|pecorino", "pecorino cheese"),
    # Butter and milk (nut butters and plant milks first)
    _family(r"peanut butter", "peanut butter"),
    _family(r"almond butter", "almond butter"),
    _family(
        r"(?:unsalted |salted |sweet cream )?butter(?!\s+(?:lettuce|beans?))",
        "butter",
    ),
    _family(r"buttermilk|cultured buttermilk", "buttermilk"),
    _family(r"coconut milk", "coconut milk"),
    _family(r"plant milk|almond milk|oat milk|soy milk|rice milk", "plant milk"),
    _family(r"half[- ]?and[- ]?half|half & half", "half and half", "Half and half"),
    _family(r"heavy cream|heavy whipping cream|whipping cream|double cream", "heavy cream"),
    _family(r"sour cream", "sour cream"),
    _family(
        r"milk(?!\s+chocolate)|whole milk|2% milk|1% milk|skim milk|fat[- ]?free milk|nonfat milk",
        "milk",
    ),
    _family(
        r"yogurt|yoghurt|greek yogurt|plain yogurt|vanilla yogurt|low[- ]?fat yogurt"
        r"|nonfat yogurt",
        "yogurt",
    ),
    # Onions (specific before generic)
    _family(r"red onion|purple onion", "red onion"),
    _family(r"green onion|scallion|spring onion", "green onion"),
    _family(r"onion powder", "onion powder"),
    _family(r"shallot", "shallot"),
    _family(
        r"onion|yellow onion|white onion|sweet onion|vidalia onion|spanish onion",
        "onion",
    ),
    # Garlic
    _family(r"garlic powder|granulated garlic", "garlic powder"),
    _family(r"garlic salt", "garlic salt"),
    _family(
        r"garlic|garlic clove|clove of garlic|cloves of garlic|minced garlic|crushed garlic"
        r"|chopped garlic",
        "garlic",
    ),
    # Salt
    _family(
        r"kosher salt|coarse salt|sea salt|flaky salt|fleur de sel|table salt|fine salt"
        r"|iodized salt",
        "salt",
    ),
    _family(r"salt", "salt", whole=True),
    # Pepper (never bell pepper)
    _family(
        r"black pepper|ground black pepper|freshly ground black pepper|cracked black pepper"
        r"|black peppercorn|peppercorn",
        "black pepper",
    ),
    _family(r"white pepper|ground white pepper", "white pepper"),
    _family(r"cayenne pepper|cayenne|ground cayenne", "cayenne pepper"),
    _family(
        r"red pepper flake|crushed red pepper flake|crushed red pepper|chili flake",
        "red pepper flakes",
    ),
    _family(r"(?:fire[- ])?roasted red pepper", "roasted red pepper"),
    # Oils
    _family(
        r"olive oil|extra virgin olive oil|virgin olive oil|evoo|light olive oil",
        "olive oil",
    ),
    _family(r"vegetable oil|canola oil|neutral oil|sunflower oil", "vegetable oil"),
    _family(r"coconut oil", "coconut oil"),
    _family(r"sesame oil|toasted sesame oil", "sesame oil"),
    _family(r"avocado oil", "avocado oil"),
    _family(r"peanut oil", "peanut oil"),
    # Flour
    _family(r"all[- ]?purpose flour|ap flour|plain flour", "all-purpose flour"),
    _family(r"bread flour|high[- ]?gluten flour", "bread flour"),
    _family(r"cake flour|pastry flour", "cake flour"),
    _family(r"whole wheat flour|whole[- ]?grain flour|wheat flour", "whole wheat flour"),
    _family(r"self[- ]?rising flour|self[- ]?raising flour", "self-rising flour"),
    _family(r"almond flour|almond meal", "almond flour"),
    _family(r"flour", "all-purpose flour", whole=True),
    # Sugar
    _family(r"brown sugar|light brown sugar|dark brown sugar|packed brown sugar", "brown sugar"),
    _family(
        r"powdered sugar|confectioners sugar|confectioners' sugar|confectioner's sugar"
        r"|icing sugar|10x sugar",
        "powdered sugar",
    ),
    _family(r"granulated sugar|white sugar|table sugar|cane sugar|caster sugar", "sugar"),
    _family(r"sugar", "sugar", whole=True),
    # Tomatoes (prepared forms before fresh)
    _family(r"sun[- ]?dried tomato", "sun-dried tomato", "Sun-dried tomatoes"),
    _family(r"tomato paste", "tomato paste"),
    _family(r"tomato sauce|marinara|marinara sauce|passata", "tomato sauce"),
    _family(
        r"crushed tomato|diced tomato|canned tomato|whole tomato|stewed tomato|san marzano",
        "canned tomato",
        "Canned tomatoes",
    ),
    _family(r"cherry tomato|grape tomato", "cherry tomato"),
    _family(r"ketchup|catsup|tomato ketchup", "ketchup"),
    _family(r"tomato|roma tomato|plum tomato|beefsteak tomato|heirloom tomato", "tomato"),
    # Eggs (parts before whole eggs)
    _family(r"egg white", "egg white"),
    _family(r"egg yolk", "egg yolk"),
    _family(r"egg(?!\s+noodles?)|large egg|chicken egg", "egg"),
    # Poultry
    _family(
        r"chicken breast|boneless chicken breast|skinless chicken breast|chicken cutlet",
        "chicken breast",
    ),
    _family(r"chicken thigh|boneless chicken thigh|skinless chicken thigh", "chicken thigh"),
    _family(r"chicken broth|chicken stock|low[- ]?sodium chicken broth", "chicken broth"),
    _family(r"ground chicken", "ground chicken"),
    _family(r"ground turkey", "ground turkey"),
    _family(r"whole chicken|roasting chicken", "whole chicken"),
    # Seafood
    _family(r"salmon|salmon fillet|smoked salmon", "salmon"),
    _family(r"shrimp|prawn|jumbo shrimp", "shrimp"),
    _family(r"tuna|canned tuna|ahi tuna", "tuna"),
    _family(r"cod|cod fillet", "cod"),
    # Beef
    _family(r"beef broth|beef stock|low[- ]?sodium beef broth", "beef broth"),
    _family(
        r"ground beef|lean ground beef|ground chuck|ground sirloin|minced beef",
        "ground beef",
    ),
    _family(
        r"beef steak|steak|sirloin|ribeye|rib[- ]?eye|filet mignon|strip steak|ny strip"
        r"|new york strip|t[- ]?bone|porterhouse",
        "beef steak",
    ),
    _family(r"beef roast|chuck roast|pot roast|brisket", "beef roast"),
    # Pork
    _family(r"ground pork", "ground pork"),
    _family(r"pork chop|bone[- ]?in pork chop|boneless pork chop", "pork chop"),
    _family(r"pork tenderloin|pork loin", "pork loin"),
    _family(r"bacon|thick[- ]?cut bacon|applewood bacon|smoked bacon", "bacon"),
    _family(r"ham|smoked ham|honey ham|deli ham", "ham"),
    _family(r"sausage|italian sausage|breakfast sausage|pork sausage", "sausage"),
    # Citrus (juice and zest before the fruit)
    _family(
        r"lemon juice|fresh lemon juice|freshly squeezed lemon juice",
        "lemon juice",
    ),
    _family(r"lemon zest", "lemon zest"),
    _family(r"lemon(?!\s+pepper)|fresh lemon|meyer lemon", "lemon"),
    _family(r"lime juice|fresh lime juice|freshly squeezed lime juice", "lime juice"),
    _family(r"lime zest", "lime zest"),
    _family(r"lime|fresh lime|key lime", "lime"),
    # Vinegar
    _family(r"red wine vinegar", "red wine vinegar"),
    _family(r"white wine vinegar", "white wine vinegar"),
    _family(r"rice vinegar|rice wine vinegar", "rice vinegar"),
    _family(r"apple cider vinegar|cider vinegar", "apple cider vinegar"),
    _family(r"balsamic vinegar|aged balsamic", "balsamic vinegar"),
    _family(r"white vinegar|distilled white vinegar|distilled vinegar", "white vinegar"),
    # Herbs (dried before fresh)
    _family(r"dried parsley", "dried parsley"),
    _family(
        r"parsley|fresh parsley|flat[- ]?leaf parsley|italian parsley|curly parsley",
        "parsley",
    ),
    _family(r"cilantro|fresh cilantro|coriander leaves", "cilantro"),
    _family(r"dried basil", "dried basil"),
    _family(r"basil|fresh basil|sweet basil|thai basil", "basil"),
    _family(r"dried oregano", "dried oregano"),
    _family(r"oregano|fresh oregano", "oregano"),
    _family(r"dried thyme", "dried thyme"),
    _family(r"thyme|fresh thyme", "thyme"),
    _family(r"dried rosemary", "dried rosemary"),
    _family(r"rosemary|fresh rosemary", "rosemary"),
    _family(r"dried sage", "dried sage"),
    _family(r"sage|fresh sage", "sage"),
    _family(r"mint|fresh mint|spearmint|peppermint", "mint"),
    _family(r"dill|fresh dill|dill weed", "dill"),
    _family(r"chives|fresh chives|chive", "chives"),
    _family(r"bay leaf|bay leaves", "bay leaf"),
    # Spices
    _family(r"cinnamon|ground cinnamon|cinnamon stick", "cinnamon"),
    _family(r"nutmeg|ground nutmeg|whole nutmeg|freshly grated nutmeg", "nutmeg"),
    _family(r"cumin|ground cumin|cumin seed", "cumin"),
    _family(r"paprika|smoked paprika|sweet paprika|hot paprika|hungarian paprika", "paprika"),
    _family(r"chili powder|chile powder", "chili powder"),
    _family(r"curry powder", "curry powder"),
    _family(r"ginger|fresh ginger|ground ginger|ginger root|minced ginger", "ginger"),
    _family(r"turmeric|ground turmeric", "turmeric"),
    _family(r"coriander|ground coriander|coriander seed", "coriander"),
    _family(r"allspice|ground allspice", "allspice"),
    _family(r"cloves|ground cloves|whole cloves", "cloves"),
    _family(r"cardamom|ground cardamom|cardamom pod", "cardamom"),
    # Broth
    _family(r"vegetable broth|vegetable stock|veggie broth", "vegetable broth"),
    # Sauces and condiments
    _family(
        r"soy sauce|low[- ]?sodium soy sauce|light soy sauce|dark soy sauce|tamari",
        "soy sauce",
    ),
    _family(r"dijon mustard|dijon", "dijon mustard"),
    _family(r"whole grain mustard|stone ground mustard|coarse mustard", "whole grain mustard"),
    _family(r"dry mustard|mustard powder", "dry mustard"),
    _family(r"yellow mustard|american mustard|prepared mustard", "yellow mustard"),
    _family(r"mayonnaise|mayo|light mayo|low[- ]?fat mayo", "mayonnaise"),
    _family(r"worcestershire sauce|worcestershire", "worcestershire sauce"),
    _family(r"hot sauce|tabasco|franks|louisiana hot sauce|sriracha", "hot sauce"),
    # Sweeteners
    _family(r"honey|raw honey|clover honey|wildflower honey", "honey"),
    _family(r"maple syrup|pure maple syrup", "maple syrup"),
    # Rice
    _family(r"brown rice|long[- ]?grain brown rice", "brown rice"),
    _family(r"arborio rice|risotto rice", "arborio rice"),
    _family(r"white rice|long[- ]?grain rice|basmati rice|jasmine rice", "white rice"),
    _family(r"rice", "white rice", whole=True),
    # Squash (before pasta, "spaghetti squash")
    _family(r"zucchini|courgette", "zucchini"),
    _family(r"yellow squash|summer squash", "yellow squash"),
    _family(r"butternut squash", "butternut squash"),
    _family(r"acorn squash", "acorn squash"),
    _family(r"spaghetti squash", "spaghetti squash"),
    # Pasta
    _family(r"spaghetti|thin spaghetti|angel hair", "spaghetti"),
    _family(r"penne|rigatoni|ziti", "penne"),
    _family(r"fettuccine|fettuccini|tagliatelle", "fettuccine"),
    _family(r"macaroni|elbow macaroni|elbow pasta", "macaroni"),
    _family(r"lasagna|lasagne|lasagna noodle|lasagna sheet", "lasagna noodles"),
    # Bread
    _family(r"bread ?crumb|panko|panko bread ?crumb", "breadcrumbs"),
    _family(r"bread|white bread|sandwich bread|sliced bread", "bread"),
    # Beans and legumes
    _family(r"green bean|string bean|snap bean|haricot vert", "green beans"),
    _family(r"black bean|canned black bean", "black beans"),
    _family(r"kidney bean|red kidney bean|canned kidney bean", "kidney beans"),
    _family(r"pinto bean|canned pinto bean", "pinto beans"),
    _family(r"cannellini bean|white bean|great northern bean|navy bean", "white beans"),
    _family(r"chickpea|garbanzo bean|canned chickpea", "chickpeas"),
    _family(r"lentil|green lentil|brown lentil|red lentil", "lentils"),
    # Nuts
    _family(r"almond|whole almond|sliced almond|slivered almond", "almonds"),
    _family(r"walnut|walnut half|walnut piece", "walnuts"),
    _family(r"pecan|pecan half|pecan piece", "pecans"),
    _family(r"peanut|roasted peanut|unsalted peanut|salted peanut", "peanuts"),
    _family(r"cashew|roasted cashew", "cashews"),
    _family(r"pine nut|pignoli", "pine nuts"),
    # Produce
    _family(r"celery|celery stalk|celery rib", "celery"),
    _family(r"carrot|baby carrot", "carrot"),
    _family(r"sweet potato|yam", "sweet potato"),
    _family(r"red potato|new potato|baby potato|fingerling", "red potato"),
    _family(
        r"potato|russet potato|idaho potato|baking potato|yukon gold|yellow potato",
        "potato",
    ),
    _family(
        r"lettuce|romaine|romaine lettuce|iceberg|iceberg lettuce|butter lettuce|bibb lettuce",
        "lettuce",
    ),
    _family(r"spinach|baby spinach|fresh spinach", "spinach"),
    _family(r"kale|curly kale|lacinato kale|tuscan kale", "kale"),
    _family(r"arugula|rocket", "arugula"),
    _family(r"mixed greens|salad greens|spring mix|mesclun", "mixed greens"),
    _family(r"portobello|portabella|portabello mushroom", "portobello mushroom"),
    _family(r"shiitake|shiitake mushroom", "shiitake mushroom"),
    _family(
        r"mushroom|white mushroom|button mushroom|cremini|crimini|baby bella",
        "mushroom",
    ),
    _family(r"cucumber|english cucumber|persian cucumber|hothouse cucumber", "cucumber"),
    _family(r"avocado|hass avocado|ripe avocado", "avocado"),
    _family(r"corn on the cob|ear of corn", "corn on the cob"),
    _family(r"cornstarch|corn starch", "cornstarch"),
    _family(
        r"corn(?!\s+(?:starch|syrup|meal|tortillas?))|sweet corn|corn kernel|canned corn",
        "corn",
    ),
    _family(r"broccoli|broccoli floret|broccoli crown", "broccoli"),
    _family(r"cauliflower|cauliflower floret", "cauliflower"),
    _family(r"asparagus|asparagus spear", "asparagus"),
    _family(r"snow pea", "snow peas"),
    _family(r"sugar snap pea|snap pea", "sugar snap peas"),
    _family(r"pea|green pea|english pea|garden pea", "peas"),
    _family(r"red cabbage|purple cabbage", "red cabbage"),
    _family(r"napa cabbage|chinese cabbage", "napa cabbage"),
    _family(r"cabbage|green cabbage|white cabbage", "cabbage"),
    _family(r"eggplant|aubergine", "eggplant"),
    # Hot peppers (kept apart from bell peppers)
    _family(r"jalapeño|jalapeno|jalapeño pepper|jalapeno pepper", "jalapeño"),
    _family(r"serrano|serrano pepper", "serrano pepper"),
    _family(r"habanero|habanero pepper", "habanero pepper"),
    _family(r"poblano|poblano pepper", "poblano pepper"),
    _family(r"chipotle|chipotle pepper|chipotle in adobo", "chipotle pepper"),
    # Baking
    _family(r"vanilla|vanilla extract|pure vanilla extract|vanilla bean", "vanilla extract"),
    _family(
        r"chocolate chip|semi[- ]?sweet chocolate chip|milk chocolate chip"
        r"|dark chocolate chip",
        "chocolate chips",
    ),
    _family(r"cocoa powder|unsweetened cocoa|dutch[- ]?process cocoa", "cocoa powder"),
    _family(r"baking chocolate|unsweetened chocolate", "baking chocolate"),
    _family(r"baking soda|bicarbonate of soda", "baking soda"),
    _family(r"baking powder", "baking powder"),
    _family(r"yeast|active dry yeast|instant yeast|rapid rise yeast", "yeast"),
    _family(r"rolled oats|old[- ]?fashioned oats|quick oats|oats", "oats"),
)

FAMILY_CANONICAL_KEYS: tuple[str, ...] = tuple(
    dict.fromkeys(rule.canonical for rule in INGREDIENT_FAMILIES)
)

# =============================================================================
# Plurals
# =============================================================================

IRREGULAR_PLURALS: dict[str, str] = {
    "tomatoes": "tomato",
    "potatoes": "potato",
    "mangoes": "mango",
    "leaves": "leaf",
    "halves": "half",
    "loaves": "loaf",
    "knives": "knife",
    "shelves": "shelf",
}

# Words that end in "s" but are not plurals
INVARIANT_WORDS: frozenset[str] = frozenset(
    {"asparagus", "hummus", "couscous", "molasses", "citrus", "grits", "swiss", "chives"}
)


# =============================================================================
# Lookups
# =============================================================================


def match_ingredient_family(text: str) -> FamilyRule | None:
    """Return the first family rule matching the text, in authoring order."""
    if not text:
        return None
    for rule in INGREDIENT_FAMILIES:
        if rule.matches(text):
            return rule
    return None


def singularize_word(word: str) -> str:
    """
    Singularize one lowercase word.

    Examples:
        "tomatoes" -> "tomato"
        "berries" -> "berry"
        "dishes" -> "dish"
        "glass" -> "glass"
    """
    if word in INVARIANT_WORDS:
        return word
    if word in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[word]
    if word.endswith("ies") and len(word) > 4:
        return word[:-3] + "y"
    if word.endswith(("shes", "ches", "xes", "sses")):
        return word[:-2]
    if word.endswith("s") and not word.endswith("ss") and len(word) > 3:
        return word[:-1]
    return word


def singularize(text: str) -> str:
    """Singularize the last word of a phrase ("red lentils" -> "red lentil")."""
    head, _, last = text.rpartition(" ")
    singular = singularize_word(last)
    return f"{head} {singular}" if head else singular


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]
