"""Constants for family record parsing and kinship naming."""

# Recognised gender tags; anything else is treated as neutral
GENDERS = ("male", "female", "neutral")
DEFAULT_GENDER = "neutral"

# Fields inherited from parent to child when the child's own value is empty
INHERITED_COLOR_FIELDS = ("background_color", "text_color")

# Placeholder shown when the family record cannot be loaded
FALLBACK_FIRST_NAME = "Family Data Not Found"

SELECTION_MODES = ("single", "dual")
SELECTION_SLOTS = ("primary", "secondary")

ORDINALS = {
    1: "first",
    2: "second",
    3: "third",
    4: "fourth",
    5: "fifth",
    6: "sixth",
    7: "seventh",
    8: "eighth",
    9: "ninth",
    10: "tenth",
}

# (male, female, neutral) forms keyed by kinship stem
TERMS = {
    "self": ("self", "self", "self"),
    "child": ("son", "daughter", "child"),
    "grandchild": ("grandson", "granddaughter", "grandchild"),
    "parent": ("father", "mother", "parent"),
    "grandparent": ("grandfather", "grandmother", "grandparent"),
    "sibling": ("brother", "sister", "sibling"),
    "pibling": ("uncle", "aunt", "aunt/uncle"),
    "nibling": ("nephew", "niece", "nephew/niece"),
}
