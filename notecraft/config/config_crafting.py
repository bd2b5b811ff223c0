# notecraft/config/config_crafting.py
"""
Configuration for recipe discovery, the craft menu and annotation-driven predicates.
"""

# --- Menu ---
CRAFT_MENU_NAME = "Craft"
CRAFT_LIST_COLUMNS = 3
CRAFT_LIST_WRAP = True
DETAILS_HEIGHT = 340  # Pixels reserved for the details pane under the list

# --- Recipe Annotations ---
RECIPE_OPEN_TAG = "<recipe>"
RECIPE_CLOSE_TAG = "</recipe>"
# "multi" reads every recipe block in a note; "first" is the legacy single-block mode.
RECIPE_PARSE_MODE = "multi"

# Kinds scanned for recipes, in catalog order.
CRAFTABLE_KINDS = ("Item", "Weapon", "Armor")
KIND_ALIASES = {"consumable": "Item"}

UNKNOWN_ENTITY_NAME = "Unknown Item"

# --- Economy ---
CURRENCY_NAME = "gold"

# --- Feedback ---
NOTIFICATION_DURATION = 2.0  # Seconds a craft outcome stays on screen
SOUND_CRAFT_SUCCESS = "shop"
SOUND_CRAFT_FAILURE = "buzzer"

MSG_CRAFT_SUCCESS = "Crafted successfully!"
MSG_READY = "Ready to craft."
MSG_INVALID_RECIPE = "Invalid recipe."
MSG_CANNOT_CRAFT = "Cannot craft this item."

# --- Targeting ---
# States carrying this tag in their note make a combatant unselectable as a target.
NONTARGETABLE_TAG = "<SP variable>nontargetable</SP variable>"
