# notecraft/config/config_game.py
"""
Configuration for file paths and logging.
"""
import os

# --- Directories and Files ---
# config_game.py is in notecraft/config/, so we go up three levels to get to root.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DATA_DIR = os.path.join(BASE_DIR, "data")
DEFAULT_PARTY_FILE = os.path.join(DATA_DIR, "party.json")

# Entity data files, RPG Maker MV layout (array indexed by id, slot 0 is null)
ENTITY_DATA_FILES = {
    "Item": "Items.json",
    "Weapon": "Weapons.json",
    "Armor": "Armors.json",
    "State": "States.json",
}

# --- Logging ---
# 0 = DEBUG, 1 = INFO, 2 = WARNING, 3 = ERROR, 4 = CRITICAL
LOG_LEVEL = int(os.environ.get("NOTECRAFT_LOG_LEVEL", "1"))
