"""
Initializes the config package, making all settings available for direct import.
Modules use `from notecraft.config import SETTING_NAME` without knowing which
file the setting lives in.
"""

from .config_display import *
from .config_game import *
from .config_crafting import *
