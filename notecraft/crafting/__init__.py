# notecraft/crafting/__init__.py
"""
Crafting Package.
Parses recipe annotations, builds the catalog and applies crafts to an inventory.
"""
from .recipe import Material, Recipe
from .recipe_parser import RecipeSyntaxError, parse_recipes, render_recipe
from .catalog import RecipeCatalog, build_catalog
from .crafting_manager import CraftingManager, CraftOutcome
