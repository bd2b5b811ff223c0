# notecraft/commands/crafting.py
from typing import Optional

from notecraft.commands.command_system import CommandProcessor, command
from notecraft.config import (
    FORMAT_CATEGORY, FORMAT_ERROR, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_SUCCESS, FORMAT_TITLE
)
from notecraft.crafting.crafting_manager import CraftingManager
from notecraft.crafting.recipe_parser import check_note
from notecraft.ui.craft_details import describe_recipe


def _resolve_index(manager: CraftingManager, text: str) -> Optional[int]:
    """Catalog index from a 1-based number or a piece of the result name."""
    if text.isdigit():
        index = int(text) - 1
        return index if 0 <= index < len(manager.catalog) else None
    return manager.catalog.find(text)


@command("recipes", ["craftlist"], "crafting", "List the recipes you can see.\nUsage: recipes")
def recipes_handler(args, context):
    manager: CraftingManager = context["manager"]
    recipes = manager.refresh_catalog()

    out = [f"{FORMAT_TITLE}CRAFTING{FORMAT_RESET}",
           f"{manager.currency_name.title()}: {manager.inventory.currency()}",
           "-" * 20]
    if not recipes:
        out.append("No recipes available.")
        return "\n".join(out)

    for number, recipe in enumerate(recipes, start=1):
        can_do, reason = manager.can_craft(recipe)
        prefix = f"{FORMAT_SUCCESS}[Ready]{FORMAT_RESET}" if can_do else f"{FORMAT_ERROR}[Locked]{FORMAT_RESET}"
        name = manager.registry.name_of(recipe.result)
        line = f"{number:>3}. {prefix} {FORMAT_HIGHLIGHT}{name}{FORMAT_RESET}"
        if not can_do:
            line += f" ({reason})"
        out.append(line)
    out.append("(Type 'recipe <number>' for details, 'craft <number>' to craft)")
    return "\n".join(out)


@command("recipe", ["inspect"], "crafting", "Show the details of one recipe.\nUsage: recipe <number|name>")
def recipe_handler(args, context):
    manager: CraftingManager = context["manager"]
    if not args:
        return f"{FORMAT_ERROR}Which recipe? Usage: recipe <number|name>{FORMAT_RESET}"

    index = _resolve_index(manager, " ".join(args))
    recipe = manager.catalog.get(index)
    if recipe is None:
        return f"{FORMAT_ERROR}Unknown recipe '{' '.join(args)}'.{FORMAT_RESET}"

    name = manager.registry.name_of(recipe.result)
    out = [f"{FORMAT_TITLE}{name}{FORMAT_RESET}"]
    out.extend(describe_recipe(recipe, manager.registry, manager.currency_name))
    can_do, reason = manager.can_craft(recipe)
    color = FORMAT_SUCCESS if can_do else FORMAT_ERROR
    out.append(f"{color}{reason}{FORMAT_RESET}")
    return "\n".join(out)


@command("craft", ["make"], "crafting", "Craft an item.\nUsage: craft <number|name>")
def craft_handler(args, context):
    manager: CraftingManager = context["manager"]
    if not args:
        return f"{FORMAT_ERROR}Craft what? Usage: craft <number|name> (Use 'recipes' to see list){FORMAT_RESET}"

    index = _resolve_index(manager, " ".join(args))
    recipe = manager.catalog.get(index)
    if recipe is None:
        return f"{FORMAT_ERROR}Unknown recipe '{' '.join(args)}'.{FORMAT_RESET}"

    outcome = manager.craft(recipe)
    if outcome.success:
        name = manager.registry.name_of(recipe.result)
        return f"{FORMAT_SUCCESS}{outcome.message}{FORMAT_RESET} You made {FORMAT_HIGHLIGHT}{name}{FORMAT_RESET}."
    return f"{FORMAT_ERROR}{outcome.message}{FORMAT_RESET}"


@command("checknotes", ["lint"], "crafting", "Report recipe annotations that fail to parse.\nUsage: checknotes")
def checknotes_handler(args, context):
    manager: CraftingManager = context["manager"]
    out = [f"{FORMAT_TITLE}RECIPE NOTES{FORMAT_RESET}"]
    problem_count = 0
    for entity in manager.registry.iter_craftable():
        for problem in check_note(entity.note):
            out.append(f"{FORMAT_CATEGORY}{entity.ref} ({entity.name}){FORMAT_RESET}: {problem}")
            problem_count += 1

    if problem_count == 0:
        out.append(f"{FORMAT_SUCCESS}All recipe notes parse.{FORMAT_RESET}")
    else:
        out.append(f"{FORMAT_ERROR}{problem_count} problem(s) found.{FORMAT_RESET}")
    return "\n".join(out)


@command("help", ["?"], "system", "Show available commands.\nUsage: help [command]")
def help_handler(args, context):
    processor = context.get("processor") or CommandProcessor()
    return processor.get_command_help(args[0] if args else None)
