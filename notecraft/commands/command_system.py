# notecraft/commands/command_system.py
from typing import Any, Dict, List, Optional
from functools import wraps

from notecraft.config import FORMAT_CATEGORY, FORMAT_ERROR, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_TITLE

# Dictionary to store all registered commands
registered_commands: Dict[str, Dict[str, Any]] = {}
command_groups: Dict[str, List[Dict[str, Any]]] = {"crafting": [], "system": []}


def command(name: str, aliases: Optional[List[str]] = None, category: str = "system",
            help_text: str = "No help available."):
    """
    Decorator for registering text commands.
    Handlers are called as handler(args, context) and return the text to show.
    """
    aliases = aliases or []

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        cmd_data = {
            "name": name,
            "aliases": aliases,
            "handler": wrapper,
            "help_text": help_text,
            "category": category,
        }

        registered_commands[name] = cmd_data
        for alias in aliases:
            registered_commands[alias] = cmd_data
        command_groups.setdefault(category, []).append(cmd_data)
        return wrapper
    return decorator


def get_registered_commands() -> Dict[str, Dict[str, Any]]:
    return registered_commands


class CommandProcessor:
    """Processes user input and dispatches commands to appropriate handlers."""

    def process_input(self, text: str, context: Any = None) -> str:
        """
        Execute the command named by the input, matching the longest
        multi-word command first. The rest of the words become arguments.
        """
        parts = text.strip().split()
        if not parts:
            return ""

        for i in range(len(parts), 0, -1):
            potential_cmd = " ".join(parts[:i]).lower()
            if potential_cmd in registered_commands:
                cmd_data = registered_commands[potential_cmd]
                if isinstance(context, dict):
                    context["executed_command_name"] = cmd_data["name"]
                return cmd_data["handler"](parts[i:], context)

        return f"{FORMAT_ERROR}Unknown command: {parts[0]}{FORMAT_RESET}"

    def get_command_help(self, name: Optional[str] = None) -> str:
        """Lists every command, or details one command."""
        if name:
            cmd = registered_commands.get(name.lower())
            if not cmd:
                return f"{FORMAT_ERROR}No help found for '{name}'.{FORMAT_RESET}"
            help_text = f"{FORMAT_TITLE}Command: {cmd['name'].upper()}{FORMAT_RESET}\n"
            if cmd["aliases"]:
                help_text += f"{FORMAT_CATEGORY}Aliases:{FORMAT_RESET} {', '.join(cmd['aliases'])}\n"
            for line in cmd["help_text"].split("\n"):
                help_text += f"  {line}\n"
            return help_text

        lines = [f"{FORMAT_TITLE}Commands{FORMAT_RESET}"]
        for category in sorted(cat for cat, cmds in command_groups.items() if cmds):
            lines.append(f"{FORMAT_CATEGORY}{category.capitalize()}{FORMAT_RESET}")
            for cmd in sorted(command_groups[category], key=lambda c: c["name"]):
                first_line = cmd["help_text"].split("\n")[0]
                lines.append(f"  {FORMAT_HIGHLIGHT}{cmd['name']}{FORMAT_RESET} - {first_line}")
        return "\n".join(lines)
