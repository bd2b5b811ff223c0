# notecraft/commands/__init__.py
"""
Commands package initializer.
Importing a command module registers its handlers with the command system.
"""
import importlib
import os

from notecraft.utils.logger import Logger

package_dir = os.path.dirname(__file__)
package_name = __name__

for item in sorted(os.listdir(package_dir)):
    if item.endswith(".py") and not item.startswith("__") and item != "command_system.py":
        module_name = item[:-3]
        try:
            importlib.import_module(f".{module_name}", package=package_name)
            Logger.debug("Commands", f"Loaded module: {module_name}")
        except ImportError as e:
            Logger.error("Commands", f"Failed to load module '{module_name}': {e}")
