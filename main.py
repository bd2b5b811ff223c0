import argparse
import json
import os
import sys

from notecraft.config import BG_COLOR, DATA_DIR, DEFAULT_PARTY_FILE, SCREEN_HEIGHT, SCREEN_WIDTH, TARGET_FPS
from notecraft.core.event_system import EVENT_SOUND_CUE, EventSystem
from notecraft.crafting.crafting_manager import CraftingManager
from notecraft.items.entity_registry import EntityRegistry
from notecraft.items.inventory import PartyInventory
from notecraft.utils.logger import Logger
from notecraft.utils.text_format import remove_format_codes
import notecraft.commands
from notecraft.commands.command_system import CommandProcessor


def main():
    parser = argparse.ArgumentParser(description='Note-driven crafting menu')
    parser.add_argument('--data', '-d', type=str, default=DATA_DIR,
                        help='Directory holding Items.json, Weapons.json, Armors.json and States.json')
    parser.add_argument('--party', '-p', type=str, default=DEFAULT_PARTY_FILE,
                        help='Party inventory file (default: data/party.json)')
    parser.add_argument('--text', '-t', action='store_true',
                        help='Use the text command prompt instead of the pygame window')
    args = parser.parse_args()

    registry = EntityRegistry.from_data_dir(args.data)
    inventory = load_party(args.party)
    events = EventSystem()
    events.subscribe(EVENT_SOUND_CUE, lambda _event, cue: Logger.debug("Sound", f"Play '{cue}'"))
    manager = CraftingManager(registry, inventory, events)

    if args.text:
        run_text(manager)
    else:
        run_window(manager)


def load_party(path: str) -> PartyInventory:
    if not os.path.exists(path):
        Logger.warning("Main", f"Party file '{path}' not found; starting with an empty inventory.")
        return PartyInventory()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return PartyInventory.from_dict(json.load(f))
    except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        Logger.error("Main", f"Could not load party file '{path}': {e}")
        return PartyInventory()


def run_text(manager: CraftingManager):
    processor = CommandProcessor()
    context = {"manager": manager, "processor": processor}
    print(remove_format_codes(processor.process_input("recipes", context)))
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        if line.strip().lower() in ("quit", "exit"):
            break
        output = processor.process_input(line, context)
        if output:
            print(remove_format_codes(output))


def run_window(manager: CraftingManager):
    import pygame
    from notecraft.ui.craft_menu import CLOSE_MENU, CraftMenu

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("Crafting")
    clock = pygame.time.Clock()

    menu = CraftMenu(manager, pygame.Rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT))
    menu.open()

    running = True
    while running:
        clock.tick(TARGET_FPS)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif menu.handle_event(event) == CLOSE_MENU:
                running = False

        screen.fill(BG_COLOR)
        menu.render(screen)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
