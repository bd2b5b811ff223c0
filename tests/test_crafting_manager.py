# tests/test_crafting_manager.py
import threading
import unittest
from unittest.mock import patch

from notecraft.core.event_system import (
    EVENT_CATALOG_REFRESHED, EVENT_CRAFT_BLOCKED, EVENT_CRAFT_SUCCEEDED, EVENT_SOUND_CUE
)
from notecraft.crafting.recipe import Material, Recipe
from tests.fixtures import CraftingTestBase, DUST, ETHER, EventRecorder, HERB, MORTAR, POTION, WATER


class TestCraftingManager(CraftingTestBase):

    def setUp(self):
        super().setUp()
        self.recorder = EventRecorder(self.events, EVENT_CATALOG_REFRESHED, EVENT_CRAFT_SUCCEEDED,
                                      EVENT_CRAFT_BLOCKED, EVENT_SOUND_CUE)

    def potion_recipe(self):
        self.manager.refresh_catalog()
        index = self.manager.catalog.find("potion")
        self.assertIsNotNone(index, "Potion recipe should be listed once the mortar is owned.")
        return self.manager.catalog.get(index)

    def test_end_to_end_potion(self):
        """Requirement is a gate: the mortar survives the craft."""
        self.give_potion_materials(gold=60)
        recipe = self.potion_recipe()

        self.assertEqual(self.manager.can_craft(recipe), (True, "Ready to craft."))
        outcome = self.manager.craft(recipe)

        self.assertTrue(outcome.success)
        self.assertEqual(outcome.message, "Crafted successfully!")
        self.assertEqual(self.inventory.quantity_of(HERB), 0)
        self.assertEqual(self.inventory.quantity_of(WATER), 0)
        self.assertEqual(self.inventory.quantity_of(POTION), 1)
        self.assertEqual(self.inventory.quantity_of(MORTAR), 1)
        self.assertEqual(self.inventory.currency(), 10)

        self.assertEqual(self.recorder.of_type(EVENT_CRAFT_SUCCEEDED), [outcome])
        self.assertEqual(self.recorder.of_type(EVENT_SOUND_CUE), ["shop"])

    def test_success_refreshes_catalog(self):
        self.give_potion_materials(gold=60)
        recipe = self.potion_recipe()
        refreshes = len(self.recorder.of_type(EVENT_CATALOG_REFRESHED))
        self.manager.craft(recipe)
        self.assertEqual(len(self.recorder.of_type(EVENT_CATALOG_REFRESHED)), refreshes + 1)

    def test_blocked_craft_changes_nothing(self):
        self.give(MORTAR)
        self.inventory.gain_currency(60)
        recipe = self.potion_recipe()

        outcome = self.manager.craft(recipe)

        self.assertFalse(outcome.success)
        self.assertEqual(outcome.message, "Not enough Herb.")
        self.assertEqual(self.inventory.currency(), 60)
        self.assertEqual(self.inventory.quantity_of(POTION), 0)
        self.assertEqual(self.recorder.of_type(EVENT_CRAFT_BLOCKED), [outcome])
        self.assertEqual(self.recorder.of_type(EVENT_SOUND_CUE), ["buzzer"])

    def test_invalid_recipe(self):
        outcome = self.manager.craft(None)
        self.assertFalse(outcome.success)
        self.assertEqual(outcome.message, "Invalid recipe.")

    def test_executor_refusal_uses_catch_all(self):
        recipe = Recipe(ETHER, (Material(DUST, 2), Material(DUST, 2)))
        self.give(DUST, 2)
        outcome = self.manager.craft(recipe)
        self.assertFalse(outcome.success)
        self.assertEqual(outcome.message, "Cannot craft this item.")
        self.assertEqual(self.inventory.quantity_of(DUST), 2)

    def test_craft_holds_inventory_lock(self):
        self.give_potion_materials(gold=60)
        recipe = self.potion_recipe()
        seen = []

        def spy(recipe_arg, inventory):
            def try_lock():
                acquired = inventory.lock.acquire(blocking=False)
                seen.append(acquired)
                if acquired:
                    inventory.lock.release()
            other = threading.Thread(target=try_lock)
            other.start()
            other.join()
            return True

        with patch("notecraft.crafting.crafting_manager.execute", side_effect=spy):
            self.manager.craft(recipe)
        self.assertEqual(seen, [False], "Another thread must not get the lock mid-craft.")

    def test_custom_currency_name(self):
        self.manager.currency_name = "Fairy Mass"
        self.give(HERB)
        self.give(WATER)
        self.give(MORTAR)
        recipe = self.potion_recipe()
        self.assertEqual(self.manager.craft(recipe).message, "Not enough Fairy Mass.")


if __name__ == '__main__':
    unittest.main()
