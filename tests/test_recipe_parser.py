# tests/test_recipe_parser.py
import unittest

from notecraft.crafting.recipe import Material, Recipe
from notecraft.crafting.recipe_parser import (
    RecipeSyntaxError, check_note, parse_block, parse_first_recipe, parse_note,
    parse_recipes, render_recipe, tokenize_block
)
from notecraft.items.entity import EntityRef
from tests.fixtures import CraftingTestBase, HERB, MORTAR, POTION, POTION_NOTE, WATER, DUST


class TestRecipeParser(CraftingTestBase):

    def test_full_block(self):
        """Every field of a complete block lands in the recipe."""
        recipes = parse_recipes(POTION_NOTE)
        self.assertEqual(len(recipes), 1)
        recipe = recipes[0]
        self.assertEqual(recipe.result, POTION)
        self.assertEqual(recipe.materials, (Material(HERB, 1), Material(WATER, 1)))
        self.assertEqual(recipe.description, "Potion to heal")
        self.assertEqual(recipe.requirement, MORTAR)
        self.assertEqual(recipe.cost, 50)

    def test_optional_fields_default(self):
        note = "<recipe>\nResult: Item 2\nMaterial1: Item 10, 2\n</recipe>"
        recipe = parse_recipes(note)[0]
        self.assertEqual(recipe.description, "")
        self.assertIsNone(recipe.requirement)
        self.assertEqual(recipe.cost, 0)

    def test_keys_and_kinds_are_case_insensitive(self):
        note = "<RECIPE>\nresult: weapon 1\nMATERIAL1: ITEM 8, 3\ncost: 5\n</Recipe>"
        recipe = parse_recipes(note)[0]
        self.assertEqual(recipe.result, EntityRef("Weapon", 1))
        self.assertEqual(recipe.materials[0], Material(HERB, 3))

    def test_consumable_alias(self):
        note = "<recipe>\nResult: Consumable 1\nMaterial1: Consumable 8, 1\n</recipe>"
        recipe = parse_recipes(note)[0]
        self.assertEqual(recipe.result, POTION)

    def test_blank_lines_and_spacing_ignored(self):
        note = "<recipe>\n\n  Result:   Item 1  \n\nMaterial1:Item 8 ,  1\n</recipe>"
        recipe = parse_recipes(note)[0]
        self.assertEqual(recipe.materials, (Material(HERB, 1),))

    def test_more_than_two_materials(self):
        note = ("<recipe>\nResult: Item 1\nMaterial1: Item 8, 1\n"
                "Material2: Item 9, 2\nMaterial3: Item 10, 3\n</recipe>")
        recipe = parse_recipes(note)[0]
        self.assertEqual([m.quantity for m in recipe.materials], [1, 2, 3])

    def test_multiple_blocks_in_one_note(self):
        note = POTION_NOTE + "\nflavour text\n" + "<recipe>\nResult: Item 2\nMaterial1: Item 10, 2\n</recipe>"
        recipes = parse_recipes(note)
        self.assertEqual([r.result for r in recipes], [POTION, EntityRef("Item", 2)])

    def test_source_recorded_but_not_compared(self):
        with_source = parse_recipes(POTION_NOTE, source=POTION)[0]
        without_source = parse_recipes(POTION_NOTE)[0]
        self.assertEqual(with_source.source, POTION)
        self.assertEqual(with_source, without_source)

    def test_malformed_blocks_are_skipped(self):
        """A broken block yields nothing and does not stop the next one."""
        bad_notes = [
            "<recipe>\nMaterial1: Item 8, 1\n</recipe>",                          # no result
            "<recipe>\nResult: Item 1\n</recipe>",                                # no material
            "<recipe>\nResult: Item 1\nMaterial2: Item 8, 1\n</recipe>",          # numbering skips 1
            "<recipe>\nResult: Item 1\nMaterial1: Item 8\n</recipe>",             # quantity missing
            "<recipe>\nResult: Item 1\nMaterial1: Item 8, 0\n</recipe>",          # zero quantity
            "<recipe>\nResult: Item 0\nMaterial1: Item 8, 1\n</recipe>",          # zero id
            "<recipe>\nResult: Gadget 1\nMaterial1: Item 8, 1\n</recipe>",        # unknown kind
            "<recipe>\nResult: State 1\nMaterial1: Item 8, 1\n</recipe>",         # not craftable
            "<recipe>\nResult: Item 1\nMaterial1: Item 8, 1\nCost: -5\n</recipe>",
            "<recipe>\nResult: Item 1\nMaterial1: Item 8, 1\nCost: 5\nDescription: late\n</recipe>",
            "<recipe>\nResult: Item 1\nMaterial1: Item 8, 1\nthis is prose\n</recipe>",
        ]
        for note in bad_notes:
            with self.subTest(note=note):
                self.assertEqual(parse_recipes(note), [])
                self.assertEqual(parse_recipes(note + "\n" + POTION_NOTE)[-1].result, POTION)

    def test_unclosed_block_is_ignored(self):
        self.assertEqual(parse_recipes("<recipe>\nResult: Item 1\nMaterial1: Item 8, 1\n"), [])

    def test_unclosed_block_does_not_swallow_the_next(self):
        note = "<recipe>\nResult: Item 3\n(author forgot to close)\n\n" + POTION_NOTE
        recipes = parse_recipes(note)
        self.assertEqual(len(recipes), 1)
        self.assertEqual(recipes[0].result, POTION)
        self.assertEqual(parse_first_recipe(note).result, POTION)
        self.assertEqual(check_note(note), [])

    def test_empty_and_missing_notes(self):
        self.assertEqual(parse_recipes(""), [])
        self.assertEqual(parse_recipes(None), [])
        self.assertEqual(parse_recipes("Just a description, no recipe here."), [])

    def test_first_recipe_mode(self):
        note = "<recipe>\nResult: Item 1\n</recipe>\n" + POTION_NOTE + "\n" + POTION_NOTE.replace("Item 1\n", "Item 2\n", 1)
        recipe = parse_first_recipe(note)
        self.assertEqual(recipe.result, POTION)
        self.assertEqual(len(parse_note(note, multi=False)), 1)
        self.assertEqual(len(parse_note(note, multi=True)), 2)
        self.assertIsNone(parse_first_recipe("no recipes"))

    def test_parse_block_raises_with_line(self):
        with self.assertRaises(RecipeSyntaxError) as ctx:
            parse_block("Result: Item 1\nMaterial1: Item 8, x")
        self.assertEqual(ctx.exception.line, 2)
        self.assertIn("line 2", str(ctx.exception))

    def test_tokenize_block(self):
        tokens = tokenize_block("Result: Item 1\n\nMaterial1: Item 8, 1")
        self.assertEqual([(t.key, t.value, t.line) for t in tokens],
                         [("result", "Item 1", 1), ("material1", "Item 8, 1", 3)])

    def test_render_round_trip(self):
        recipes = [
            parse_recipes(POTION_NOTE)[0],
            Recipe(EntityRef("Armor", 3), (Material(DUST, 4),)),
            Recipe(EntityRef("Weapon", 2), (Material(HERB, 1), Material(WATER, 2), Material(DUST, 3)),
                   description="Three parts", cost=7),
        ]
        for recipe in recipes:
            with self.subTest(recipe=recipe):
                reparsed = parse_recipes(render_recipe(recipe))
                self.assertEqual(reparsed, [recipe])

    def test_render_layout(self):
        text = render_recipe(parse_recipes(POTION_NOTE)[0])
        self.assertEqual(text.splitlines(), [
            "<recipe>",
            "Result: Item 1",
            "Material1: Item 8, 1",
            "Material2: Item 9, 1",
            "Description: Potion to heal",
            "Requirement: Item 7",
            "Cost: 50",
            "</recipe>",
        ])

    def test_check_note(self):
        note = POTION_NOTE + "\n<recipe>\nResult: Item 1\n</recipe>"
        problems = check_note(note)
        self.assertEqual(len(problems), 1)
        self.assertTrue(problems[0].startswith("recipe block 2:"))
        self.assertEqual(check_note(POTION_NOTE), [])


if __name__ == '__main__':
    unittest.main()
