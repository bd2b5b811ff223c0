# notecraft/crafting/recipe_parser.py
"""
Reads crafting recipes out of entity notes.

A note may hold any number of blocks like:

    <recipe>
    Result: Item 1
    Material1: Item 8, 1
    Material2: Item 9, 1
    Description: Potion to heal
    Requirement: Item 7
    Cost: 50
    </recipe>

Keys are case-insensitive and must appear in this order. Description,
Requirement and Cost are optional; Material1..MaterialN are numbered from 1.
Blocks that do not follow the grammar are skipped, never raised to callers.
"""
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional

from notecraft.config import RECIPE_CLOSE_TAG, RECIPE_OPEN_TAG, RECIPE_PARSE_MODE
from notecraft.crafting.recipe import Material, Recipe
from notecraft.items.entity import EntityRef, normalize_kind
from notecraft.utils.logger import Logger

_BLOCK_RE = re.compile(
    # The body may not run past another opener, so an unclosed block cannot swallow the next one.
    re.escape(RECIPE_OPEN_TAG) + r"((?:(?!" + re.escape(RECIPE_OPEN_TAG) + r").)*?)" + re.escape(RECIPE_CLOSE_TAG),
    re.IGNORECASE | re.DOTALL,
)
_FIELD_RE = re.compile(r"^([A-Za-z]+\d*)\s*:(.*)$")
_REF_RE = re.compile(r"^([A-Za-z]+)\s*(\d+)$")
_MATERIAL_RE = re.compile(r"^([A-Za-z]+)\s*(\d+)\s*,\s*(\d+)$")
_INT_RE = re.compile(r"^\d+$")


class RecipeSyntaxError(ValueError):
    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


@dataclass(frozen=True)
class Token:
    key: str    # lowercased field name, e.g. "material1"
    value: str
    line: int   # 1-based, relative to the block body


def tokenize_block(body: str) -> List[Token]:
    """Splits a block body into one token per non-blank line."""
    tokens: List[Token] = []
    for line_no, raw in enumerate(body.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        match = _FIELD_RE.match(line)
        if not match:
            raise RecipeSyntaxError(f"expected 'Key: value', got {line!r}", line_no)
        tokens.append(Token(match.group(1).lower(), match.group(2).strip(), line_no))
    return tokens


class _TokenStream:
    def __init__(self, tokens: List[Token]):
        self._tokens = tokens
        self._pos = 0

    def peek(self) -> Optional[Token]:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def take(self, key: str) -> Optional[Token]:
        """Consumes the next token if it carries `key`."""
        token = self.peek()
        if token is None or token.key != key:
            return None
        self._pos += 1
        return token

    def expect(self, key: str) -> Token:
        token = self.take(key)
        if token is None:
            found = self.peek()
            where = f"found '{found.key}'" if found else "block ended"
            raise RecipeSyntaxError(f"expected '{key}', {where}", found.line if found else None)
        return token


def _parse_kind(name: str, token: Token) -> str:
    kind = normalize_kind(name)
    if kind is None or kind == "State":
        raise RecipeSyntaxError(f"unknown entity kind {name!r}", token.line)
    return kind


def _parse_ref(token: Token) -> EntityRef:
    match = _REF_RE.match(token.value)
    if not match:
        raise RecipeSyntaxError(f"'{token.key}' expects '<Kind> <id>', got {token.value!r}", token.line)
    kind = _parse_kind(match.group(1), token)
    try:
        return EntityRef(kind, int(match.group(2)))
    except ValueError as e:
        raise RecipeSyntaxError(str(e), token.line) from e


def _parse_material(token: Token) -> Material:
    match = _MATERIAL_RE.match(token.value)
    if not match:
        raise RecipeSyntaxError(f"'{token.key}' expects '<Kind> <id>, <quantity>', got {token.value!r}", token.line)
    kind = _parse_kind(match.group(1), token)
    try:
        return Material(EntityRef(kind, int(match.group(2))), int(match.group(3)))
    except ValueError as e:
        raise RecipeSyntaxError(str(e), token.line) from e


def _parse_int(token: Token) -> int:
    if not _INT_RE.match(token.value):
        raise RecipeSyntaxError(f"'{token.key}' expects a non-negative integer, got {token.value!r}", token.line)
    return int(token.value)


def parse_block(body: str, source: Optional[EntityRef] = None) -> Recipe:
    """Parses the text between the recipe tags. Raises RecipeSyntaxError."""
    stream = _TokenStream(tokenize_block(body))

    result = _parse_ref(stream.expect("result"))

    materials: List[Material] = []
    while True:
        token = stream.take(f"material{len(materials) + 1}")
        if token is None:
            break
        materials.append(_parse_material(token))
    if not materials:
        stream.expect("material1")

    description_token = stream.take("description")
    requirement_token = stream.take("requirement")
    cost_token = stream.take("cost")

    leftover = stream.peek()
    if leftover is not None:
        raise RecipeSyntaxError(f"unexpected field '{leftover.key}'", leftover.line)

    return Recipe(
        result=result,
        materials=tuple(materials),
        description=description_token.value if description_token else "",
        requirement=_parse_ref(requirement_token) if requirement_token else None,
        cost=_parse_int(cost_token) if cost_token else 0,
        source=source,
    )


def iter_blocks(note: str) -> Iterator[str]:
    for match in _BLOCK_RE.finditer(note or ""):
        yield match.group(1)


def parse_recipes(note: str, source: Optional[EntityRef] = None) -> List[Recipe]:
    """Every well-formed recipe block in the note, in order of appearance."""
    recipes: List[Recipe] = []
    for index, body in enumerate(iter_blocks(note), start=1):
        try:
            recipes.append(parse_block(body, source))
        except RecipeSyntaxError as e:
            Logger.debug("RecipeParser", f"Skipping recipe block {index} of {source or 'note'}: {e}")
    return recipes


def parse_first_recipe(note: str, source: Optional[EntityRef] = None) -> Optional[Recipe]:
    """Legacy single-recipe mode: only the first well-formed block counts."""
    for body in iter_blocks(note):
        try:
            return parse_block(body, source)
        except RecipeSyntaxError as e:
            Logger.debug("RecipeParser", f"Skipping recipe block of {source or 'note'}: {e}")
    return None


def parse_note(note: str, source: Optional[EntityRef] = None, multi: Optional[bool] = None) -> List[Recipe]:
    """Parses a note in the configured mode (RECIPE_PARSE_MODE) unless `multi` is given."""
    if multi is None:
        multi = RECIPE_PARSE_MODE != "first"
    if multi:
        return parse_recipes(note, source)
    recipe = parse_first_recipe(note, source)
    return [recipe] if recipe else []


def render_recipe(recipe: Recipe) -> str:
    """Writes a recipe back out in the canonical block layout."""
    lines = [RECIPE_OPEN_TAG, f"Result: {recipe.result}"]
    for number, material in enumerate(recipe.materials, start=1):
        lines.append(f"Material{number}: {material.ref}, {material.quantity}")
    if recipe.description:
        lines.append(f"Description: {recipe.description}")
    if recipe.requirement:
        lines.append(f"Requirement: {recipe.requirement}")
    if recipe.cost:
        lines.append(f"Cost: {recipe.cost}")
    lines.append(RECIPE_CLOSE_TAG)
    return "\n".join(lines)


def check_note(note: str) -> List[str]:
    """Authoring aid: one message per recipe block that would be skipped."""
    problems = []
    for index, body in enumerate(iter_blocks(note), start=1):
        try:
            parse_block(body)
        except RecipeSyntaxError as e:
            problems.append(f"recipe block {index}: {e}")
    return problems
