# notecraft/ui/craft_menu.py
import pygame
from typing import Any, List, Optional

from notecraft.config import (
    COLOR_GREEN, COLOR_RED, CRAFT_LIST_COLUMNS, CRAFT_LIST_WRAP, CRAFT_MENU_NAME,
    CURSOR_COLOR, DETAILS_HEIGHT, DISABLED_TEXT_COLOR, FONT_NAME, FONT_SIZE, LINE_HEIGHT,
    PANEL_BG_COLOR, PANEL_BORDER_COLOR, TEXT_COLOR, TITLE_COLOR, TITLE_FONT_SIZE
)
from notecraft.core.event_system import (
    EVENT_CATALOG_REFRESHED, EVENT_CRAFT_BLOCKED, EVENT_CRAFT_SUCCEEDED, EVENT_RECIPE_SELECTED
)
from notecraft.crafting.crafting_manager import CraftingManager, CraftOutcome
from notecraft.crafting.recipe import Recipe
from notecraft.ui.craft_details import describe_recipe
from notecraft.ui.notification import CraftNotification
from notecraft.ui.selection import SelectionState

# Layout
PADDING = 10
HEADER_HEIGHT = PADDING * 4

CLOSE_MENU = "CLOSE_MENU"


class CraftMenu:
    """
    Recipe browser: a multi-column list of craftable results, a details pane
    for the selected recipe and a transient outcome message.
    """

    def __init__(self, manager: CraftingManager, rect: pygame.Rect,
                 columns: int = CRAFT_LIST_COLUMNS, row_height: int = LINE_HEIGHT,
                 wrap: bool = CRAFT_LIST_WRAP,
                 notification: Optional[CraftNotification] = None):
        self.manager = manager
        self.rect = pygame.Rect(rect)
        self.row_height = row_height
        self.wrap = wrap
        self.notification = notification or CraftNotification()
        self.font: Optional[pygame.font.Font] = None
        self.title_font: Optional[pygame.font.Font] = None

        self.selection = SelectionState(
            columns=columns,
            viewport_height=self.list_rect.height,
            row_height=row_height,
            on_select=self._on_select,
        )

        events = self.manager.events
        events.subscribe(EVENT_CATALOG_REFRESHED, self._on_catalog_refreshed)
        events.subscribe(EVENT_CRAFT_SUCCEEDED, self._on_outcome)
        events.subscribe(EVENT_CRAFT_BLOCKED, self._on_outcome)

    # --- Layout ---

    @property
    def list_rect(self) -> pygame.Rect:
        height = max(self.row_height, self.rect.height - HEADER_HEIGHT - DETAILS_HEIGHT - PADDING)
        return pygame.Rect(self.rect.x + PADDING, self.rect.y + HEADER_HEIGHT,
                           self.rect.width - PADDING * 2, height)

    @property
    def details_rect(self) -> pygame.Rect:
        top = self.list_rect.bottom + PADDING
        return pygame.Rect(self.rect.x + PADDING, top,
                           self.rect.width - PADDING * 2, max(0, self.rect.bottom - top - PADDING))

    @property
    def notification_rect(self) -> pygame.Rect:
        width = self.rect.width // 2
        return pygame.Rect(self.rect.x + (self.rect.width - width) // 2,
                           self.rect.y + PADDING // 2, width, HEADER_HEIGHT - PADDING)

    def item_rect(self, index: int) -> pygame.Rect:
        """Screen rect of a list entry, offset by the current scroll."""
        area = self.list_rect
        columns = self.selection.columns
        width = area.width // columns
        row = index // columns - self.selection.scroll_top_row
        return pygame.Rect(area.x + (index % columns) * width, area.y + row * self.row_height,
                           width, self.row_height)

    def hit_test(self, pos) -> Optional[int]:
        if not self.list_rect.collidepoint(pos):
            return None
        for index in range(self.selection.top_index, self.selection.bottom_index):
            if self.item_rect(index).collidepoint(pos):
                return index
        return None

    # --- State ---

    @property
    def selected_recipe(self) -> Optional[Recipe]:
        return self.manager.catalog.get(self.selection.cursor)

    def open(self) -> None:
        """Rebuilds the catalog and puts the cursor on the first recipe."""
        self.manager.refresh_catalog()
        self.selection.select(0)

    def commit(self) -> CraftOutcome:
        return self.manager.craft(self.selected_recipe)

    def _on_select(self, index: int) -> None:
        self.manager.events.publish(EVENT_RECIPE_SELECTED, self.manager.catalog.get(index))

    def _on_catalog_refreshed(self, event_type: str, recipes: List[Recipe]) -> None:
        self.selection.reset(len(recipes))
        self.manager.events.publish(EVENT_RECIPE_SELECTED, self.selected_recipe)

    def _on_outcome(self, event_type: str, outcome: CraftOutcome) -> None:
        self.notification.show(outcome.message, COLOR_GREEN if outcome.success else COLOR_RED)

    # --- Input ---

    def handle_event(self, event: Any) -> Optional[str]:
        """
        Routes a pygame event to the list.
        Returns "CLOSE_MENU" when the player backs out, None otherwise.
        """
        if event.type == pygame.KEYDOWN:
            return self._handle_key(event.key)

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            index = self.hit_test(event.pos)
            if index is None:
                return None
            if index == self.selection.cursor:
                self.commit()
            else:
                self.selection.select(index)
        elif event.type == pygame.MOUSEWHEEL:
            self.selection.set_top_row(self.selection.scroll_top_row - event.y)
        return None

    def _handle_key(self, key: int) -> Optional[str]:
        selection = self.selection
        if key == pygame.K_DOWN:
            selection.move_down(self.wrap)
        elif key == pygame.K_UP:
            selection.move_up(self.wrap)
        elif key == pygame.K_RIGHT:
            selection.move_right(self.wrap)
        elif key == pygame.K_LEFT:
            selection.move_left(self.wrap)
        elif key == pygame.K_PAGEDOWN:
            selection.page_down()
        elif key == pygame.K_PAGEUP:
            selection.page_up()
        elif key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
            self.commit()
        elif key == pygame.K_ESCAPE:
            return CLOSE_MENU
        return None

    # --- Drawing ---

    def _ensure_fonts(self) -> None:
        if self.font and self.title_font:
            return
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.title_font = pygame.font.SysFont(FONT_NAME, TITLE_FONT_SIZE, bold=True)

    def render(self, screen: pygame.Surface) -> None:
        self._ensure_fonts()
        font, title_font = self.font, self.title_font

        pygame.draw.rect(screen, PANEL_BG_COLOR, self.rect)
        pygame.draw.rect(screen, PANEL_BORDER_COLOR, self.rect, 2)

        title_surf = title_font.render(CRAFT_MENU_NAME, True, TITLE_COLOR)
        screen.blit(title_surf, (self.rect.x + PADDING, self.rect.y + PADDING))

        purse = f"{self.manager.currency_name.title()}: {self.manager.inventory.currency()}"
        purse_surf = font.render(purse, True, TEXT_COLOR)
        screen.blit(purse_surf, (self.rect.right - purse_surf.get_width() - PADDING, self.rect.y + PADDING + 5))

        self._render_list(screen, font)
        self._render_details(screen, font)

        self.notification.update()
        self.notification.draw(screen, font, self.notification_rect)

    def _render_list(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        area = self.list_rect
        pygame.draw.rect(screen, PANEL_BORDER_COLOR, area, 1)
        if self.selection.is_empty:
            empty_surf = font.render("No recipes available.", True, DISABLED_TEXT_COLOR)
            screen.blit(empty_surf, (area.x + 5, area.y + 5))
            return

        registry = self.manager.registry
        # Only the rows inside the viewport are drawn.
        for index in range(self.selection.top_index, self.selection.bottom_index):
            recipe = self.manager.catalog.get(index)
            if recipe is None:
                continue
            cell = self.item_rect(index)
            if index == self.selection.cursor:
                pygame.draw.rect(screen, CURSOR_COLOR, cell)
            craftable, _ = self.manager.can_craft(recipe)
            color = TEXT_COLOR if craftable else DISABLED_TEXT_COLOR
            name_surf = font.render(registry.name_of(recipe.result), True, color)
            screen.blit(name_surf, (cell.x + 5, cell.y + (cell.height - name_surf.get_height()) // 2))

    def _render_details(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        area = self.details_rect
        if area.height <= 0:
            return
        pygame.draw.rect(screen, PANEL_BORDER_COLOR, area, 1)
        lines = describe_recipe(self.selected_recipe, self.manager.registry, self.manager.currency_name)
        y = area.y + 5
        for line in lines:
            if y + font.get_linesize() > area.bottom:
                break
            screen.blit(font.render(line, True, TEXT_COLOR), (area.x + 5, y))
            y += font.get_linesize()
