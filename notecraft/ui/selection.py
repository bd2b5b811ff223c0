# notecraft/ui/selection.py
"""
Cursor and scroll bookkeeping for a multi-column list shown through a
fixed-height viewport.

The list is laid out row-major: index i sits in row i // columns and column
i % columns. Only `visible_rows` full rows starting at `scroll_top_row` are on
screen, and every cursor change scrolls just enough to keep the cursor row
visible.
"""
from typing import Callable, Optional

SelectCallback = Callable[[int], None]


class SelectionState:
    def __init__(self, columns: int = 1, viewport_height: int = 0, row_height: int = 1,
                 item_count: int = 0, on_select: Optional[SelectCallback] = None):
        if columns < 1:
            raise ValueError("A list needs at least one column.")
        if row_height < 1:
            raise ValueError("Row height must be positive.")
        self.columns = columns
        self.viewport_height = viewport_height
        self.row_height = row_height
        self.on_select = on_select
        self.item_count = 0
        self.cursor: Optional[int] = None
        self.scroll_top_row = 0
        self.reset(item_count)

    # --- Geometry ---

    @property
    def is_empty(self) -> bool:
        return self.item_count == 0

    @property
    def row_count(self) -> int:
        return -(-self.item_count // self.columns)

    @property
    def visible_rows(self) -> int:
        # A viewport shorter than one row still shows the cursor row.
        return max(1, self.viewport_height // self.row_height)

    @property
    def max_top_row(self) -> int:
        return max(0, self.row_count - self.visible_rows)

    @property
    def bottom_row(self) -> int:
        """First row below the viewport."""
        return self.scroll_top_row + self.visible_rows

    @property
    def top_index(self) -> int:
        return self.scroll_top_row * self.columns

    @property
    def bottom_index(self) -> int:
        """One past the last index drawn in the viewport."""
        return min(self.item_count, self.top_index + self.visible_rows * self.columns)

    def row_of(self, index: int) -> int:
        return index // self.columns

    def is_visible(self, index: int) -> bool:
        return self.top_index <= index < self.bottom_index

    def set_viewport(self, viewport_height: int, row_height: Optional[int] = None) -> None:
        self.viewport_height = viewport_height
        if row_height is not None:
            if row_height < 1:
                raise ValueError("Row height must be positive.")
            self.row_height = row_height
        self.set_top_row(self.scroll_top_row)
        self.ensure_cursor_visible()

    # --- Scrolling ---

    def set_top_row(self, row: int) -> None:
        self.scroll_top_row = min(max(row, 0), self.max_top_row)

    def set_bottom_row(self, row: int) -> None:
        """Scrolls so that `row - 1` is the last visible row."""
        self.set_top_row(row - self.visible_rows)

    def ensure_cursor_visible(self) -> None:
        if self.cursor is None:
            return
        row = self.row_of(self.cursor)
        if row < self.scroll_top_row:
            self.set_top_row(row)
        elif row > self.bottom_row - 1:
            self.set_bottom_row(row + 1)

    # --- Cursor ---

    def select(self, index: int) -> None:
        """Moves the cursor (clamped to the list) and reports the new selection."""
        if self.is_empty:
            return
        self.cursor = min(max(index, 0), self.item_count - 1)
        self.ensure_cursor_visible()
        if self.on_select:
            self.on_select(self.cursor)

    def move_down(self, wrap: bool = False) -> None:
        """One visual row down; past the last full row only when wrapping."""
        if self.cursor is None:
            return
        n = self.item_count
        if self.cursor < n - self.columns or wrap:
            self.select((self.cursor + self.columns) % n)

    def move_up(self, wrap: bool = False) -> None:
        if self.cursor is None:
            return
        n = self.item_count
        if self.cursor >= self.columns or wrap:
            self.select((self.cursor - self.columns + n) % n)

    def move_right(self, wrap: bool = False) -> None:
        if self.cursor is None or self.columns < 2:
            return
        n = self.item_count
        if self.cursor < n - 1 or wrap:
            self.select((self.cursor + 1) % n)

    def move_left(self, wrap: bool = False) -> None:
        if self.cursor is None or self.columns < 2:
            return
        n = self.item_count
        if self.cursor > 0 or wrap:
            self.select((self.cursor - 1 + n) % n)

    def page_down(self) -> None:
        """Scrolls one page and carries the cursor along, clamped to the last item."""
        if self.cursor is None:
            return
        if self.scroll_top_row + self.visible_rows < self.row_count:
            self.set_top_row(self.scroll_top_row + self.visible_rows)
            self.select(min(self.cursor + self.visible_rows * self.columns, self.item_count - 1))

    def page_up(self) -> None:
        if self.cursor is None:
            return
        if self.scroll_top_row > 0:
            self.set_top_row(self.scroll_top_row - self.visible_rows)
            self.select(max(self.cursor - self.visible_rows * self.columns, 0))

    # --- Rebuild ---

    def reset(self, item_count: int) -> None:
        """
        Adopts a new list length. The cursor keeps its index, clamped to the
        new bounds; an empty list has no cursor. No selection callback fires.
        """
        if item_count < 0:
            raise ValueError("Item count cannot be negative.")
        self.item_count = item_count
        if item_count == 0:
            self.cursor = None
            self.scroll_top_row = 0
            return
        self.cursor = 0 if self.cursor is None else min(self.cursor, item_count - 1)
        self.set_top_row(self.scroll_top_row)
        self.ensure_cursor_visible()
