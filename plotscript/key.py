"""Key (legend) settings."""

from __future__ import annotations

from dataclasses import dataclass

from plotscript.styles import Boxed, Horizontal, Justification, Order, Stacked, Vertical


@dataclass(frozen=True)
class Position:
    """Where the key is placed, inside or outside the area bounded by the axes."""

    vertical: Vertical
    horizontal: Horizontal
    outside: bool = False

    def script(self) -> str:
        """Return the gnuplot code for this position."""
        place = "outside" if self.outside else "inside"
        return f"{place} {self.vertical.value} {self.horizontal.value}"


class KeyProperties:
    """Properties of the key; the key is shown and unboxed by default."""

    def __init__(self) -> None:
        self._boxed = False
        self._hidden = False
        self._justification: Justification | None = None
        self._order: Order | None = None
        self._position: Position | None = None
        self._stacked: Stacked | None = None
        self._title: str | None = None

    @property
    def hidden(self) -> bool:
        return self._hidden

    def hide(self) -> KeyProperties:
        """Hide the key."""
        self._hidden = True
        return self

    def show(self) -> KeyProperties:
        """Show the key."""
        self._hidden = False
        return self

    def boxed(self, boxed: Boxed) -> KeyProperties:
        """Choose whether the key is surrounded by a box."""
        self._boxed = boxed is Boxed.YES
        return self

    def justification(self, justification: Justification) -> KeyProperties:
        """Change the justification of the text of each entry."""
        self._justification = justification
        return self

    def order(self, order: Order) -> KeyProperties:
        """Change the order of sample and text in each entry."""
        self._order = order
        return self

    def position(self, position: Position) -> KeyProperties:
        """Select where to place the key."""
        self._position = position
        return self

    def stacked(self, stacked: Stacked) -> KeyProperties:
        """Change how the entries are stacked."""
        self._stacked = stacked
        return self

    def title(self, title: str) -> KeyProperties:
        """Set the title of the key."""
        self._title = str(title)
        return self

    def script(self) -> str:
        """Return the gnuplot code for the key."""
        if self._hidden:
            return "set key off\n"

        parts = ["set key on"]
        if self._position is not None:
            parts.append(self._position.script())
        if self._stacked is not None:
            parts.append(self._stacked.value)
        if self._justification is not None:
            parts.append(self._justification.value)
        if self._order is not None:
            parts.append(self._order.value)
        if self._title is not None:
            parts.append(f"title '{self._title}'")
        if self._boxed:
            parts.append("box")
        return " ".join(parts) + " \n"