from typing import Protocol


class Surface(Protocol):
    """2D target that receives filled rectangles in top-left-origin units."""

    width: int
    height: int

    def clear(self) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None: ...

    def present(self) -> None: ...
