"""View/display options decoded from option strings."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Callable

from .colors import DARK_COLOUR, LIGHT_COLOUR
from .colour_parser import parse_colour, to_rgb
from .option_constants import (
    CELL_SIZE_DEFAULT,
    CELL_SIZE_MAX,
    CELL_SIZE_MIN,
    EDGE_OPACITY_DEFAULT,
    EDGE_OPACITY_FULL,
    FONT_ALTERNATE,
    FONT_DEFAULT,
    GRID_OPACITY_DEFAULT,
    GRID_OPACITY_FAINT,
    GRID_OPACITY_USER_COLOUR,
    SCALE_DEFAULT,
    VIEW_DEFAULT_HEIGHT,
    VIEW_DEFAULT_WIDTH,
    VIEW_EXTENT_PERCENT,
    ZOOM_DEFAULT,
    ZOOM_MAX,
)
from .option_string import (
    OptionToken,
    is_option_string,
    iter_tokens,
    match_zoom_directive,
)

ColourResolver = Callable[[str], str]


@dataclass(frozen=True)
class ViewRect:
    """Visible portion of the map, in cells, with percent pan offsets."""

    width: float = VIEW_DEFAULT_WIDTH
    height: float = VIEW_DEFAULT_HEIGHT
    pan_x: float = 0
    pan_y: float = 0


@dataclass
class BackgroundImage:
    """Background image placement; ``image`` is owned by the renderer."""

    image: Any = None
    offset_x: int = 0
    offset_y: int = 0
    zoom: float = 1.0


def _clamp_cell_size(size: int) -> int:
    return max(CELL_SIZE_MIN, min(CELL_SIZE_MAX, size))


def _clamp_zoom(zoom: float) -> float:
    # Only the upper bound is enforced; negative zoom passes through.
    return zoom if zoom <= ZOOM_MAX else ZOOM_MAX


class ViewOptions:
    """Accumulated view configuration plus the measurements derived from it.

    Fields change only through :meth:`apply_option_string` and the ``view``
    setter. Each call layers on top of the current state; nothing resets
    short of building a new instance.
    """

    def __init__(
        self,
        *,
        light_colour: str = LIGHT_COLOUR,
        dark_colour: str = DARK_COLOUR,
        resolve_colour: ColourResolver = parse_colour,
    ) -> None:
        self._light_colour = light_colour
        self._dark_colour = dark_colour
        self._resolve_colour = resolve_colour

        self._view = ViewRect()
        self._zoom: float = ZOOM_DEFAULT
        self._cell_size: int = CELL_SIZE_DEFAULT
        self._dark_mode = False
        self._grid_opacity: float = GRID_OPACITY_DEFAULT
        self._grid_colour = light_colour
        self._is_grid_user_colour = False
        self._edge_opacity: float = EDGE_OPACITY_DEFAULT
        self._background = BackgroundImage()
        self._font = FONT_DEFAULT
        self._background_colour = dark_colour
        self._is_background_user_colour = False
        self._scale = SCALE_DEFAULT

        self._handlers: dict[str, Callable[[OptionToken], None]] = {
            "B": self._apply_background_zoom,
            "C": self._apply_cell_size,
            "D": self._apply_dark_mode,
            "E": self._apply_full_edges,
            "F": self._apply_alternate_font,
            "G": self._apply_background_colour,
            "H": self._apply_grid_opacity,
            "N": self._apply_hidden_grid,
            "O": self._apply_background_offset,
            "Q": self._apply_grid_colour,
            "S": self._apply_scale,
            "Z": self._apply_zoom,
        }

    # --- View ---

    @property
    def view(self) -> ViewRect:
        return self._view

    @view.setter
    def view(self, value: ViewRect) -> None:
        self.set_view(value)

    def set_view(self, value: ViewRect) -> None:
        """Replace the view, pulling pan back so size + pan never exceeds 100."""
        pan_x = value.pan_x
        pan_y = value.pan_y
        if value.width + pan_x > VIEW_EXTENT_PERCENT:
            pan_x = VIEW_EXTENT_PERCENT - value.width
        if value.height + pan_y > VIEW_EXTENT_PERCENT:
            pan_y = VIEW_EXTENT_PERCENT - value.height
        self._view = replace(value, pan_x=pan_x, pan_y=pan_y)

    # --- Parsing ---

    def apply_option_string(self, raw: str) -> bool:
        """Merge an option string into the current state.

        Returns False (and changes nothing) when ``raw`` is not an option
        string, or when it holds neither a zoom directive nor any token.
        """
        if not is_option_string(raw):
            return False

        zoom, pos = match_zoom_directive(raw)
        if zoom is not None:
            self._zoom = _clamp_zoom(zoom)

        found = False
        for token in iter_tokens(raw, pos):
            found = True
            handler = self._handlers.get(token.key)
            if handler is not None:
                handler(token)

        return zoom is not None or found

    def _apply_background_zoom(self, token: OptionToken) -> None:
        try:
            self._background.zoom = float(token.payload)
        except ValueError:
            pass

    def _apply_zoom(self, token: OptionToken) -> None:
        try:
            self._zoom = _clamp_zoom(float(token.payload))
        except ValueError:
            pass

    def _apply_cell_size(self, token: OptionToken) -> None:
        if not token.payload:
            return
        try:
            size = int(token.payload)
        except ValueError:
            return
        self._cell_size = _clamp_cell_size(size)

    def _apply_grid_opacity(self, token: OptionToken) -> None:
        if not token.payload:
            self._grid_opacity = GRID_OPACITY_FAINT
            return
        try:
            percent = int(token.payload)
        except ValueError:
            return
        self._grid_opacity = percent / 100 if percent <= 100 else 1.0

    def _apply_dark_mode(self, token: OptionToken) -> None:
        self._dark_mode = True

    def _apply_full_edges(self, token: OptionToken) -> None:
        self._edge_opacity = EDGE_OPACITY_FULL

    def _apply_alternate_font(self, token: OptionToken) -> None:
        self._font = FONT_ALTERNATE

    def _apply_hidden_grid(self, token: OptionToken) -> None:
        self._grid_opacity = 0

    def _apply_grid_colour(self, token: OptionToken) -> None:
        try:
            colour = self._resolve_colour(token.payload)
        except ValueError:
            return
        self._grid_colour = colour
        self._is_grid_user_colour = True
        self._grid_opacity = GRID_OPACITY_USER_COLOUR

    def _apply_background_colour(self, token: OptionToken) -> None:
        try:
            colour = self._resolve_colour(token.payload)
        except ValueError:
            return
        self._background_colour = colour
        self._is_background_user_colour = True

    def _apply_background_offset(self, token: OptionToken) -> None:
        raw_x, raw_y = token.payload.split(":")
        try:
            offset_x, offset_y = int(raw_x), int(raw_y)
        except ValueError:
            return
        self._background.offset_x = offset_x
        self._background.offset_y = offset_y

    def _apply_scale(self, token: OptionToken) -> None:
        self._scale = token.payload

    # --- Derived measurements ---

    @property
    def cell_size_px(self) -> float:
        return self._cell_size * self._zoom

    @property
    def width_px(self) -> float:
        return self._view.width * self.cell_size_px

    @property
    def height_px(self) -> float:
        return self._view.height * self.cell_size_px

    @property
    def canvas_width(self) -> float:
        # One cell of margin on each side.
        return self.width_px + 2 * self.cell_size_px

    @property
    def canvas_height(self) -> float:
        return self.height_px + 2 * self.cell_size_px

    @property
    def canvas_size(self) -> tuple[float, float]:
        return self.canvas_width, self.canvas_height

    @property
    def fg(self) -> str:
        """Grid line colour: the user's choice, else contrasting with the mode."""
        if self._is_grid_user_colour:
            return self._grid_colour
        return self._light_colour if self._dark_mode else self._dark_colour

    @property
    def bg(self) -> str:
        if self._is_background_user_colour:
            return self._background_colour
        return self._dark_colour if self._dark_mode else self._light_colour

    @property
    def fg_rgb(self) -> tuple[int, int, int]:
        return to_rgb(self.fg)

    @property
    def bg_rgb(self) -> tuple[int, int, int]:
        return to_rgb(self.bg)

    # --- Basic fields ---

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def cell_size(self) -> int:
        return self._cell_size

    @property
    def dark_mode(self) -> bool:
        return self._dark_mode

    @property
    def grid_opacity(self) -> float:
        return self._grid_opacity

    @property
    def grid_colour(self) -> str:
        return self._grid_colour

    @property
    def is_grid_user_colour(self) -> bool:
        return self._is_grid_user_colour

    @property
    def edge_opacity(self) -> float:
        return self._edge_opacity

    @property
    def background(self) -> BackgroundImage:
        return self._background

    @property
    def background_colour(self) -> str:
        return self._background_colour

    @property
    def is_background_user_colour(self) -> bool:
        return self._is_background_user_colour

    @property
    def font(self) -> str:
        return self._font

    @property
    def scale(self) -> str:
        return self._scale

    def as_dict(self) -> dict[str, Any]:
        """Snapshot of every field and derived value, JSON-friendly."""
        background = {
            "image": self._background.image is not None,
            "offset_x": self._background.offset_x,
            "offset_y": self._background.offset_y,
            "zoom": self._background.zoom,
        }
        return {
            "view": asdict(self._view),
            "zoom": self._zoom,
            "cell_size": self._cell_size,
            "dark_mode": self._dark_mode,
            "grid_opacity": self._grid_opacity,
            "grid_colour": self._grid_colour,
            "is_grid_user_colour": self._is_grid_user_colour,
            "edge_opacity": self._edge_opacity,
            "background": background,
            "background_colour": self._background_colour,
            "is_background_user_colour": self._is_background_user_colour,
            "font": self._font,
            "scale": self._scale,
            "cell_size_px": self.cell_size_px,
            "width_px": self.width_px,
            "height_px": self.height_px,
            "canvas_width": self.canvas_width,
            "canvas_height": self.canvas_height,
            "fg": self.fg,
            "bg": self.bg,
        }
