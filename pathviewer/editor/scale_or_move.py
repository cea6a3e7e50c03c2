"""Scale-to-size / move-by-offset dialog state.

In scale mode ``width``/``height`` are the target path size; with the aspect
lock on, changing one rescales the other by the same ratio. In move mode they
are an x/y offset and are independent.
"""

from __future__ import annotations


class InvalidDimensions(ValueError):
    pass


class ScaleOrMoveModel:
    def __init__(
        self,
        width: float = 100.0,
        height: float = 100.0,
        is_scale_mode: bool = False,
    ) -> None:
        self._width = float(width)
        self._height = float(height)
        self.is_scale_mode = is_scale_mode
        self.is_aspect_locked = True

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        value = float(value)
        if value == self._width:
            return
        if self._coupled and self._width != 0:
            self._height *= value / self._width
        self._width = value

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        value = float(value)
        if value == self._height:
            return
        if self._coupled and self._height != 0:
            self._width *= value / self._height
        self._height = value

    @property
    def width_label(self) -> str:
        return "PathWidth" if self.is_scale_mode else "X"

    @property
    def height_label(self) -> str:
        return "PathHeight" if self.is_scale_mode else "Y"

    @property
    def _coupled(self) -> bool:
        return self.is_scale_mode and self.is_aspect_locked

    def validate(self) -> None:
        """Scale targets must be positive; move offsets can be anything."""
        if self.is_scale_mode and (self._width <= 0 or self._height <= 0):
            raise InvalidDimensions("Width and height must be greater than zero.")
