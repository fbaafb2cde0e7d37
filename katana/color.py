"""Four-component colours with red, green, blue and alpha in [0, 1]."""

from __future__ import annotations

from dataclasses import dataclass, replace

from katana import mathutil

__all__ = ["Color"]


@dataclass(frozen=True)
class Color:
    """A colour with float components; equality compares every component."""

    red: float = 1.0
    green: float = 1.0
    blue: float = 1.0
    alpha: float = 1.0

    @staticmethod
    def lerp(start: Color, end: Color, value: float) -> Color:
        """Linearly interpolate between two colours; value is held to [0, 1]."""
        if value <= 0:
            return start
        if value >= 1:
            return end
        return Color(
            mathutil.lerp(start.red, end.red, value),
            mathutil.lerp(start.green, end.green, value),
            mathutil.lerp(start.blue, end.blue, value),
            mathutil.lerp(start.alpha, end.alpha, value),
        )

    def __mul__(self, scalar: float) -> Color:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return replace(
            self,
            red=self.red * scalar,
            green=self.green * scalar,
            blue=self.blue * scalar,
            alpha=self.alpha * scalar,
        )

    __rmul__ = __mul__

    def to_rgba(self) -> tuple[int, int, int, int]:
        """Map the colour to 8-bit RGBA components, clamping out-of-range values."""
        return tuple(  # type: ignore[return-value]
            round(mathutil.clamp(0.0, 1.0, float(c)) * 255)
            for c in (self.red, self.green, self.blue, self.alpha)
        )


_NAMED_COLORS: dict[str, tuple[float, ...]] = {
    "TRANSPARENT": (0.0, 0.0, 0.0, 0.0),
    "ALICEBLUE": (0.94, 0.97, 1.0),
    "ANTIQUEWHITE": (0.98, 0.92, 0.84),
    "AQUA": (0.0, 1.0, 1.0),
    "AQUAMARINE": (0.5, 1.0, 0.83),
    "AZURE": (0.94, 1.0, 1.0),
    "BEIGE": (0.96, 0.96, 0.86),
    "BISQUE": (1.0, 0.89, 0.77),
    "BLACK": (0.0, 0.0, 0.0),
    "BLANCHEDALMOND": (1.0, 0.92, 0.8),
    "BLUE": (0.0, 0.0, 1.0),
    "BLUEVIOLET": (0.54, 0.17, 0.89),
    "BROWN": (0.65, 0.16, 0.16),
    "BURLYWOOD": (0.87, 0.72, 0.53),
    "CADETBLUE": (0.37, 0.62, 0.63),
    "CHARTREUSE": (0.5, 1.0, 0.0),
    "CHOCOLATE": (0.82, 0.41, 0.12),
    "CORAL": (1.0, 0.5, 0.31),
    "CORNFLOWER": (0.39, 0.58, 0.93),
    "CORNSILK": (1.0, 0.97, 0.86),
    "CRIMSON": (0.86, 0.08, 0.24),
    "CYAN": (0.0, 1.0, 1.0),
    "DARKBLUE": (0.0, 0.0, 0.55),
    "DARKCYAN": (0.0, 0.55, 0.55),
    "DARKGOLDENROD": (0.72, 0.53, 0.04),
    "DARKGRAY": (0.66, 0.66, 0.66),
    "DARKGREEN": (0.0, 0.39, 0.0),
    "DARKKHAKI": (0.74, 0.72, 0.42),
    "DARKMAGENTA": (0.55, 0.0, 0.55),
    "DARKOLIVEGREEN": (0.33, 0.42, 0.18),
    "DARKORANGE": (1.0, 0.55, 0.0),
    "DARKORCHID": (0.6, 0.2, 0.8),
    "DARKRED": (0.55, 0.0, 0.0),
    "DARKSALMON": (0.91, 0.59, 0.48),
    "DARKSEAGREEN": (0.56, 0.74, 0.56),
    "DARKSLATEBLUE": (0.28, 0.24, 0.55),
    "DARKSLATEGRAY": (0.18, 0.31, 0.31),
    "DARKTURQUOISE": (0.0, 0.81, 0.82),
    "DARKVIOLET": (0.58, 0.0, 0.83),
    "DEEPPINK": (1.0, 0.08, 0.58),
    "DEEPSKYBLUE": (0.0, 0.75, 1.0),
    "DIMGRAY": (0.41, 0.41, 0.41),
    "DODGERBLUE": (0.12, 0.56, 1.0),
    "FIREBRICK": (0.7, 0.13, 0.13),
    "FLORALWHITE": (1.0, 0.98, 0.94),
    "FORESTGREEN": (0.13, 0.55, 0.13),
    "FUCHSIA": (1.0, 0.0, 1.0),
    "GAINSBORO": (0.86, 0.86, 0.86),
    "GHOSTWHITE": (0.97, 0.97, 1.0),
    "GOLD": (1.0, 0.84, 0.0),
    "GOLDENROD": (0.85, 0.65, 0.13),
    "GRAY": (0.75, 0.75, 0.75),
    "WEBGRAY": (0.5, 0.5, 0.5),
    "GREEN": (0.0, 1.0, 0.0),
    "WEBGREEN": (0.0, 0.5, 0.0),
    "GREENYELLOW": (0.68, 1.0, 0.18),
    "HONEYDEW": (0.94, 1.0, 0.94),
    "HOTPINK": (1.0, 0.41, 0.71),
    "INDIANRED": (0.8, 0.36, 0.36),
    "INDIGO": (0.29, 0.0, 0.51),
    "IVORY": (1.0, 1.0, 0.94),
    "KHAKI": (0.94, 0.9, 0.55),
    "LAVENDER": (0.9, 0.9, 0.98),
    "LAVENDERBLUSH": (1.0, 0.94, 0.96),
    "LAWNGREEN": (0.49, 0.99, 0.0),
    "LEMONCHIFFON": (1.0, 0.98, 0.8),
    "LIGHTBLUE": (0.68, 0.85, 0.9),
    "LIGHTCORAL": (0.94, 0.5, 0.5),
    "LIGHTCYAN": (0.88, 1.0, 1.0),
    "LIGHTGOLDENROD": (0.98, 0.98, 0.82),
    "LIGHTGRAY": (0.83, 0.83, 0.83),
    "LIGHTGREEN": (0.56, 0.93, 0.56),
    "LIGHTPINK": (1.0, 0.71, 0.76),
    "LIGHTSALMON": (1.0, 0.63, 0.48),
    "LIGHTSEAGREEN": (0.13, 0.7, 0.67),
    "LIGHTSKYBLUE": (0.53, 0.81, 0.98),
    "LIGHTSLATEGRAY": (0.47, 0.53, 0.6),
    "LIGHTSTEELBLUE": (0.69, 0.77, 0.87),
    "LIGHTYELLOW": (1.0, 1.0, 0.88),
    "LIME": (0.0, 1.0, 0.0),
    "LIMEGREEN": (0.2, 0.8, 0.2),
    "LINEN": (0.98, 0.94, 0.9),
    "MAGENTA": (1.0, 0.0, 1.0),
    "MAROON": (0.69, 0.19, 0.38),
    "WEBMAROON": (0.5, 0.0, 0.0),
    "MEDIUMAQUAMARINE": (0.4, 0.8, 0.67),
    "MEDIUMBLUE": (0.0, 0.0, 0.8),
    "MEDIUMORCHID": (0.73, 0.33, 0.83),
    "MEDIUMPURPLE": (0.58, 0.44, 0.86),
    "MEDIUMSEAGREEN": (0.24, 0.7, 0.44),
    "MEDIUMSLATEBLUE": (0.48, 0.41, 0.93),
    "MEDIUMSPRINGGREEN": (0.0, 0.98, 0.6),
    "MEDIUMTURQUOISE": (0.28, 0.82, 0.8),
    "MEDIUMVIOLETRED": (0.78, 0.08, 0.52),
    "MIDNIGHTBLUE": (0.1, 0.1, 0.44),
    "MINTCREAM": (0.96, 1.0, 0.98),
    "MISTYROSE": (1.0, 0.89, 0.88),
    "MOCCASIN": (1.0, 0.89, 0.71),
    "NAVAJOWHITE": (1.0, 0.87, 0.68),
    "NAVYBLUE": (0.0, 0.0, 0.5),
    "OLDLACE": (0.99, 0.96, 0.9),
    "OLIVE": (0.5, 0.5, 0.0),
    "OLIVEDRAB": (0.42, 0.56, 0.14),
    "ORANGE": (1.0, 0.65, 0.0),
    "ORANGERED": (1.0, 0.27, 0.0),
    "ORCHID": (0.85, 0.44, 0.84),
    "PALEGOLDENROD": (0.93, 0.91, 0.67),
    "PALEGREEN": (0.6, 0.98, 0.6),
    "PALETURQUOISE": (0.69, 0.93, 0.93),
    "PALEVIOLETRED": (0.86, 0.44, 0.58),
    "PAPAYAWHIP": (1.0, 0.94, 0.84),
    "PEACHPUFF": (1.0, 0.85, 0.73),
    "PERU": (0.8, 0.52, 0.25),
    "PINK": (1.0, 0.75, 0.8),
    "PLUM": (0.87, 0.63, 0.87),
    "POWDERBLUE": (0.69, 0.88, 0.9),
    "PURPLE": (0.63, 0.13, 0.94),
    "WEBPURPLE": (0.5, 0.0, 0.5),
    "REBECCAPURPLE": (0.4, 0.2, 0.6),
    "RED": (1.0, 0.0, 0.0),
    "ROSYBROWN": (0.74, 0.56, 0.56),
    "ROYALBLUE": (0.25, 0.41, 0.88),
    "SADDLEBROWN": (0.55, 0.27, 0.07),
    "SALMON": (0.98, 0.5, 0.45),
    "SANDYBROWN": (0.96, 0.64, 0.38),
    "SEAGREEN": (0.18, 0.55, 0.34),
    "SEASHELL": (1.0, 0.96, 0.93),
    "SIENNA": (0.63, 0.32, 0.18),
    "SILVER": (0.75, 0.75, 0.75),
    "SKYBLUE": (0.53, 0.81, 0.92),
    "SLATEBLUE": (0.42, 0.35, 0.8),
    "SLATEGRAY": (0.44, 0.5, 0.56),
    "SNOW": (1.0, 0.98, 0.98),
    "SPRINGGREEN": (0.0, 1.0, 0.5),
    "STEELBLUE": (0.27, 0.51, 0.71),
    "TAN": (0.82, 0.71, 0.55),
    "TEAL": (0.0, 0.5, 0.5),
    "THISTLE": (0.85, 0.75, 0.85),
    "TOMATO": (1.0, 0.39, 0.28),
    "TURQUOISE": (0.25, 0.88, 0.82),
    "VIOLET": (0.93, 0.51, 0.93),
    "WHEAT": (0.96, 0.87, 0.7),
    "WHITE": (1.0, 1.0, 1.0),
    "WHITESMOKE": (0.96, 0.96, 0.96),
    "YELLOW": (1.0, 1.0, 0.0),
    "YELLOWGREEN": (0.6, 0.8, 0.2),
}

for _name, _components in _NAMED_COLORS.items():
    setattr(Color, _name, Color(*_components))