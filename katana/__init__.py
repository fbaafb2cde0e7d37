"""Building blocks for 2D games on pygame: sprites, animations, fonts, input and resources."""

__version__ = "0.1.0"