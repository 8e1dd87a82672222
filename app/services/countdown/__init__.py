"""
Countdown GIF rendering services.
"""

from .errors import CountdownError, AuthError, RequestValidationError, RenderError
from .fonts import register_fonts, registered_families, get_font
from .renderer import CountdownRenderer, GifEncoder, render_countdown_gif
from .templates import parse_template
from .time_units import decompose, format_value, select_units, build_unit_boxes

__all__ = [
    'CountdownError',
    'AuthError',
    'RequestValidationError',
    'RenderError',
    'register_fonts',
    'registered_families',
    'get_font',
    'CountdownRenderer',
    'GifEncoder',
    'render_countdown_gif',
    'parse_template',
    'decompose',
    'format_value',
    'select_units',
    'build_unit_boxes',
]
