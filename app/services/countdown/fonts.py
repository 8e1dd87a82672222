"""
Font registry for countdown rendering.

Fonts are registered once at startup from the bundled font directory and a
short list of well-known system fonts. Rendering looks fonts up by family
name and weight; an unregistered family falls back to a registered stand-in
family, then to Pillow's default font, instead of failing the request.
"""

import os
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Union

from PIL import ImageFont

logger = logging.getLogger(__name__)

DEFAULT_FONT_DIR = Path(__file__).resolve().parents[2] / "static" / "fonts"
FONT_EXTENSIONS = (".ttf", ".otf")

REGULAR = 400
MEDIUM = 500
SEMIBOLD = 600
BOLD = 700

WEIGHT_SUFFIXES = {
    "regular": REGULAR,
    "medium": MEDIUM,
    "semibold": SEMIBOLD,
    "bold": BOLD,
}

# (family, weight, path) tried in addition to the bundled directory
SYSTEM_FONTS = [
    ("Roboto", REGULAR, "/usr/share/fonts/truetype/roboto/unhinted/RobotoTTF/Roboto-Regular.ttf"),
    ("Roboto", MEDIUM, "/usr/share/fonts/truetype/roboto/unhinted/RobotoTTF/Roboto-Medium.ttf"),
    ("Roboto", BOLD, "/usr/share/fonts/truetype/roboto/unhinted/RobotoTTF/Roboto-Bold.ttf"),
    ("DejaVu Sans", REGULAR, "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"),
    ("DejaVu Sans", BOLD, "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"),
    ("Liberation Sans", REGULAR, "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf"),
    ("Liberation Sans", BOLD, "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf"),
    ("Arial", REGULAR, "/usr/share/fonts/truetype/msttcorefonts/Arial.ttf"),
    ("Arial", BOLD, "/usr/share/fonts/truetype/msttcorefonts/Arial_Bold.ttf"),
]

# Stand-ins for an unregistered family, tried in order before Pillow's default font
FALLBACK_FAMILIES = ("Roboto", "DejaVu Sans", "Liberation Sans", "Arial")

# family name (lower-cased) -> {weight: path}
_registry: Dict[str, Dict[int, str]] = {}
_display_names: Dict[str, str] = {}

FontType = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


def parse_font_filename(filename: str):
    """
    Split a font file name into family and weight.

    "Roboto-Bold.ttf" gives ("Roboto", 700). A stem without a known weight
    suffix is treated as the regular weight of a family named after the stem.
    """
    stem = os.path.splitext(os.path.basename(filename))[0]
    family, _, suffix = stem.rpartition("-")
    weight = WEIGHT_SUFFIXES.get(suffix.lower())
    if not family or weight is None:
        return stem, REGULAR
    return family, weight


def register_font(family: str, weight: int, path: str) -> None:
    key = family.lower()
    _registry.setdefault(key, {})[weight] = str(path)
    _display_names.setdefault(key, family)


def register_fonts(font_dir: Optional[Union[str, Path]] = None, include_system: bool = True) -> List[str]:
    """
    Register every font file in a directory.

    Args:
        font_dir: Directory holding <Family>-<Weight>.ttf files
        include_system: Also register well-known system fonts that exist

    Returns:
        Sorted list of registered family names
    """
    font_dir = Path(font_dir) if font_dir else DEFAULT_FONT_DIR
    _registry.clear()
    _display_names.clear()
    get_font.cache_clear()

    if font_dir.is_dir():
        for path in sorted(font_dir.iterdir()):
            if path.suffix.lower() not in FONT_EXTENSIONS:
                continue
            family, weight = parse_font_filename(path.name)
            register_font(family, weight, path)
            logger.debug(f"Registered font {family} ({weight}) from {path}")
    else:
        logger.warning(f"Font directory not found: {font_dir}")

    if include_system:
        for family, weight, path in SYSTEM_FONTS:
            if os.path.exists(path):
                register_font(family, weight, path)
                logger.debug(f"Registered system font {family} ({weight}) from {path}")

    families = registered_families()
    logger.info(f"Registered {len(families)} font families: {families}")
    return families


def registered_families() -> List[str]:
    return sorted(_display_names.values())


def _closest_weight(available: Dict[int, str], weight: int) -> int:
    # Prefer the heavier face on ties, so bold text never renders lighter than asked
    return min(available, key=lambda w: (abs(w - weight), -w))


def resolve_faces(family: Optional[str]) -> Optional[Dict[int, str]]:
    """
    Return the registered faces for a family.

    An unregistered family resolves to the first registered fallback family,
    so bold text stays bold on hosts that have any sans-serif face. None
    means nothing usable is registered.
    """
    available = _registry.get((family or "").lower())
    if available:
        return available
    for fallback in FALLBACK_FAMILIES:
        available = _registry.get(fallback.lower())
        if available:
            logger.debug(f"Font family '{family}' not registered, using {fallback}")
            return available
    return None


@lru_cache(maxsize=128)
def get_font(family: str, size: int, weight: int = REGULAR) -> FontType:
    """
    Return a font for a family, size and weight.

    Args:
        family: Registered family name, matched case-insensitively
        size: Font size in pixels
        weight: CSS-style numeric weight

    Returns:
        The closest registered face (of a fallback family when this one is
        not registered), or Pillow's default font when nothing registered loads
    """
    available = resolve_faces(family)
    if available:
        path = available[_closest_weight(available, weight)]
        try:
            return ImageFont.truetype(path, size)
        except (OSError, IOError) as e:
            logger.warning(f"Failed to load font {path}: {e}")
    else:
        logger.debug(f"No registered font for '{family}', using default font")
    return ImageFont.load_default(size=size)
