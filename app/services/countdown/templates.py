"""
Template token parsing.

A template is a single token such as "rounded-md-border-inside". The base
shape and the modifiers are detected by substring, so modifiers combine
freely. Traits are parsed once per request and passed to the renderer.
"""

from ...models.countdown import TemplateTraits
from .layout import BOX_SIZE

DEFAULT_TEMPLATE = "square"
DIGITS_ONLY_TEMPLATE = "square-digits"

# Checked in order; the first rounded variant found wins
ROUNDED_RADII = (
    ("rounded-sm", 4),
    ("rounded-md", 8),
    ("rounded-lg", 16),
)


def corner_radius_for(template: str) -> int:
    """Return the corner radius in pixels for a template token."""
    if "circle" in template:
        return BOX_SIZE // 2
    for name, radius in ROUNDED_RADII:
        if name in template:
            return radius
    return 0


def parse_template(template: str = None) -> TemplateTraits:
    """
    Parse a template token into explicit traits.

    Args:
        template: Template token, "square" when empty or missing

    Returns:
        TemplateTraits for the renderer
    """
    template = (template or DEFAULT_TEMPLATE).strip().lower()
    return TemplateTraits(
        shape="circle" if "circle" in template else "square",
        corner_radius=corner_radius_for(template),
        has_border="border" in template,
        has_inside_label="inside" in template,
        digits_only=template == DIGITS_ONLY_TEMPLATE,
    )
