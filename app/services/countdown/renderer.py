"""
Countdown GIF rendering service.

This module draws the countdown frames and encodes them as a looping GIF.
One canvas is allocated per request and redrawn for every frame; each frame
shows one second less remaining than the one before.
"""

import logging
import traceback
from typing import List, Tuple

from PIL import GifImagePlugin, Image, ImageColor, ImageDraw

from ...models.countdown import CountdownConfig, UnitBox
from .errors import RenderError
from .fonts import BOLD, MEDIUM, SEMIBOLD, FontType, get_font
from .layout import BOX_SIZE, LABEL_HEIGHT, box_center, box_origin, canvas_size
from .templates import parse_template
from .time_units import build_unit_boxes, format_value, select_units

logger = logging.getLogger(__name__)

FRAME_COUNT = 30
FRAME_STEP_MS = 1000
FRAME_DELAY_MS = 1000
LOOP_FOREVER = 0
GIF_TRAILER = b";"

DIGIT_FONT_SIZE = 32
INSIDE_LABEL_FONT_SIZE = 9
OUTSIDE_LABEL_FONT_SIZE = 11

BORDER_WIDTH = 2
INSIDE_DIGIT_OFFSET = 8
INSIDE_LABEL_OFFSET = 16

RGB = Tuple[int, int, int]


class GifEncoder:
    """
    Collects frames and writes them as an animated GIF with Pillow.

    Frames are snapshotted when added, so the caller may keep drawing on the
    same canvas. Every added frame is written as its own image block, even
    when it repeats the previous one, and all frames share one global
    palette built from the whole sequence.
    """

    def __init__(self, delay_ms: int = FRAME_DELAY_MS, repeat: int = LOOP_FOREVER):
        self.delay_ms = delay_ms
        self.repeat = repeat
        self.frames: List[Image.Image] = []

    def add_frame(self, canvas: Image.Image) -> None:
        self.frames.append(canvas.copy())

    def build_palette(self) -> Image.Image:
        """Quantize all frames stacked together into one 256-color palette image."""
        width, height = self.frames[0].size
        strip = Image.new("RGB", (width, height * len(self.frames)))
        for index, frame in enumerate(self.frames):
            strip.paste(frame.convert("RGB"), (0, index * height))
        return strip.quantize(colors=256)

    def finish(self) -> bytes:
        """Encode every added frame and return the GIF bytes."""
        if not self.frames:
            raise ValueError("No frames to encode")

        palette = self.build_palette()
        indexed = [
            frame.convert("RGB").quantize(palette=palette, dither=Image.Dither.NONE)
            for frame in self.frames
        ]

        chunks, _ = GifImagePlugin.getheader(indexed[0], info={"loop": self.repeat})
        for frame in indexed:
            chunks.extend(GifImagePlugin.getdata(frame, duration=self.delay_ms))
        chunks.append(GIF_TRAILER)
        return b"".join(chunks)


def draw_centered_text(draw: ImageDraw.ImageDraw, center: Tuple[float, float], text: str, font: FontType, fill: RGB) -> None:
    """Draw text with its bounding box centered on a point."""
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    x = center[0] - (right - left) / 2 - left
    y = center[1] - (bottom - top) / 2 - top
    draw.text((x, y), text, font=font, fill=fill)


class CountdownRenderer:
    """
    Renders countdown frames for a single request.

    The template is parsed and the fonts are resolved once, at construction.
    Colors are resolved when rendering starts, so an invalid color surfaces
    as a RenderError.
    """

    def __init__(self, config: CountdownConfig):
        self.config = config
        self.traits = parse_template(config.template)
        self.units = select_units(config)
        self.width, self.height = canvas_size(len(self.units))

        self.digit_font = get_font(config.font, DIGIT_FONT_SIZE, BOLD)
        if self.traits.has_inside_label:
            self.label_font = get_font(config.font, INSIDE_LABEL_FONT_SIZE, SEMIBOLD)
        else:
            self.label_font = get_font(config.font, OUTSIDE_LABEL_FONT_SIZE, MEDIUM)

        self.colors = {}

    def resolve_colors(self) -> None:
        self.colors = {
            name: ImageColor.getrgb(getattr(self.config, name))[:3]
            for name in ("background_color", "box_color", "text_color", "label_color")
        }

    @property
    def digit_color(self) -> RGB:
        if self.traits.digits_only or self.traits.has_border:
            return self.colors["box_color"]
        return self.colors["text_color"]

    @property
    def label_color(self) -> RGB:
        if not self.traits.has_inside_label:
            return self.colors["label_color"]
        if self.traits.has_border:
            return self.colors["box_color"]
        return self.colors["text_color"]

    def draw_box(self, draw: ImageDraw.ImageDraw, x: int, y: int) -> None:
        """Draw the box shape for one unit."""
        if self.traits.digits_only:
            return

        xy = (x, y, x + BOX_SIZE - 1, y + BOX_SIZE - 1)
        if self.traits.has_border:
            style = {"fill": None, "outline": self.colors["box_color"], "width": BORDER_WIDTH}
        else:
            style = {"fill": self.colors["box_color"]}

        if self.traits.shape == "circle":
            draw.ellipse(xy, **style)
            return

        radius = min(self.traits.corner_radius, BOX_SIZE // 2)
        if radius > 0:
            draw.rounded_rectangle(xy, radius=radius, **style)
        else:
            draw.rectangle(xy, **style)

    def draw_unit(self, draw: ImageDraw.ImageDraw, index: int, unit: UnitBox) -> None:
        x, y = box_origin(index)
        center_x, center_y = box_center(index)

        self.draw_box(draw, x, y)

        digit_y = center_y - INSIDE_DIGIT_OFFSET if self.traits.has_inside_label else center_y
        draw_centered_text(draw, (center_x, digit_y), format_value(unit.value), self.digit_font, self.digit_color)

        if self.traits.has_inside_label:
            label_y = center_y + INSIDE_LABEL_OFFSET
        else:
            label_y = y + BOX_SIZE + LABEL_HEIGHT
        draw_centered_text(draw, (center_x, label_y), unit.label.upper(), self.label_font, self.label_color)

    def draw_frame(self, canvas: Image.Image, remaining_ms: int) -> List[UnitBox]:
        """
        Clear the canvas and draw every unit for one frame.

        Args:
            canvas: Canvas to redraw in place
            remaining_ms: Milliseconds remaining for this frame

        Returns:
            The unit boxes drawn
        """
        draw = ImageDraw.Draw(canvas)
        draw.rectangle((0, 0, self.width, self.height), fill=self.colors["background_color"])

        boxes = build_unit_boxes(self.config, remaining_ms, self.units)
        for index, unit in enumerate(boxes):
            self.draw_unit(draw, index, unit)
        return boxes

    def frames(self, diff_ms: int, frame_count: int = FRAME_COUNT):
        """
        Yield the shared canvas once per frame, redrawn for that frame.

        Frame i shows diff_ms - i seconds. Only the decomposition clamps,
        so later frames of an expired countdown all show zero.
        """
        if not self.colors:
            self.resolve_colors()
        canvas = Image.new("RGB", (self.width, self.height), self.colors["background_color"])
        for frame_index in range(frame_count):
            remaining_ms = diff_ms - frame_index * FRAME_STEP_MS
            boxes = self.draw_frame(canvas, remaining_ms)
            logger.debug(f"Frame {frame_index}: {remaining_ms}ms -> "
                         f"{', '.join(f'{b.key}={format_value(b.value)}' for b in boxes)}")
            yield canvas

    def render_gif(self, diff_ms: int, frame_count: int = FRAME_COUNT, delay_ms: int = FRAME_DELAY_MS) -> bytes:
        """
        Render the countdown as an animated, looping GIF.

        Args:
            diff_ms: Milliseconds remaining at the first frame
            frame_count: Number of frames to render
            delay_ms: Display time of each frame

        Returns:
            The GIF bytes

        Raises:
            RenderError: If drawing or encoding fails
        """
        logger.info(f"Rendering countdown GIF: template={self.config.template!r}, "
                    f"units={self.units}, size={self.width}x{self.height}, diffMs={diff_ms}")
        try:
            self.resolve_colors()
            encoder = GifEncoder(delay_ms=delay_ms, repeat=LOOP_FOREVER)
            for canvas in self.frames(diff_ms, frame_count):
                encoder.add_frame(canvas)
            data = encoder.finish()
        except Exception as e:
            logger.error(f"Error rendering countdown GIF: {str(e)}")
            logger.error(f"Error traceback: {traceback.format_exc()}")
            raise RenderError(str(e)) from e

        logger.info(f"Generated countdown GIF: {frame_count} frames, {len(data)} bytes")
        return data


def render_countdown_gif(config: CountdownConfig, diff_ms: int) -> bytes:
    """Render a countdown GIF for a config and remaining time."""
    return CountdownRenderer(config).render_gif(diff_ms)
