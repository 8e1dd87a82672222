"""
Tests for the countdown GIF renderer.
"""

import os
import pytest
from PIL import Image
from app.models import CountdownConfig, TemplateTraits
from app.services.countdown import CountdownRenderer, GifEncoder, RenderError, render_countdown_gif, register_fonts
from app.services.countdown.layout import box_origin
from gif_helpers import decode_frames, frame_durations, color_close, is_reddish

BOX_COLOR = (0, 170, 255)
BACKGROUND = (255, 255, 255)
ONE_HOUR_MS = 3600000
DEJAVU_BOLD = "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"

def render_first_frame(**config_fields):
    """Draw frame 0 for a config and return the canvas."""
    renderer = CountdownRenderer(CountdownConfig(box_color="#00AAFF", **config_fields))
    return next(renderer.frames(ONE_HOUR_MS, 1))

def test_gif_header_and_animation_settings():
    data = render_countdown_gif(CountdownConfig(), ONE_HOUR_MS)
    assert data[:6] in (b"GIF89a", b"GIF87a")

    gif, frames = decode_frames(data)
    assert gif.n_frames == 30
    assert gif.info["loop"] == 0
    assert gif.info["duration"] == 1000
    assert frames[0].size == (416, 156)

def test_frames_change_every_second():
    _, frames = decode_frames(render_countdown_gif(CountdownConfig(), ONE_HOUR_MS))
    assert frames[0].tobytes() != frames[1].tobytes()

def test_expired_countdown_keeps_every_frame():
    """Frames past expiry repeat the zero frame but are still written one by one."""
    data = render_countdown_gif(CountdownConfig(), 5000)
    gif, frames = decode_frames(data)
    assert gif.n_frames == 30
    assert frame_durations(data) == [1000] * 30
    assert gif.info["loop"] == 0
    assert frames[5].tobytes() == frames[29].tobytes()
    assert frames[0].tobytes() != frames[5].tobytes()

def test_canvas_width_follows_unit_count():
    data = render_countdown_gif(CountdownConfig(display_days=False, display_hours=False), ONE_HOUR_MS)
    gif, _ = decode_frames(data)
    assert gif.size == (224, 156)

def test_draw_frame_returns_units_for_remaining_time():
    renderer = CountdownRenderer(CountdownConfig())
    renderer.resolve_colors()
    canvas = Image.new("RGB", (renderer.width, renderer.height))
    boxes = renderer.draw_frame(canvas, 5000)
    assert [(b.key, b.value) for b in boxes] == [("days", 0), ("hours", 0), ("minutes", 0), ("seconds", 5)]

def test_frames_reuse_one_canvas():
    renderer = CountdownRenderer(CountdownConfig())
    canvases = {id(canvas) for canvas in renderer.frames(ONE_HOUR_MS, 5)}
    assert len(canvases) == 1

def test_filled_square_paints_box_color():
    canvas = render_first_frame(template="square")
    x, y = box_origin(0)
    assert canvas.getpixel((x + 2, y + 2)) == BOX_COLOR
    assert canvas.getpixel((x - 2, y - 2)) == BACKGROUND

def test_square_digits_draws_no_box():
    canvas = render_first_frame(template="square-digits")
    for index in range(4):
        x, y = box_origin(index)
        # Corners and edges of each box stay background colored
        for point in [(x + 2, y + 2), (x + 77, y + 2), (x + 2, y + 77), (x + 77, y + 77), (x + 4, y + 40)]:
            assert canvas.getpixel(point) == BACKGROUND

def test_square_digits_colors_digits_with_box_color():
    canvas = render_first_frame(template="square-digits")
    x, y = box_origin(0)
    region = canvas.crop((x, y, x + 80, y + 80))
    colors = {color for _, color in region.getcolors(maxcolors=80 * 80)}
    assert BOX_COLOR in colors

def test_border_strokes_without_fill():
    canvas = render_first_frame(template="square-border")
    x, y = box_origin(0)
    assert canvas.getpixel((x, y + 40)) == BOX_COLOR
    assert canvas.getpixel((x + 1, y + 40)) == BOX_COLOR
    assert canvas.getpixel((x + 4, y + 4)) == BACKGROUND

def test_circle_leaves_corners_unpainted():
    canvas = render_first_frame(template="circle")
    x, y = box_origin(0)
    assert canvas.getpixel((x + 1, y + 1)) == BACKGROUND
    assert canvas.getpixel((x + 4, y + 40)) == BOX_COLOR

def test_rounded_corner_radius():
    canvas = render_first_frame(template="rounded-lg")
    x, y = box_origin(0)
    assert canvas.getpixel((x + 1, y + 1)) == BACKGROUND
    assert canvas.getpixel((x + 20, y + 1)) == BOX_COLOR

def test_inside_label_stays_in_box():
    """Inside labels leave the label band below the boxes empty."""
    canvas = render_first_frame(template="square-inside")
    x, y = box_origin(0)
    band = canvas.crop((x, y + 84, x + 80, canvas.height))
    assert band.getcolors() == [(band.width * band.height, BACKGROUND)]

def test_outside_label_uses_label_color():
    canvas = render_first_frame(template="square", label_color="#FF0000")
    x, y = box_origin(0)
    band = canvas.crop((x, y + 84, x + 80, canvas.height))
    colors = {color for _, color in band.getcolors(maxcolors=band.width * band.height)}
    assert any(is_reddish(color) for color in colors)

def test_digit_color_precedence():
    filled = CountdownRenderer(CountdownConfig(template="square", text_color="#111111", box_color="#222222"))
    border = CountdownRenderer(CountdownConfig(template="square-border", text_color="#111111", box_color="#222222"))
    digits = CountdownRenderer(CountdownConfig(template="square-digits", text_color="#111111", box_color="#222222"))
    for renderer in (filled, border, digits):
        renderer.resolve_colors()
    assert filled.digit_color == (0x11, 0x11, 0x11)
    assert border.digit_color == (0x22, 0x22, 0x22)
    assert digits.digit_color == (0x22, 0x22, 0x22)

def test_label_color_rules():
    config = dict(text_color="#111111", box_color="#222222", label_color="#333333")
    cases = {
        "square": (0x33, 0x33, 0x33),
        "square-border": (0x33, 0x33, 0x33),
        "square-inside": (0x11, 0x11, 0x11),
        "square-border-inside": (0x22, 0x22, 0x22),
    }
    for template, expected in cases.items():
        renderer = CountdownRenderer(CountdownConfig(template=template, **config))
        renderer.resolve_colors()
        assert renderer.label_color == expected, template

def test_decoded_gif_keeps_colors():
    data = render_countdown_gif(CountdownConfig(box_color="#00AAFF", background_color="#101010"), ONE_HOUR_MS)
    _, frames = decode_frames(data)
    x, y = box_origin(0)
    assert color_close(frames[0].getpixel((x + 2, y + 2)), BOX_COLOR)
    assert color_close(frames[0].getpixel((2, 2)), (0x10, 0x10, 0x10))

def test_invalid_color_raises_render_error():
    with pytest.raises(RenderError):
        render_countdown_gif(CountdownConfig(box_color="not-a-color"), ONE_HOUR_MS)

def test_unregistered_font_still_renders():
    data = render_countdown_gif(CountdownConfig(font="No Such Font"), ONE_HOUR_MS)
    assert data[:6] == b"GIF89a"

def test_encoder_requires_frames():
    with pytest.raises(ValueError):
        GifEncoder().finish()

def test_encoder_snapshots_frames():
    canvas = Image.new("RGB", (10, 10), (255, 0, 0))
    encoder = GifEncoder(delay_ms=500)
    encoder.add_frame(canvas)
    canvas.paste((0, 0, 255), (0, 0, 10, 10))
    encoder.add_frame(canvas)
    assert encoder.frames[0].getpixel((0, 0)) == (255, 0, 0)
    gif, frames = decode_frames(encoder.finish())
    assert gif.info["duration"] == 500
    assert color_close(frames[0].getpixel((0, 0)), (255, 0, 0))
    assert color_close(frames[1].getpixel((0, 0)), (0, 0, 255))

def test_oversized_corner_radius_is_clamped():
    renderer = CountdownRenderer(CountdownConfig(template="rounded-lg", box_color="#00AAFF"))
    renderer.traits = TemplateTraits(shape="square", corner_radius=500)
    canvas = next(renderer.frames(ONE_HOUR_MS, 1))
    x, y = box_origin(0)
    # Radius 40 on an 80px box: corners cut, edge midpoints painted
    assert canvas.getpixel((x + 1, y + 1)) == BACKGROUND
    assert canvas.getpixel((x + 1, y + 40)) == BOX_COLOR
    assert canvas.getpixel((x + 40, y + 1)) == BOX_COLOR
    # Nothing spills outside the box
    assert canvas.getpixel((x - 1, y + 40)) == BACKGROUND
    assert canvas.getpixel((x + 80, y + 40)) == BACKGROUND

@pytest.mark.skipif(not os.path.exists(DEJAVU_BOLD), reason="DejaVu Sans Bold not installed")
def test_default_config_digits_are_bold():
    register_fonts()
    renderer = CountdownRenderer(CountdownConfig())
    assert renderer.digit_font.getname()[1] == "Bold"

def test_encoder_writes_repeated_frames():
    canvas = Image.new("RGB", (8, 8), (0, 170, 255))
    encoder = GifEncoder(delay_ms=250)
    for _ in range(4):
        encoder.add_frame(canvas)
    data = encoder.finish()
    assert data[:6] == b"GIF89a"
    assert data[-1:] == b";"
    assert frame_durations(data) == [250] * 4
