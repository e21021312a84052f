import struct

import pytest

from bullethell.geometry import Rect, Vec2
from bullethell.graphics import (
    BLACK,
    PNG_SIGNATURE,
    RED,
    WHITE,
    Canvas,
    Controls,
    NullCanvas,
    Texture,
    fade,
    read_png_size,
)


def _write_png_header(path, width, height):
    ihdr = struct.pack(">I", 13) + b"IHDR" + struct.pack(">II", width, height)
    path.write_bytes(PNG_SIGNATURE + ihdr + b"\x08\x06\x00\x00\x00")


def test_fade_full_alpha_keeps_color():
    assert fade(RED, 1.0) == RED


def test_fade_zero_alpha_is_transparent():
    faded = fade(WHITE, 0.0)
    assert faded[:3] == WHITE[:3]
    assert faded[3] == 0


def test_fade_clamps_alpha():
    assert fade(RED, 2.0) == RED
    assert fade(RED, -1.0)[3] == 0


def test_read_png_size(tmp_path):
    png = tmp_path / "ship.png"
    _write_png_header(png, 128, 32)
    assert read_png_size(png) == (128, 32)


def test_read_png_size_rejects_other_files(tmp_path):
    other = tmp_path / "notes.txt"
    other.write_text("hello world, this is not an image")
    assert read_png_size(other) is None
    assert read_png_size(tmp_path / "missing.png") is None


def test_load_texture_reads_png_dimensions(tmp_path):
    png = tmp_path / "ship.png"
    _write_png_header(png, 128, 32)
    canvas = NullCanvas()
    texture = canvas.load_texture(png)
    assert (texture.width, texture.height) == (128, 32)
    assert texture.loaded
    assert canvas.loaded_textures[texture.id] == texture


def test_load_missing_texture_uses_default_size(tmp_path):
    canvas = NullCanvas(default_size=(64, 16))
    texture = canvas.load_texture(tmp_path / "missing.png")
    assert (texture.width, texture.height) == (64, 16)


def test_textures_get_distinct_ids(tmp_path):
    canvas = NullCanvas()
    first = canvas.load_texture(tmp_path / "a.png")
    second = canvas.load_texture(tmp_path / "b.png")
    assert first.id != second.id
    assert len(canvas.loaded_textures) == 2


def test_unload_texture_forgets_it(tmp_path):
    canvas = NullCanvas()
    texture = canvas.load_texture(tmp_path / "a.png")
    canvas.unload_texture(texture)
    assert texture.id not in canvas.loaded_textures


def test_default_texture_is_not_loaded():
    assert not Texture().loaded


def test_clear_starts_a_new_frame():
    canvas = NullCanvas()
    canvas.draw_text("Hi", 1, 2, 20, WHITE)
    canvas.clear(BLACK)
    assert canvas.commands == [("clear", BLACK)]


def test_draw_commands_are_recorded():
    canvas = NullCanvas()
    texture = Texture(id=3, width=8, height=8)
    source = Rect(0, 0, 8, 8)
    dest = Rect(10, 10, 16, 16)
    canvas.draw_sprite(texture, source, dest, WHITE)
    canvas.draw_texture_scaled(texture, Vec2(1, 2), 1.25, WHITE)
    canvas.draw_rect_lines(dest, RED)
    assert canvas.commands == [
        ("sprite", texture, source, dest, WHITE),
        ("texture", texture, Vec2(1, 2), 1.25, WHITE),
        ("rect_lines", dest, RED),
    ]


def test_measure_text_grows_with_length_and_size():
    canvas = NullCanvas()
    assert canvas.measure_text("", 30) == 0
    assert canvas.measure_text("Game Over", 30) > canvas.measure_text("Game", 30)
    assert canvas.measure_text("Game", 40) > canvas.measure_text("Game", 20)


def test_canvas_is_abstract():
    with pytest.raises(TypeError):
        Canvas()


def test_controls_are_mutable_flags():
    controls = Controls(up=True)
    controls.shoot = True
    assert controls == Controls(up=True, shoot=True)