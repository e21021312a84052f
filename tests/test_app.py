from collections import defaultdict

import pygame

from bullethell.app import PygameCanvas, read_controls
from bullethell.geometry import Rect, Vec2
from bullethell.graphics import RED, WHITE, Controls, Texture


def make_png(tmp_path, size=(8, 4), color=(255, 0, 0)):
    image = pygame.Surface(size)
    image.fill(color)
    path = tmp_path / "sprite.png"
    pygame.image.save(image, str(path))
    return path


def make_canvas():
    return PygameCanvas(pygame.Surface((100, 100)))


def test_clear_fills_surface():
    canvas = make_canvas()
    canvas.clear((10, 20, 30, 255))
    assert tuple(canvas.surface.get_at((50, 50))) == (10, 20, 30, 255)


def test_load_texture_reads_size(tmp_path):
    canvas = make_canvas()
    texture = canvas.load_texture(make_png(tmp_path, size=(8, 4)))
    assert (texture.width, texture.height) == (8, 4)
    assert texture.loaded


def test_load_missing_texture_is_empty(tmp_path):
    texture = make_canvas().load_texture(tmp_path / "missing.png")
    assert texture == Texture()
    assert not texture.loaded


def test_draw_sprite_scales_source_onto_dest(tmp_path):
    canvas = make_canvas()
    texture = canvas.load_texture(make_png(tmp_path))
    canvas.draw_sprite(texture, Rect(0, 0, 4, 4), Rect(10, 10, 8, 8), WHITE)
    assert tuple(canvas.surface.get_at((17, 17))) == (255, 0, 0, 255)
    assert tuple(canvas.surface.get_at((18, 18))) == (0, 0, 0, 255)


def test_draw_sprite_past_texture_edge_draws_nothing(tmp_path):
    canvas = make_canvas()
    texture = canvas.load_texture(make_png(tmp_path))
    canvas.draw_sprite(texture, Rect(8, 0, 4, 4), Rect(10, 10, 8, 8), WHITE)
    assert tuple(canvas.surface.get_at((12, 12))) == (0, 0, 0, 255)


def test_draw_texture_scaled(tmp_path):
    canvas = make_canvas()
    texture = canvas.load_texture(make_png(tmp_path, size=(4, 4)))
    canvas.draw_texture_scaled(texture, Vec2(0, 0), 2.0, WHITE)
    assert tuple(canvas.surface.get_at((7, 7))) == (255, 0, 0, 255)
    assert tuple(canvas.surface.get_at((8, 8))) == (0, 0, 0, 255)


def test_draw_rect_lines_only_outline():
    canvas = make_canvas()
    canvas.draw_rect_lines(Rect(10, 10, 20, 20), RED)
    assert tuple(canvas.surface.get_at((10, 15))) == RED
    assert tuple(canvas.surface.get_at((20, 20))) == (0, 0, 0, 255)


def test_measure_text_grows_with_text():
    canvas = make_canvas()
    assert canvas.measure_text("Game Over", 30) > canvas.measure_text("Game", 30)
    assert canvas.measure_text("", 30) == 0


def test_read_controls_keys_and_mouse():
    keys = defaultdict(bool, {pygame.K_w: True, pygame.K_SPACE: True})
    controls = read_controls(keys, (True, False, False), [])
    assert controls == Controls(up=True, shoot=True, precision=True)


def test_read_controls_confirm_on_enter_press():
    keys = defaultdict(bool)
    pressed = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN)]
    released = [pygame.event.Event(pygame.KEYUP, key=pygame.K_RETURN)]
    assert read_controls(keys, (False, False, False), pressed).confirm is True
    assert read_controls(keys, (False, False, False), released).confirm is False