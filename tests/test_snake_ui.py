import unittest
from types import SimpleNamespace
from unittest import mock

from snake_logic import BG_COLOR, SNAKE_COLOR, Direction, SnakeLogic

# arcade necesita pyglet/OpenGL; en máquinas sin ellos se saltan estas pruebas
try:
    import arcade
    import snake_ui
except Exception as e:
    arcade = None
    snake_ui = None
    IMPORT_ERROR = e
else:
    IMPORT_ERROR = None


@unittest.skipIf(snake_ui is None, f"arcade no disponible: {IMPORT_ERROR}")
class TestArcadeRenderer(unittest.TestCase):
    def setUp(self):
        self.window = mock.Mock()
        self.window.height = 800
        self.renderer = snake_ui.ArcadeRenderer(self.window)

    def test_clear_passes_normalized_color(self):
        self.renderer.clear(BG_COLOR)
        self.window.clear.assert_called_once_with(color_normalized=BG_COLOR)

    def test_square_flips_y_axis(self):
        with mock.patch('snake_ui.arcade.draw_lbwh_rectangle_filled') as draw:
            self.renderer.draw_square(40.0, 0.0, 20, SNAKE_COLOR)
        draw.assert_called_once_with(40.0, 780.0, 20, 20, (204, 153, 255, 255))

    def test_full_render_draws_one_rectangle_per_segment(self):
        game = SnakeLogic()
        with mock.patch('snake_ui.arcade.draw_lbwh_rectangle_filled') as draw:
            game.render(self.renderer)
        self.assertEqual(draw.call_count, len(game.snake_body))
        self.window.clear.assert_called_once()


@unittest.skipIf(snake_ui is None, f"arcade no disponible: {IMPORT_ERROR}")
class TestColors(unittest.TestCase):
    def test_out_of_range_channel_is_clamped(self):
        self.assertEqual(snake_ui.to_rgba255(BG_COLOR), (128, 255, 204, 128))

    def test_in_range(self):
        self.assertEqual(snake_ui.to_rgba255((0.0, 1.0, 0.0, 1.0)), (0, 255, 0, 255))


@unittest.skipIf(snake_ui is None, f"arcade no disponible: {IMPORT_ERROR}")
class TestSnakeGameUIEvents(unittest.TestCase):
    def setUp(self):
        self.game = SnakeLogic(updates_per_second=4)
        self.window = SimpleNamespace(game_logic=self.game, close=mock.Mock())

    def test_wasd_changes_direction(self):
        snake_ui.SnakeGameUI.on_key_press(self.window, arcade.key.W, 0)
        self.assertEqual(self.game.direction, Direction.UP)
        snake_ui.SnakeGameUI.on_key_press(self.window, arcade.key.S, 0)
        self.assertEqual(self.game.direction, Direction.UP)

    def test_other_keys_are_ignored(self):
        snake_ui.SnakeGameUI.on_key_press(self.window, arcade.key.UP, 0)
        self.assertEqual(self.game.direction, Direction.RIGHT)
        self.window.close.assert_not_called()

    def test_escape_closes_window(self):
        snake_ui.SnakeGameUI.on_key_press(self.window, arcade.key.ESCAPE, 0)
        self.window.close.assert_called_once()

    def test_on_update_forwards_delta_time(self):
        snake_ui.SnakeGameUI.on_update(self.window, 0.5)
        self.assertEqual(self.game.snake_body[0].x, 2)


if __name__ == '__main__':
    unittest.main()
