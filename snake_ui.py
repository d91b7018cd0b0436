# snake_ui.py
import argparse

import arcade

from snake_logic import SnakeLogic, SCREEN_WIDTH_LOGIC, SCREEN_HEIGHT_LOGIC, STEP_SIZE_LOGIC, \
    UPDATES_PER_SECOND

# --- Constantes Visuales ---
UI_SCREEN_TITLE_DEFAULT = "spinning-square"  # Título del juego original
UI_DRAW_RATE = 1 / 60  # Frecuencia de dibujo, independiente de las actualizaciones lógicas

# Teclas de arcade -> teclas que entiende SnakeLogic
KEY_MAP_ARCADE = {
    arcade.key.W: 'w',
    arcade.key.S: 's',
    arcade.key.D: 'd',
    arcade.key.A: 'a',
}


def to_rgba255(color):
    """Convierte un RGBA normalizado a bytes 0-255, recortando valores fuera de rango."""
    return tuple(int(round(min(max(c, 0.0), 1.0) * 255)) for c in color)


class ArcadeRenderer:
    """
    Dibuja sobre una ventana de arcade. SnakeLogic trabaja con origen arriba a la
    izquierda y arcade con origen abajo a la izquierda, así que se invierte el eje Y.
    """

    def __init__(self, window):
        self.window = window

    def clear(self, color):
        # El color normalizado se pasa tal cual; OpenGL recorta el canal fuera de rango
        self.window.clear(color_normalized=color)

    def draw_square(self, x, y, size, color):
        bottom = self.window.height - y - size
        arcade.draw_lbwh_rectangle_filled(x, bottom, size, size, to_rgba255(color))


class SnakeGameUI(arcade.Window):
    def __init__(self, snake_logic_instance: SnakeLogic, title: str = UI_SCREEN_TITLE_DEFAULT,
                 draw_rate: float = UI_DRAW_RATE):
        # on_update se llama a la misma frecuencia que el dibujo; SnakeLogic acumula
        # delta_time y avanza al ritmo de sus propias actualizaciones por segundo.
        super().__init__(snake_logic_instance.width, snake_logic_instance.height, title,
                         update_rate=draw_rate, draw_rate=draw_rate)
        self.game_logic = snake_logic_instance
        self.renderer = ArcadeRenderer(self)

    def on_draw(self):
        self.game_logic.render(self.renderer)

    def on_key_press(self, key, modifiers):
        if key == arcade.key.ESCAPE:
            self.close()
            return

        mapped = KEY_MAP_ARCADE.get(key)
        if mapped is not None:
            self.game_logic.pressed(mapped)

    def on_update(self, delta_time: float):
        self.game_logic.on_update(delta_time)

    def on_close(self):
        print("Ventana UI cerrada por el usuario.")
        super().on_close()


def main():
    parser = argparse.ArgumentParser(description="Snake en bucle infinito (ventana arcade)")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH_LOGIC,
                        help="Ancho de la ventana en píxeles.")
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT_LOGIC,
                        help="Alto de la ventana en píxeles.")
    parser.add_argument("--cell-size", type=int, default=STEP_SIZE_LOGIC,
                        help="Tamaño de cada celda en píxeles.")
    parser.add_argument("--ups", type=float, default=UPDATES_PER_SECOND,
                        help="Actualizaciones lógicas por segundo.")
    args = parser.parse_args()

    game_logic = SnakeLogic(args.width, args.height, args.cell_size, args.ups)
    print(f"Cuadrícula {game_logic.max_x + 1}x{game_logic.max_y + 1} "
          f"(celda {game_logic.step_size}px), {args.ups:g} actualizaciones/s.")
    SnakeGameUI(game_logic)
    arcade.run()


if __name__ == "__main__":
    main()
