# snake_shell.py
import curses
import argparse
import time

from snake_logic import SnakeLogic, STEP_SIZE_LOGIC, UPDATES_PER_SECOND

# El tablero completo del juego original (50x40 celdas) no cabe en una terminal
# normal, así que la versión de terminal usa un tablero más pequeño por defecto.
SCREEN_WIDTH_SHELL = 600   # 30 columnas lógicas
SCREEN_HEIGHT_SHELL = 400  # 20 filas lógicas
FRAMES_PER_SECOND_SHELL = 30

KEY_ESCAPE = 27
QUIT_KEYS = (ord('q'), KEY_ESCAPE)

SEGMENT_CHARS = "[]"  # Cada celda lógica ocupa dos caracteres de ancho


def key_from_curses(user_key):
    """Traduce un código de getch() a la tecla que entiende SnakeLogic (o None)."""
    if 0 <= user_key < 256:
        return chr(user_key).lower()
    return None


class CursesRenderer:
    """Pinta los cuadrados en celdas de caracteres, con un borde de '#' alrededor."""

    def __init__(self, stdscr, cell_size, grid_cols, grid_rows):
        self.stdscr = stdscr
        self.cell_size = cell_size
        self.grid_cols = grid_cols
        self.grid_rows = grid_rows

    def put_text(self, row, col, text):
        try:
            self.stdscr.addstr(row, col, text)
        except curses.error:
            pass  # Fuera de la terminal, no se dibuja

    def clear(self, color):
        # La terminal no tiene colores RGBA; el fondo es el de la propia terminal
        self.stdscr.erase()
        border_row = "#" * ((self.grid_cols + 2) * 2)
        self.put_text(0, 0, border_row)
        self.put_text(self.grid_rows + 1, 0, border_row)
        for r_idx in range(1, self.grid_rows + 1):
            self.put_text(r_idx, 0, "##")
            self.put_text(r_idx, (self.grid_cols + 1) * 2, "##")

    def draw_square(self, x, y, size, color):
        row = int(y // self.cell_size) + 1
        col = (int(x // self.cell_size) + 1) * 2
        self.put_text(row, col, SEGMENT_CHARS)


def game_loop_shell_curses(stdscr, game, fps=FRAMES_PER_SECOND_SHELL):
    curses.curs_set(0)
    stdscr.nodelay(1)
    stdscr.timeout(int(1000 / fps))

    grid_cols = game.max_x + 1
    grid_rows = game.max_y + 1

    term_rows, term_cols = stdscr.getmaxyx()
    min_req_rows = grid_rows + 3  # +2 bordes, +1 estado
    min_req_cols = (grid_cols + 2) * 2  # +2 bordes, dos caracteres por celda

    if term_rows < min_req_rows or term_cols < min_req_cols:
        stdscr.clear()
        stdscr.addstr(0, 0, "Terminal is too small.")
        stdscr.addstr(1, 0, f"Required: {min_req_rows} rows, {min_req_cols} cols.")
        stdscr.addstr(2, 0, f"Available: {term_rows} rows, {term_cols} cols.")
        stdscr.addstr(4, 0, "Press any key to exit.")
        stdscr.nodelay(0)
        stdscr.getch()
        return False

    renderer = CursesRenderer(stdscr, game.step_size, grid_cols, grid_rows)
    pending_key = None
    last_time = time.monotonic()

    while True:
        now = time.monotonic()
        delta_time = now - last_time
        last_time = now

        # Orden fijo: dibujar, aplicar la tecla pendiente y actualizar
        game.tick(renderer, key=pending_key, delta_time=delta_time)

        status = f"Direction: {game.direction.name}  ('q' to quit)"
        renderer.put_text(grid_rows + 2, 2, status)
        stdscr.refresh()

        user_key = stdscr.getch()
        if user_key in QUIT_KEYS:
            break
        pending_key = key_from_curses(user_key) if user_key != -1 else None

    return True


def main_shell():
    parser = argparse.ArgumentParser(description="Snake en bucle infinito (versión de terminal)")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH_SHELL,
                        help="Ancho lógico del tablero en píxeles.")
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT_SHELL,
                        help="Alto lógico del tablero en píxeles.")
    parser.add_argument("--cell-size", type=int, default=STEP_SIZE_LOGIC,
                        help="Tamaño de cada celda en píxeles.")
    parser.add_argument("--ups", type=float, default=UPDATES_PER_SECOND,
                        help="Actualizaciones lógicas por segundo.")
    parser.add_argument("--fps", type=float, default=FRAMES_PER_SECOND_SHELL,
                        help="Fotogramas dibujados por segundo.")
    args = parser.parse_args()

    game = SnakeLogic(args.width, args.height, args.cell_size, args.ups)

    try:
        played = curses.wrapper(game_loop_shell_curses, game, args.fps)
    except curses.error as e:
        print(f"Error de Curses: {e}")
        print("Asegúrate de que la terminal es compatible y tiene el tamaño adecuado.")
        return 1
    if not played:
        print("La terminal es demasiado pequeña para el tablero.")
        return 1
    print("Juego de terminal terminado.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main_shell())
