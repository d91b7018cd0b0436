# snake_logic.py

"""
Lógica de la serpiente sin ventana: dirección, movimiento con wraparound
y proyección a píxeles. Las interfaces (arcade y curses) solo reenvían
los eventos de dibujo, teclado y actualización a SnakeLogic.
"""

import enum
from collections import deque, namedtuple

import numpy as np

# --- Constantes del Juego ---
SCREEN_WIDTH_LOGIC = 1000  # Ancho lógico de la pantalla (píxeles)
SCREEN_HEIGHT_LOGIC = 800  # Alto lógico de la pantalla (píxeles)
STEP_SIZE_LOGIC = 20       # Tamaño de cada celda y paso de la serpiente
UPDATES_PER_SECOND = 30    # Actualizaciones lógicas por segundo

# --- Colores (RGBA normalizado) ---
# El canal verde del fondo vale 1.3, fuera de [0, 1]. Se conserva tal cual.
BG_COLOR = (0.5, 1.3, 0.8, 0.5)
SNAKE_COLOR = (0.8, 0.6, 1.0, 1.0)

Position = namedtuple('Position', ['x', 'y'])


class Direction(enum.Enum):
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


OPPOSITE_DIRECTION = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Teclas (ya normalizadas a minúscula) -> dirección candidata
KEY_TO_DIRECTION = {
    'w': Direction.UP,
    's': Direction.DOWN,
    'd': Direction.RIGHT,
    'a': Direction.LEFT,
}

# Cuerpo inicial, cabeza primero. El hueco en x=2 viene así del juego original.
INITIAL_BODY = (
    Position(0, 0),
    Position(1, 0),
    Position(3, 0),
    Position(4, 0),
    Position(5, 0),
    Position(6, 0),
    Position(7, 0),
)
INITIAL_DIRECTION = Direction.RIGHT


class EmptySnakeBodyError(RuntimeError):
    """La serpiente se quedó sin cuerpo. Es un error de programación, no se recupera."""

    def __init__(self, message="empty snake body"):
        super().__init__(message)


def request_turn(current: Direction, key) -> Direction:
    """
    Devuelve la nueva dirección tras pulsar `key`.

    Las teclas sin mapeo se ignoran y el giro de 180 grados se rechaza;
    en ambos casos se devuelve `current` sin cambios.
    """
    if isinstance(key, str):
        key = key.lower()
    candidate = KEY_TO_DIRECTION.get(key)
    if candidate is None or candidate == OPPOSITE_DIRECTION[current]:
        return current
    return candidate


def next_head(head: Position, direction: Direction, max_x: int, max_y: int) -> Position:
    """Calcula la celda siguiente a `head` en `direction`, dando la vuelta en los bordes."""
    x, y = head
    if direction == Direction.LEFT:
        x = max_x if x - 1 < 0 else x - 1
    elif direction == Direction.RIGHT:
        x = 0 if x + 1 > max_x else x + 1
    elif direction == Direction.UP:
        y = max_y if y - 1 < 0 else y - 1
    elif direction == Direction.DOWN:
        y = 0 if y + 1 > max_y else y + 1
    return Position(x, y)


def advance(body: deque, direction: Direction, max_x: int, max_y: int) -> None:
    """
    Mueve el cuerpo una celda: añade la nueva cabeza delante y quita la cola.
    La longitud no cambia (registro de desplazamiento).
    """
    if not body:
        raise EmptySnakeBodyError()
    body.appendleft(next_head(body[0], direction, max_x, max_y))
    body.pop()


def project_body(body, cell_size) -> np.ndarray:
    """Pasa las celdas del cuerpo a coordenadas de píxel (esquina superior izquierda)."""
    cells = np.asarray(list(body), dtype=float).reshape(-1, 2)
    return cells * cell_size


class SnakeLogic:
    def __init__(self, width=SCREEN_WIDTH_LOGIC, height=SCREEN_HEIGHT_LOGIC,
                 step_size=STEP_SIZE_LOGIC, updates_per_second=UPDATES_PER_SECOND,
                 initial_body=INITIAL_BODY, initial_direction=INITIAL_DIRECTION):
        if step_size <= 0:
            raise ValueError(f"step_size debe ser positivo (recibido {step_size}).")
        if width < step_size or height < step_size:
            raise ValueError(
                f"La pantalla ({width}x{height}) no cabe ni una celda de {step_size}.")
        if updates_per_second <= 0:
            raise ValueError(
                f"updates_per_second debe ser positivo (recibido {updates_per_second}).")

        self.width = width
        self.height = height
        self.step_size = step_size

        # Coordenadas máximas de la cuadrícula (inclusive)
        self.max_x = width // step_size - 1
        self.max_y = height // step_size - 1

        self.initial_body = tuple(Position(*p) for p in initial_body)
        if not self.initial_body:
            raise ValueError("El cuerpo inicial no puede estar vacío.")
        for p in self.initial_body:
            if not (0 <= p.x <= self.max_x and 0 <= p.y <= self.max_y):
                raise ValueError(
                    f"El segmento inicial {tuple(p)} queda fuera de la cuadrícula "
                    f"({self.max_x + 1}x{self.max_y + 1}).")
        self.initial_direction = initial_direction

        self.time_per_move = 1.0 / updates_per_second
        self.movement_timer = 0.0

        self.snake_body = deque()
        self.direction = initial_direction

        self.setup()

    def setup(self):
        """Coloca la serpiente en su posición inicial."""
        self.snake_body = deque(self.initial_body)
        self.direction = self.initial_direction
        self.movement_timer = 0.0
        return self.get_state()

    def reset(self):
        return self.setup()

    def get_state(self):
        """Foto inmutable del estado: (cuerpo, dirección)."""
        return tuple(self.snake_body), self.direction

    def pressed(self, key) -> Direction:
        self.direction = request_turn(self.direction, key)
        return self.direction

    def update(self):
        advance(self.snake_body, self.direction, self.max_x, self.max_y)

    def on_update(self, delta_time: float) -> int:
        """
        Acumula el tiempo transcurrido y avanza una celda por cada
        `time_per_move` completo. Devuelve cuántos pasos se dieron.
        """
        self.movement_timer += delta_time
        steps = 0
        while self.movement_timer >= self.time_per_move:
            self.movement_timer -= self.time_per_move
            self.update()
            steps += 1
        return steps

    def render(self, renderer):
        """Limpia el fondo y dibuja un cuadrado por segmento, de cabeza a cola."""
        renderer.clear(BG_COLOR)
        for px, py in project_body(self.snake_body, self.step_size):
            renderer.draw_square(float(px), float(py), self.step_size, SNAKE_COLOR)

    def tick(self, renderer, key=None, delta_time: float = 0.0) -> int:
        """Un ciclo completo del bucle: dibujar, procesar la tecla y actualizar."""
        self.render(renderer)
        if key is not None:
            self.pressed(key)
        return self.on_update(delta_time)
