"""
Geometría adaptativa del teclado y del display.

Calcula la posición de cada botón a partir del tamaño de la ventana y permite
saber qué botón hay bajo un punto (clic del ratón).
"""

from collections import namedtuple

from ..core.buttons import BUTTON_ROWS, WIDE_BUTTONS


class Rect(namedtuple("Rect", ["x", "y", "w", "h"])):
    """Rectángulo en píxeles (esquina superior izquierda + tamaño)."""

    __slots__ = ()

    def contains(self, px, py):
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h

    @property
    def center(self):
        return (int(self.x + self.w / 2), int(self.y + self.h / 2))

    def to_int(self):
        return Rect(int(round(self.x)), int(round(self.y)),
                    int(round(self.w)), int(round(self.h)))


ButtonRect = namedtuple("ButtonRect", ["button", "rect"])
Layout = namedtuple("Layout", ["width", "height", "display", "buttons",
                               "button_width", "button_height"])


def compute_layout(width, height, config, rows=BUTTON_ROWS):
    """
    Calcula el layout completo para una ventana de width x height.

    Args:
        width (int): Ancho de la ventana
        height (int): Alto de la ventana
        config (DisplayConfig): Márgenes, espaciado y mínimos
        rows (list): Filas de botones (por defecto BUTTON_ROWS)

    Returns:
        Layout: Rectángulo del display y lista de ButtonRect

    Geometría:
        - Ancho base: (ancho útil - espaciado entre columnas) / columnas
        - Display: 18% de la altura (mínimo 72 px)
        - Alto base: min(ancho base, alto disponible / filas), mínimo 44 px
        - Teclado anclado al borde inferior, display justo encima
        - Botones anchos (el 0) ocupan dos columnas
    """
    pad = config.horizontal_padding
    spacing = config.spacing
    columns = config.columns
    n_rows = len(rows)

    total_width = width - pad * 2
    base_w = (total_width - spacing * (columns - 1)) / columns

    display_h = config.get_display_height(height)
    available = height - display_h - config.vertical_reserve
    base_h = max(min(base_w, (available - spacing * (n_rows - 1)) / n_rows),
                 config.min_button_height)

    keypad_h = base_h * n_rows + spacing * (n_rows - 1)
    keypad_top = height - config.bottom_padding - keypad_h

    buttons = []
    for r, row in enumerate(rows):
        y = keypad_top + r * (base_h + spacing)
        x = pad
        for button in row:
            w = base_w * 2 + spacing if button in WIDE_BUTTONS else base_w
            buttons.append(ButtonRect(button, Rect(x, y, w, base_h)))
            x += w + spacing

    display_bottom = keypad_top - spacing
    display_top = max(display_bottom - display_h, 0)
    display = Rect(0, display_top, width, max(display_bottom - display_top, 0))

    return Layout(width, height, display, buttons, base_w, base_h)


def button_at(layout, x, y):
    """
    Retorna el botón que contiene el punto (x, y).

    Returns:
        CalculatorButton | None: None si el punto no cae sobre ningún botón
    """
    for item in layout.buttons:
        if item.rect.contains(x, y):
            return item.button
    return None
