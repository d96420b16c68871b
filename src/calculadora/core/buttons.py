"""
Botones del teclado de la calculadora.

Cada botón es un miembro de CalculatorButton cuyo valor es la etiqueta
visible. Los colores se obtienen de una tabla de consulta por botón.
"""

from enum import Enum

from .calculator import Operation


# ============================================================================
# TABLA DE COLORES (RGB normalizado 0.0-1.0)
# ============================================================================
DIGIT_COLOR = (0.15, 0.15, 0.25)     # Azul grisáceo oscuro
FOREGROUND_COLOR = (1.0, 1.0, 1.0)   # Blanco

_BACKGROUND_COLORS = {
    "CLEAR": (1.0, 0.3, 0.3),        # Rojo brillante
    "NEGATIVE": (1.0, 0.6, 0.0),     # Naranja
    "PERCENT": (1.0, 0.8, 0.0),      # Amarillo dorado
    "DIVIDE": (0.4, 0.8, 1.0),       # Azul cielo
    "MULTIPLY": (0.6, 0.4, 1.0),     # Morado
    "MINUS": (1.0, 0.4, 0.7),        # Rosa
    "PLUS": (0.3, 0.9, 0.5),         # Verde
    "EQUALS": (0.2, 0.7, 1.0),       # Azul
}

_OPERATIONS = {
    "PLUS": Operation.ADD,
    "MINUS": Operation.SUBTRACT,
    "MULTIPLY": Operation.MULTIPLY,
    "DIVIDE": Operation.DIVIDE,
}


def rgb_to_bgr(rgb):
    """
    Convierte un color RGB normalizado a BGR 0-255 (formato de OpenCV).

    Args:
        rgb (tuple): Color (r, g, b) con componentes 0.0-1.0

    Returns:
        tuple: Color (b, g, r) con componentes enteros 0-255
    """
    r, g, b = rgb
    return (int(round(b * 255)), int(round(g * 255)), int(round(r * 255)))


class CalculatorButton(Enum):
    """Botones del teclado. El valor es la etiqueta mostrada."""

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    DECIMAL = "."
    EQUALS = "="
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"
    CLEAR = "AC"
    NEGATIVE = "+/-"
    PERCENT = "%"

    @property
    def label(self):
        return self.value

    @property
    def is_digit(self):
        return self.value.isdigit()

    @property
    def operation(self):
        """Operation asociada a +, -, ×, ÷ (None para el resto)."""
        return _OPERATIONS.get(self.name)

    @property
    def background_rgb(self):
        return _BACKGROUND_COLORS.get(self.name, DIGIT_COLOR)

    @property
    def background_color(self):
        """Color de fondo en BGR 0-255 para dibujar con cv2."""
        return rgb_to_bgr(self.background_rgb)

    @property
    def foreground_color(self):
        return rgb_to_bgr(FOREGROUND_COLOR)

    @classmethod
    def from_digit(cls, digit):
        """Retorna el botón del dígito 0-9."""
        return cls(str(digit))


# ============================================================================
# DISTRIBUCIÓN DEL TECLADO (filas de arriba a abajo)
# El botón 0 ocupa dos columnas
# ============================================================================
BUTTON_ROWS = [
    [CalculatorButton.CLEAR, CalculatorButton.NEGATIVE,
     CalculatorButton.PERCENT, CalculatorButton.DIVIDE],
    [CalculatorButton.SEVEN, CalculatorButton.EIGHT,
     CalculatorButton.NINE, CalculatorButton.MULTIPLY],
    [CalculatorButton.FOUR, CalculatorButton.FIVE,
     CalculatorButton.SIX, CalculatorButton.MINUS],
    [CalculatorButton.ONE, CalculatorButton.TWO,
     CalculatorButton.THREE, CalculatorButton.PLUS],
    [CalculatorButton.ZERO, CalculatorButton.DECIMAL, CalculatorButton.EQUALS],
]

WIDE_BUTTONS = {CalculatorButton.ZERO}
