"""
Lógica de calculadora aritmética básica.

Este módulo contiene la máquina de estados Calculator que acumula dígitos,
encadena operaciones de izquierda a derecha y formatea el display.
"""

from collections import namedtuple
from enum import Enum


MAX_DIGITS = 9          # Máximo de dígitos al componer un número
ERROR_DISPLAY = "Error"  # Valor centinela de división por cero


class Operation(Enum):
    """Operación binaria pendiente. NONE indica que no hay operación."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"
    NONE = ""

    @property
    def symbol(self):
        return self.value


# Instantánea inmutable del estado completo de la calculadora
CalculatorState = namedtuple(
    "CalculatorState",
    ["display", "current_number", "previous_number",
     "operation", "is_typing_number", "history"],
)


def parse_display(text):
    """Convierte el texto del display a float (0.0 si no es numérico)."""
    try:
        return float(text)
    except ValueError:
        return 0.0


def format_number(value):
    """
    Formatea un número para el texto de historial.

    Args:
        value (float): Número a formatear

    Returns:
        str: Número con separador de miles "," y hasta 8 decimales

    Ejemplos:
        1234.5 → "1,234.5"
        2.0 → "2"
        0.123456789 → "0.12345679"
    """
    text = f"{value:,.8f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_result(value):
    """
    Formatea el resultado de "=" para el display principal.

    Resultados enteros se muestran sin punto decimal (8.0 → "8"); el resto
    usa la representación natural del float (0.1 + 0.2 → "0.30000000000000004").
    """
    if value.is_integer():
        return f"{value:.0f}"
    return str(value)


# ============================================================================
# CLASE: Calculator
# Propósito: Máquina de estados de la calculadora
# Responsabilidades:
#   - Construir números dígito por dígito (máximo 9 dígitos)
#   - Encadenar operaciones de izquierda a derecha, sin precedencia
#   - Mantener el historial de la expresión en curso o recién calculada
#   - Mostrar "Error" en división por cero (solo AC recupera)
# ============================================================================
class Calculator:
    """
    Motor de calculadora basado en eventos discretos.

    Modelo de operación:
        1. Usuario ingresa dígitos → se acumulan en display
        2. Usuario selecciona operación → display pasa a previous_number
        3. Usuario ingresa el segundo operando
        4. Usuario presiona = (u otra operación) → se evalúa la operación pendiente

    Ejemplo de encadenamiento:
        2 + 3 × 4 = → (2 + 3) × 4 = 20

    Variables de estado:
        - display: Texto mostrado, nunca vacío ("0" por defecto)
        - current_number: Valor numérico del display (o último resultado)
        - previous_number: Operando capturado al pulsar una operación
        - operation: Operación pendiente (Operation.NONE si no hay)
        - is_typing_number: True mientras se compone un número
        - history: Traza legible de la expresión (ej: "5 + 3 =")

    Ningún evento lanza excepciones: las entradas inválidas se ignoran.
    """

    def __init__(self):
        """Inicializa calculadora en estado por defecto."""
        self.clear()

    def handle_input(self, button):
        """
        Procesa la pulsación de un botón y retorna el nuevo estado.

        Args:
            button (CalculatorButton): Botón pulsado

        Returns:
            CalculatorState: Instantánea del estado tras la transición
        """
        if button.is_digit:
            self.press_digit(button.value)
        elif button.operation is not None:
            self.press_operation(button.operation)
        else:
            action = self._actions()[button.name]
            action()
        return self.get_state()

    def _actions(self):
        # Botones sin operando: nombre del botón → transición
        return {
            "DECIMAL": self.press_decimal,
            "EQUALS": self.press_equals,
            "CLEAR": self.clear,
            "NEGATIVE": self.toggle_sign,
            "PERCENT": self.percent,
        }

    def press_digit(self, digit):
        """
        Añade un dígito al número actual.

        Args:
            digit (str | int): Dígito 0-9

        Comportamiento:
            - Componiendo: concatena, salvo que el display sea "0" (se reemplaza)
            - Límite: a partir de 9 dígitos se ignora silenciosamente
            - Sin componer: el dígito empieza un número nuevo
        """
        digit = str(digit)
        if self.is_typing_number:
            if self._digit_count() < MAX_DIGITS:
                self.display = digit if self.display == "0" else self.display + digit
        else:
            self.display = digit
            self.is_typing_number = True

        self.current_number = parse_display(self.display)
        if self.operation is Operation.NONE:
            self.history = ""

    def press_decimal(self):
        """Añade punto decimal si el display aún no lo tiene."""
        if "." not in self.display:
            self.display += "."
            self.is_typing_number = True

    def press_operation(self, op):
        """
        Registra una operación binaria.

        Si ya había una operación pendiente se resuelve primero (como "="),
        de modo que la evaluación es siempre de izquierda a derecha.

        Args:
            op (Operation): Operación a aplicar
        """
        if self.operation is not Operation.NONE:
            self.press_equals()

        self.previous_number = self.current_number
        self.operation = op
        self.is_typing_number = False
        self.history = format_number(self.previous_number) + " " + op.symbol

    def press_equals(self):
        """
        Evalúa la operación pendiente.

        Resultado:
            - Suma, resta, multiplicación, división
            - Sin operación pendiente: el número actual (idempotente)
            - División por cero: display "Error", sin tocar los operandos

        Formateo:
            - 8.0 → "8" (enteros sin decimales)
            - 2.5 → "2.5" (representación natural)
        """
        op = self.operation
        if op is Operation.ADD:
            result = self.previous_number + self.current_number
        elif op is Operation.SUBTRACT:
            result = self.previous_number - self.current_number
        elif op is Operation.MULTIPLY:
            result = self.previous_number * self.current_number
        elif op is Operation.DIVIDE:
            if self.current_number == 0:
                # Estado terminal: solo AC lo recupera
                self.display = ERROR_DISPLAY
                self.operation = Operation.NONE
                self.is_typing_number = False
                return
            result = self.previous_number / self.current_number
        else:
            result = self.current_number

        self.display = format_result(result)
        if op is not Operation.NONE:
            self.history = "{} {} {} =".format(
                format_number(self.previous_number), op.symbol,
                format_number(self.current_number))

        self.current_number = result
        self.operation = Operation.NONE
        self.is_typing_number = False

    def clear(self):
        """Restablece TODO el estado (botón AC)."""
        self.display = "0"
        self.current_number = 0.0
        self.previous_number = 0.0
        self.operation = Operation.NONE
        self.is_typing_number = False
        self.history = ""

    def toggle_sign(self):
        """Cambia el signo del número actual y del display (botón +/-)."""
        self.current_number = -self.current_number
        if self.display.startswith("-"):
            self.display = self.display[1:]
        else:
            self.display = "-" + self.display

    def percent(self):
        """
        Divide el número actual entre 100 (botón %).

        El display usa la representación natural del float, sin el recorte
        de enteros de "=": 100 % → "1.0".
        """
        self.current_number = self.current_number / 100
        self.display = str(self.current_number)

    def get_state(self):
        """Retorna una instantánea inmutable del estado actual."""
        return CalculatorState(
            display=self.display,
            current_number=self.current_number,
            previous_number=self.previous_number,
            operation=self.operation,
            is_typing_number=self.is_typing_number,
            history=self.history,
        )

    def get_display(self):
        return self.display

    def get_history(self):
        return self.history

    def is_error(self):
        return self.display == ERROR_DISPLAY

    def _digit_count(self):
        return sum(1 for ch in self.display if ch.isdigit())
