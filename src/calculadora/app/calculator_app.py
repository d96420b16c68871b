"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

import time

import cv2

from ..config.display import DisplayConfig
from ..core.buttons import CalculatorButton
from ..core.calculator import Calculator
from ..ui.layout import button_at
from ..ui.renderer import UIRenderer


KEY_ESC = 27
KEY_ENTER = (10, 13)
KEY_BACKSPACE = (8, 127)

# ============================================================================
# ATAJOS DE TECLADO (carácter → botón)
# ============================================================================
KEY_BINDINGS = {str(d): CalculatorButton.from_digit(d) for d in range(10)}
KEY_BINDINGS.update({
    ".": CalculatorButton.DECIMAL,
    ",": CalculatorButton.DECIMAL,
    "+": CalculatorButton.PLUS,
    "-": CalculatorButton.MINUS,
    "*": CalculatorButton.MULTIPLY,
    "x": CalculatorButton.MULTIPLY,
    "/": CalculatorButton.DIVIDE,
    "=": CalculatorButton.EQUALS,
    "c": CalculatorButton.CLEAR,
    "n": CalculatorButton.NEGATIVE,
    "%": CalculatorButton.PERCENT,
})


def button_for_key(key):
    """
    Traduce un código de tecla de cv2.waitKey a un botón.

    Args:
        key (int): Código de tecla (ya enmascarado con & 0xFF)

    Returns:
        CalculatorButton | None: None si la tecla no tiene asignación
    """
    if key in KEY_ENTER:
        return CalculatorButton.EQUALS
    if key in KEY_BACKSPACE:
        return CalculatorButton.CLEAR
    if 0 <= key < 256:
        return KEY_BINDINGS.get(chr(key).lower())
    return None


# ============================================================================
class CalculatorApp:
    """
    Aplicación principal de calculadora.

    Arquitectura:
        - Calculator: Lógica aritmética y estado
        - UIRenderer: Renderizado de interfaz gráfica
        - CalculatorApp: Coordinador, eventos de ratón/teclado y loop principal

    La calculadora solo recibe un evento a la vez, siempre desde el hilo
    del loop principal.
    """

    def __init__(self, config=None):
        """
        Inicializa la aplicación.

        Args:
            config (DisplayConfig): Configuración visual (opcional)

        La ventana no se crea hasta run(), de modo que los eventos pueden
        procesarse sin pantalla.
        """
        self.config = config if config else DisplayConfig()
        self.calc = Calculator()
        self.ui = UIRenderer(self.config.window_width, self.config.window_height, self.config)

        # Variables de FPS (frames por segundo)
        self.fps_time = time.time()
        self.fps = 0

    def press(self, button):
        """
        Procesa la pulsación de un botón (ratón o teclado).

        Args:
            button (CalculatorButton): Botón pulsado

        Returns:
            CalculatorState: Estado de la calculadora tras el evento
        """
        state = self.calc.handle_input(button)
        self.ui.flash_button(button)
        return state

    def handle_key(self, key):
        """
        Procesa una tecla.

        Args:
            key (int): Código retornado por cv2.waitKey

        Returns:
            bool: False si la tecla pide salir (ESC o 'q'), True en otro caso
        """
        if key < 0:
            return True
        key &= 0xFF
        if key == KEY_ESC or key == ord('q'):
            return False

        button = button_for_key(key)
        if button is not None:
            self.press(button)
        return True

    def handle_mouse(self, event, x, y, flags, param):
        """Callback de ratón de cv2: un clic izquierdo pulsa el botón bajo el cursor."""
        if event != cv2.EVENT_LBUTTONDOWN:
            return
        button = button_at(self.ui.layout, x, y)
        if button is not None:
            self.press(button)

    def _sync_window_size(self):
        # Adaptar el layout si el usuario redimensionó la ventana
        try:
            _, _, w, h = cv2.getWindowImageRect(self.config.window_title)
        except cv2.error:
            return
        if w > 0 and h > 0 and (w, h) != (self.ui.width, self.ui.height):
            self.ui.resize(w, h)

    def _window_closed(self):
        try:
            return cv2.getWindowProperty(self.config.window_title, cv2.WND_PROP_VISIBLE) < 1
        except cv2.error:
            return True

    def frame(self):
        """Renderiza un frame, con contador de FPS si está activado."""
        img = self.ui.render(self.calc)

        current_time = time.time()
        self.fps = 1 / (current_time - self.fps_time + 1e-6)  # +epsilon evita div/0
        self.fps_time = current_time
        if self.config.show_fps:
            self.ui.draw_fps(img, self.fps)
        return img

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Ajustar layout al tamaño actual de la ventana
            2. Renderizar estado de la calculadora
            3. Mostrar frame y procesar input de teclado
            4. Repetir hasta ESC, 'q' o cierre de la ventana

        Los clics llegan por el callback handle_mouse durante cv2.waitKey.
        """
        print("\n" + "=" * 50)
        print("CALCULADORA")
        print("=" * 50)
        print("\nNumeros: 0-9 | Decimal: . o ,")
        print("Operaciones: + - * /  | Calcular: = o Enter")
        print("Borrar todo: c o Backspace | Signo: n | Porcentaje: %")
        print("\nPresiona ESC o 'q' para salir\n")
        print("=" * 50 + "\n")

        title = self.config.window_title
        cv2.namedWindow(title, cv2.WINDOW_NORMAL)
        cv2.resizeWindow(title, self.config.window_width, self.config.window_height)
        cv2.setMouseCallback(title, self.handle_mouse)

        try:
            while True:
                self._sync_window_size()
                cv2.imshow(title, self.frame())

                key = cv2.waitKey(self.config.frame_delay_ms)
                if not self.handle_key(key):
                    break
                if self._window_closed():
                    break
        finally:
            cv2.destroyAllWindows()     # Cerrar ventanas de OpenCV

        print("\nOK Aplicacion cerrada correctamente")
