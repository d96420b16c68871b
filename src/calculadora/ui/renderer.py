"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja todos los elementos visuales.
"""

import cv2
import numpy as np

from ..config.display import DisplayConfig
from .layout import compute_layout


FONT = cv2.FONT_HERSHEY_SIMPLEX
FONT_BOLD = cv2.FONT_HERSHEY_DUPLEX
FONT_PIXELS = 22.0   # Altura aproximada en píxeles de una fuente Hershey a escala 1.0

# Las fuentes Hershey solo tienen ASCII
_ASCII_SYMBOLS = {"×": "x", "÷": "/", "−": "-"}


def to_ascii(text):
    """Sustituye los símbolos no ASCII por equivalentes dibujables con cv2."""
    for symbol, replacement in _ASCII_SYMBOLS.items():
        text = text.replace(symbol, replacement)
    return text


def font_scale_for(pixels):
    """Convierte un tamaño de fuente en píxeles a escala de cv2.putText."""
    return pixels / FONT_PIXELS


def text_width(text, font, scale, thickness):
    return cv2.getTextSize(text, font, scale, thickness)[0][0]


def fit_scale(text, font, scale, thickness, max_width, min_factor):
    """
    Reduce la escala del texto hasta que quepa en max_width.

    Args:
        min_factor (float): Escala mínima relativa (0.2 = hasta un 20%)

    Returns:
        float: Escala resultante (nunca menor que scale * min_factor)
    """
    w = text_width(text, font, scale, thickness)
    if w <= max_width or w == 0:
        return scale
    return max(scale * max_width / w, scale * min_factor)


def truncate_tail(text, font, scale, thickness, max_width):
    """Recorta el final del texto con "..." si no cabe en max_width."""
    if text_width(text, font, scale, thickness) <= max_width:
        return text
    while text and text_width(text + "...", font, scale, thickness) > max_width:
        text = text[:-1]
    return text + "..."


def gradient_background(width, height, colors):
    """
    Genera un fondo con degradado diagonal de varios colores.

    Args:
        width (int): Ancho de la imagen
        height (int): Alto de la imagen
        colors (list): Colores BGR repartidos de forma uniforme desde la
            esquina superior izquierda a la inferior derecha

    Returns:
        np.array: Imagen BGR uint8 de height x width
    """
    xs = np.linspace(0.0, 1.0, max(width, 1))[None, :]
    ys = np.linspace(0.0, 1.0, max(height, 1))[:, None]
    t = (xs + ys) / 2.0

    stops = np.asarray(colors, dtype=np.float64)
    positions = np.linspace(0.0, 1.0, len(stops))
    channels = [np.interp(t, positions, stops[:, c]) for c in range(3)]
    return np.clip(np.dstack(channels), 0, 255).astype(np.uint8)


def draw_rounded_rect(img, rect, radius, color):
    """Dibuja un rectángulo relleno con esquinas redondeadas."""
    x, y, w, h = rect.to_int()
    r = int(max(0, min(radius, w // 2, h // 2)))
    x2, y2 = x + w - 1, y + h - 1

    cv2.rectangle(img, (x + r, y), (x2 - r, y2), color, -1)
    cv2.rectangle(img, (x, y + r), (x2, y2 - r), color, -1)
    if r > 0:
        for cx, cy in ((x + r, y + r), (x2 - r, y + r),
                       (x + r, y2 - r), (x2 - r, y2 - r)):
            cv2.circle(img, (cx, cy), r, color, -1, cv2.LINE_AA)


def lighten(color, amount):
    """Mezcla un color BGR con blanco (amount 0.0-1.0)."""
    return tuple(int(c + (255 - c) * amount) for c in color)


# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica para la calculadora.

    Componentes visuales:
        1. Fondo con degradado diagonal
        2. Historial: Expresión en curso o recién calculada (texto pequeño)
        3. Display principal: Número actual o resultado (grande, alineado a la derecha)
        4. Teclado: Botones redondeados con color por tipo y sombra suave
        5. Resaltado temporal del último botón pulsado
    """

    def __init__(self, width, height, config=None):
        """
        Inicializa el renderizador con dimensiones de la ventana.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (DisplayConfig): Configuración visual (opcional)
        """
        self.config = config if config else DisplayConfig()
        self.flash_button_id = None          # Botón resaltado actualmente
        self.flash_timer = 0                 # Frames restantes de resaltado
        self.resize(width, height)

    def resize(self, width, height):
        """Recalcula layout y fondo para un nuevo tamaño de ventana."""
        self.width = int(width)
        self.height = int(height)
        self.layout = compute_layout(self.width, self.height, self.config)
        self.background = gradient_background(self.width, self.height,
                                              self.config.background_colors)

    def flash_button(self, button, duration=None):
        """
        Resalta un botón durante unos frames (animación de pulsación).

        Args:
            button (CalculatorButton): Botón pulsado
            duration (int): Duración en frames (por defecto la de la configuración)
        """
        self.flash_button_id = button
        self.flash_timer = self.config.get_flash_frames() if duration is None else duration

    def render(self, calc):
        """
        Dibuja un frame completo.

        Args:
            calc (Calculator): Instancia de calculadora con estado actual

        Returns:
            np.array: Imagen BGR lista para cv2.imshow
        """
        img = self.background.copy()
        self.draw_display(img, calc)
        self.draw_buttons(img)
        if self.flash_timer > 0:
            self.flash_timer -= 1
            if self.flash_timer == 0:
                self.flash_button_id = None
        return img

    def draw_display(self, img, calc):
        """
        Dibuja el historial y el número principal.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            calc (Calculator): Instancia de calculadora con estado actual

        Tamaños dinámicos:
            - Historial: min(20 px, 18% del alto del display), recortado al final
            - Número: min(72 px, 60% del alto del display), encoge hasta un 20%

        Colores:
            - Blanco: Número normal
            - Rojo: Error
        """
        rect = self.layout.display
        if rect.h <= 0:
            return

        pad = self.config.horizontal_padding
        max_width = self.width - pad * 2
        right = self.width - pad

        # Historial (parte superior del display)
        history = to_ascii(calc.get_history())
        if history:
            scale = font_scale_for(min(20, rect.h * 0.18))
            history = truncate_tail(history, FONT, scale, 1, max_width)
            w = text_width(history, FONT, scale, 1)
            y = int(rect.y + rect.h * 0.25)
            overlay = img.copy()
            cv2.putText(overlay, history, (int(right - w), y), FONT, scale,
                        (255, 255, 255), 1, cv2.LINE_AA)
            opacity = self.config.history_opacity
            cv2.addWeighted(overlay, opacity, img, 1 - opacity, 0, img)

        # Número principal (parte inferior, alineado a la derecha)
        display = to_ascii(calc.get_display())
        base_scale = font_scale_for(min(72, rect.h * 0.6))
        thickness = max(1, int(round(base_scale * 1.5)))
        scale = fit_scale(display, FONT_BOLD, base_scale, thickness, max_width,
                          self.config.min_text_scale)
        w = text_width(display, FONT_BOLD, scale, thickness)
        y = int(rect.y + rect.h * 0.85)
        x = int(right - w)

        color = (100, 100, 255) if calc.is_error() else (255, 255, 255)

        # Sombra azulada bajo el número
        overlay = img.copy()
        cv2.putText(overlay, display, (x, y + 4), FONT_BOLD, scale,
                    (255, 64, 0), thickness + 2, cv2.LINE_AA)
        cv2.addWeighted(overlay, 0.25, img, 0.75, 0, img)

        cv2.putText(img, display, (x, y), FONT_BOLD, scale, color, thickness, cv2.LINE_AA)

    def draw_buttons(self, img):
        """
        Dibuja el teclado completo.

        Cada botón se dibuja en tres capas: sombra semitransparente desplazada,
        cuerpo redondeado con su color y etiqueta centrada.
        """
        radius = self.config.corner_radius
        offset = self.config.shadow_offset
        label_scale = font_scale_for(min(32, self.layout.button_height * 0.45))
        thickness = max(1, int(round(label_scale * 1.5)))

        # Sombras (una sola mezcla para todo el teclado)
        overlay = img.copy()
        for item in self.layout.buttons:
            shadow = item.rect._replace(y=item.rect.y + offset)
            draw_rounded_rect(overlay, shadow, radius, item.button.background_color)
        opacity = self.config.shadow_opacity
        cv2.addWeighted(overlay, opacity, img, 1 - opacity, 0, img)

        for item in self.layout.buttons:
            color = item.button.background_color
            if item.button is self.flash_button_id and self.flash_timer > 0:
                color = lighten(color, 0.4)
            draw_rounded_rect(img, item.rect, radius, color)

            label = to_ascii(item.button.label)
            (tw, th), _ = cv2.getTextSize(label, FONT_BOLD, label_scale, thickness)
            cx, cy = item.rect.center
            cv2.putText(img, label, (cx - tw // 2, cy + th // 2), FONT_BOLD,
                        label_scale, item.button.foreground_color, thickness, cv2.LINE_AA)

    def draw_fps(self, img, fps):
        """Dibuja el contador de FPS en la esquina superior izquierda."""
        cv2.putText(img, f"FPS: {int(fps)}", (10, 24),
                    FONT, 0.6, (0, 255, 0), 2)
