"""
Configuración de ventana, geometría y tema visual.

Este módulo contiene la configuración centralizada que usan el renderizador
y el cálculo de layout adaptativo.
"""

# ============================================================================
# CLASE: DisplayConfig
# Propósito: Configuración visual de la calculadora
# Responsabilidades:
#   - Almacenar tamaño inicial de ventana y márgenes
#   - Definir proporciones del display y tamaños mínimos de botones
#   - Guardar colores del fondo degradado y tiempos de animación
# ============================================================================
class DisplayConfig:
    """
    Configuración visual para adaptar la calculadora a distintos tamaños.

    Opciones disponibles:
        - Tamaño inicial de ventana (redimensionable en ejecución)
        - Márgenes, espaciado y radio de las esquinas de los botones
        - Proporción del display respecto a la altura de la ventana
        - Colores del fondo degradado (BGR)
        - Duración del resaltado al pulsar un botón
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_title = 'Calculadora'
        self.window_width = 390             # Ancho inicial en píxeles
        self.window_height = 760            # Alto inicial en píxeles
        self.frame_delay_ms = 30            # Espera entre frames (~30 FPS)
        self.show_fps = False               # Mostrar contador de FPS

        # ====================================================================
        # GEOMETRÍA DEL TECLADO
        # ====================================================================
        self.horizontal_padding = 24        # Margen lateral
        self.spacing = 12                   # Separación entre botones
        self.columns = 4                    # Columnas del teclado
        self.bottom_padding = 12            # Margen inferior del teclado
        self.vertical_reserve = 48          # Espacio superior/inferior reservado
        self.min_button_height = 44         # Alto mínimo de un botón
        self.corner_radius = 16             # Radio de las esquinas
        self.shadow_offset = 4              # Desplazamiento vertical de la sombra
        self.shadow_opacity = 0.45          # Opacidad de la sombra

        # ====================================================================
        # DISPLAY
        # ====================================================================
        self.display_height_ratio = 0.18    # Fracción de la altura para el display
        self.min_display_height = 72        # Alto mínimo del display
        self.history_opacity = 0.8          # Opacidad del texto de historial
        self.min_text_scale = 0.2           # Escala mínima del número al encoger

        # ====================================================================
        # COLORES DEL FONDO (BGR, de arriba-izquierda a abajo-derecha)
        # ====================================================================
        self.background_colors = [
            (51, 26, 26),                   # Azul noche
            (77, 26, 51),                   # Violeta oscuro
            (77, 51, 26),                   # Azul petróleo
        ]

        # ====================================================================
        # ANIMACIÓN
        # ====================================================================
        self.flash_duration = 6             # Frames de resaltado al pulsar

    def get_display_height(self, height):
        """
        Calcula la altura del display según la altura de la ventana.

        Args:
            height (float): Alto de la ventana en píxeles

        Returns:
            float: Alto del display (nunca menor que min_display_height)
        """
        return max(height * self.display_height_ratio, self.min_display_height)

    def get_flash_frames(self):
        """Retorna los frames de resaltado (0 desactiva la animación)."""
        return max(self.flash_duration, 0)
