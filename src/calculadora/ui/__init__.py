"""
Módulo de interfaz de usuario.
Contiene el renderizador de UI y el cálculo de layout.
"""

from .layout import Layout, Rect, button_at, compute_layout
from .renderer import UIRenderer

__all__ = ['Layout', 'Rect', 'button_at', 'compute_layout', 'UIRenderer']
