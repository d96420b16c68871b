"""
Módulo de configuración para la calculadora.
Contiene la configuración de ventana, geometría y colores.
"""

from .display import DisplayConfig

__all__ = ['DisplayConfig']
