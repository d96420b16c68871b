"""
Calculadora de teclado.

Máquina de estados de calculadora (dígitos, operaciones encadenadas de
izquierda a derecha, porcentaje y cambio de signo) con una interfaz de
teclado dibujada con OpenCV.
"""

from .core import Calculator, CalculatorButton, CalculatorState, Operation

__version__ = "1.0.0"

__all__ = ['Calculator', 'CalculatorButton', 'CalculatorState', 'Operation']
