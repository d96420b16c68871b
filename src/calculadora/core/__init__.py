"""
Módulo core con la lógica principal de la calculadora.
Contiene la máquina de estados y la definición de los botones.
"""

from .calculator import Calculator, CalculatorState, Operation, format_number
from .buttons import BUTTON_ROWS, CalculatorButton

__all__ = ['Calculator', 'CalculatorState', 'Operation', 'format_number',
           'BUTTON_ROWS', 'CalculatorButton']
