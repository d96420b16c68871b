# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
import traceback

from .app import CalculatorApp


def main():
    """
    Punto de entrada de la aplicación.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Captura errores inesperados y muestra traceback

    Ejecución:
        python -m calculadora
        calculadora
    """
    try:
        app = CalculatorApp()
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
