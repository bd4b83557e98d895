from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Any

CENTAVOS = Decimal("0.01")


def safe_decimal(value: Any) -> Decimal:
    """Converte qualquer entrada (formulário, CSV, planilha) para Decimal seguro.
    Aceita vírgula como separador decimal."""
    if value is None:
        return Decimal("0.00")
    if isinstance(value, bool):
        return Decimal("0.00")
    if isinstance(value, (float, int)):
        return Decimal(str(value))
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str):
        cleaned = value.strip().replace(",", ".")
        try:
            return Decimal(cleaned).quantize(CENTAVOS, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            return Decimal("0.00")
    return Decimal("0.00")


def arredondar(valor: float) -> float:
    """Arredonda para centavos com meio para cima (2,345 -> 2,35)."""
    return float(safe_decimal(valor).quantize(CENTAVOS, rounding=ROUND_HALF_UP))
