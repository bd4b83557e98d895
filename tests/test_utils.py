# tests/test_utils.py

from decimal import Decimal

from rescisao.shared.utils import arredondar, safe_decimal


def test_safe_decimal_aceita_virgula():
    assert safe_decimal("10,5") == Decimal("10.50")


def test_safe_decimal_entradas_sujas_viram_zero():
    assert safe_decimal(None) == Decimal("0.00")
    assert safe_decimal(True) == Decimal("0.00")
    assert safe_decimal("abc") == Decimal("0.00")


def test_arredondar_meio_para_cima():
    assert arredondar(2.345) == 2.35
    assert arredondar(2.344) == 2.34
    assert arredondar(10) == 10.0
