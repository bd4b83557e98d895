"""Calculadora de rescisão trabalhista (CLT)."""

__version__ = "1.0.0"
