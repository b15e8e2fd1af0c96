"""
Tests para currency.py.
"""

import pytest

from camt_converter.domain.shared.currency import currency_symbol, normalize_currency


class TestNormalizeCurrency:
    @pytest.mark.parametrize(
        "code, expected",
        [("EUR", "EUR"), (" eur ", "EUR"), ("chf", "CHF"), ("JPY", "JPY")],
    )
    def test_validos(self, code, expected):
        assert normalize_currency(code) == expected

    def test_vacio(self):
        with pytest.raises(ValueError, match="vacío"):
            normalize_currency("  ")

    @pytest.mark.parametrize("code", ["XYZ", "EURO", "€"])
    def test_desconocidos(self, code):
        with pytest.raises(ValueError, match="Moneda desconocida"):
            normalize_currency(code)


class TestCurrencySymbol:
    def test_simbolo_conocido(self):
        assert currency_symbol("EUR") == "€"
        assert currency_symbol("GBP") == "£"

    def test_sin_simbolo_devuelve_codigo(self):
        assert currency_symbol("HUF") == "HUF"
