"""
Tests para camt_converter.domain.shared.iban

Los IBAN de ejemplo son los publicados en el registro IBAN de SWIFT, con
dígitos de control válidos.
"""

import pytest

from camt_converter.domain.shared.iban import compact_iban, format_iban, validate_iban


class TestValidateIban:
    @pytest.mark.parametrize(
        "iban",
        [
            "DE89370400440532013000",
            "GB29NWBK60161331926819",
            "AT611904300234573201",
            "NL91ABNA0417164300",
            "CH9300762011623852957",
            "NO9386011117947",
        ],
    )
    def test_ibans_validos(self, iban):
        assert validate_iban(iban) == iban

    def test_acepta_espacios_y_minusculas(self):
        assert validate_iban("de89 3704 0044 0532 0130 00") == "DE89370400440532013000"

    def test_digitos_de_control_incorrectos(self):
        with pytest.raises(ValueError, match="control"):
            validate_iban("DE88370400440532013000")

    def test_longitud_incorrecta(self):
        with pytest.raises(ValueError, match="Longitud"):
            validate_iban("DE8937040044053201300")

    def test_pais_desconocido(self):
        with pytest.raises(ValueError, match="País"):
            validate_iban("ZZ89370400440532013000")

    @pytest.mark.parametrize("texto", ["", "DE", "1234567890", "DE89-3704-0044"])
    def test_estructura_invalida(self, texto):
        with pytest.raises(ValueError):
            validate_iban(texto)


class TestFormatIban:
    def test_bloques_de_cuatro(self):
        assert format_iban("DE89370400440532013000") == "DE89 3704 0044 0532 0130 00"

    def test_longitud_multiplo_de_cuatro(self):
        assert format_iban("NL91ABNA0417164300") == "NL91 ABNA 0417 1643 00"

    def test_compact(self):
        assert compact_iban(" nl91 abna 0417 1643 00") == "NL91ABNA0417164300"
