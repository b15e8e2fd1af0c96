"""
Tests para la configuración y el setup de logging.
"""

import logging
from pathlib import Path

import pytest

from camt_converter.domain.models import OutputFormat
from camt_converter.infrastructure.config import (
    DEFAULT_LOCALE,
    LOCALE_ENV,
    Configuracion,
    default_locale,
)
from camt_converter.infrastructure.logging_setup import LOG_LEVEL_ENV, parse_level


class TestConfiguracion:
    def test_valores_por_defecto(self, monkeypatch):
        monkeypatch.delenv(LOCALE_ENV, raising=False)
        config = Configuracion(archivos=(Path("a.xml"),))

        assert config.formato is OutputFormat.CSV
        assert config.locale == DEFAULT_LOCALE
        assert config.log_level is None

    def test_sin_archivos(self):
        with pytest.raises(ValueError, match="al menos un archivo"):
            Configuracion(archivos=())

    def test_archivos_repetidos(self):
        with pytest.raises(ValueError, match="repetidos"):
            Configuracion(archivos=(Path("a.xml"), Path("b.xml"), Path("a.xml")))

    def test_locale_desde_entorno(self, monkeypatch):
        monkeypatch.setenv(LOCALE_ENV, "en_GB")
        assert default_locale() == "en_GB"

    def test_locale_por_defecto(self, monkeypatch):
        monkeypatch.delenv(LOCALE_ENV, raising=False)
        assert default_locale() == "de_DE"


class TestParseLevel:
    @pytest.mark.parametrize(
        "level, expected",
        [
            ("INFO", logging.INFO),
            ("debug", logging.DEBUG),
            (" warning ", logging.WARNING),
            ("40", 40),
            (10, 10),
        ],
    )
    def test_niveles(self, level, expected):
        assert parse_level(level) == expected

    def test_desconocido(self):
        with pytest.raises(ValueError, match="desconocido"):
            parse_level("MUCHO")

    def test_por_defecto(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert parse_level(None) == logging.WARNING

    def test_desde_entorno(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
        assert parse_level(None) == logging.ERROR
