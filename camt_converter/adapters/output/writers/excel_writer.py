"""
Adaptador de salida: Escritor de Excel.

Genera un libro con una sola hoja ("Movimientos") y las mismas 10 columnas
del CSV, pero con tipos reales de hoja de cálculo:
- Date / Valuta: celdas de fecha (no texto) con formato yyyy-mm-dd.
- Amount: celda numérica con formato de moneda del locale configurado.
  Los positivos usan el formato normal y los negativos el mismo formato
  en rojo.
- Resto: texto plano.

Se usa pandas + xlsxwriter: pandas arma la hoja a partir de un DataFrame
y después se aplica el formato celda por celda con la API de xlsxwriter.

A diferencia del CSV, el libro se arma completo en memoria y se escribe
al final, de una sola vez.
"""

import io
from collections.abc import Sequence
from typing import BinaryIO

import pandas as pd

from camt_converter.adapters.output.writers.columns import COLUMNS, text_row
from camt_converter.domain.exceptions import OutputError
from camt_converter.domain.models.formato_salida import OutputFormat
from camt_converter.domain.models.movimiento import Movimiento
from camt_converter.domain.ports.output_writer import OutputWriter
from camt_converter.domain.shared.currency import currency_symbol

# Locale → LCID de Windows, usado en el código de formato [$€-407].
LOCALE_IDS: dict[str, int] = {
    "de_DE": 0x0407,
    "de_AT": 0x0C07,
    "de_CH": 0x0807,
    "en_US": 0x0409,
    "en_GB": 0x0809,
    "es_ES": 0x0C0A,
    "es_MX": 0x080A,
    "fr_FR": 0x040C,
    "it_IT": 0x0410,
    "nl_NL": 0x0413,
}

SHEET_NAME = "Movimientos"
DATE_FORMAT = "yyyy-mm-dd"
NEGATIVE_COLOR = "#FF0000"

# Ancho fijo por columna, en el mismo orden que COLUMNS.
COLUMN_WIDTHS: tuple[int, ...] = (12, 12, 15, 9, 35, 30, 35, 30, 30, 60)

AMOUNT_COLUMN = COLUMNS.index("Amount")
DATE_COLUMNS = (COLUMNS.index("Date"), COLUMNS.index("Valuta"))
TEXT_COLUMNS = tuple(
    col for col in range(len(COLUMNS)) if col != AMOUNT_COLUMN and col not in DATE_COLUMNS
)


def normalize_locale(locale: str) -> str:
    """'de-DE', 'de_DE.UTF-8' → 'de_DE'."""
    return locale.split(".")[0].replace("-", "_")


def currency_format(moneda: str, locale: str) -> str:
    """Código de formato numérico de moneda para xlsxwriter.

    Ejemplos:
        >>> currency_format("EUR", "de_DE")
        '#,##0.00 [$€-407]'
        >>> currency_format("USD", "en_US")
        '[$$-409]#,##0.00'
    """
    lcid = LOCALE_IDS[normalize_locale(locale)]
    symbol = f"[${currency_symbol(moneda)}-{lcid:X}]"
    if normalize_locale(locale).startswith("en_"):
        return f"{symbol}#,##0.00"
    return f"#,##0.00 {symbol}"


class ExcelWriter(OutputWriter):
    """Genera un libro xlsx con formato de fechas y moneda."""

    def __init__(self, locale: str = "de_DE") -> None:
        """
        Args:
            locale: Locale del libro ('de_DE', 'en_US'...). Define el
                    código de idioma del formato de moneda.

        Raises:
            ValueError: Si el locale no está en LOCALE_IDS.
        """
        locale = normalize_locale(locale)
        if locale not in LOCALE_IDS:
            valid = ", ".join(sorted(LOCALE_IDS))
            raise ValueError(f"Locale no soportado '{locale}'. Locales válidos: {valid}")
        self._locale = locale

    @property
    def output_format(self) -> OutputFormat:
        return OutputFormat.XLSX

    @property
    def locale(self) -> str:
        return self._locale

    def write(self, movimientos: Sequence[Movimiento], sink: BinaryIO) -> None:
        try:
            data = self._escribir_excel(movimientos)
            sink.write(data)
            sink.flush()
        except Exception as e:
            raise OutputError(self.output_format.value, str(e)) from e

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    def _escribir_excel(self, movimientos: Sequence[Movimiento]) -> bytes:
        """Genera el libro y devuelve sus bytes."""
        filas = [
            {
                "Date": mov.fecha,
                "Valuta": mov.valuta,
                "Amount": float(mov.monto.valor),
                "Currency": mov.monto.moneda,
                "Creditor": mov.acreedor.nombre,
                "Creditor IBAN": mov.acreedor.iban_formateado,
                "Debtor": mov.deudor.nombre,
                "Debtor IBAN": mov.deudor.iban_formateado,
                "Type": mov.tipo,
                "Description": mov.descripcion,
            }
            for mov in movimientos
        ]
        df = pd.DataFrame(filas, columns=list(COLUMNS))

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="xlsxwriter", date_format=DATE_FORMAT) as writer:
            df.to_excel(writer, index=False, sheet_name=SHEET_NAME)

            workbook = writer.book
            worksheet = writer.sheets[SHEET_NAME]

            header_format = workbook.add_format({"bold": True})
            date_format = workbook.add_format({"num_format": DATE_FORMAT})
            text_format = workbook.add_format({"num_format": "@"})

            # --- Encabezado en negrita ---
            # Se escribe celda por celda (no con set_row) para que el
            # formato no se herede a las filas de datos.
            for col, label in enumerate(COLUMNS):
                worksheet.write_string(0, col, label, header_format)

            # --- Anchos fijos ---
            for col, width in enumerate(COLUMN_WIDTHS):
                worksheet.set_column(col, col, width)

            # --- Datos con formato explícito por celda ---
            amount_formats: dict[tuple[str, bool], object] = {}
            for row, mov in enumerate(movimientos, start=1):
                worksheet.write_datetime(row, DATE_COLUMNS[0], mov.fecha, date_format)
                worksheet.write_datetime(row, DATE_COLUMNS[1], mov.valuta, date_format)

                negativo = mov.monto.es_cargo
                key = (mov.monto.moneda, negativo)
                if key not in amount_formats:
                    properties = {"num_format": currency_format(mov.monto.moneda, self._locale)}
                    if negativo:
                        properties["font_color"] = NEGATIVE_COLOR
                    amount_formats[key] = workbook.add_format(properties)
                worksheet.write_number(
                    row, AMOUNT_COLUMN, float(mov.monto.valor), amount_formats[key]
                )

                valores = text_row(mov)
                for col in TEXT_COLUMNS:
                    worksheet.write_string(row, col, valores[col], text_format)

        return buffer.getvalue()
