"""
Columnas de la salida, compartidas por CsvWriter y ExcelWriter.

Ambos formatos tienen exactamente las mismas 10 columnas, en el mismo
orden. Si se agrega una columna, se agrega aquí y en los dos writers.
"""

from camt_converter.domain.models.movimiento import Movimiento
from camt_converter.domain.shared.date_parser import format_iso_date
from camt_converter.domain.shared.money import format_amount

COLUMNS: tuple[str, ...] = (
    "Date",
    "Valuta",
    "Amount",
    "Currency",
    "Creditor",
    "Creditor IBAN",
    "Debtor",
    "Debtor IBAN",
    "Type",
    "Description",
)


def text_row(mov: Movimiento) -> list[str]:
    """Convierte un Movimiento a la fila de texto del CSV.

    Los IBAN ausentes (None) se presentan como cadena vacía.
    """
    return [
        format_iso_date(mov.fecha),
        format_iso_date(mov.valuta),
        format_amount(mov.monto.valor),
        mov.monto.moneda,
        mov.acreedor.nombre,
        mov.acreedor.iban_formateado,
        mov.deudor.nombre,
        mov.deudor.iban_formateado,
        mov.tipo,
        mov.descripcion,
    ]
