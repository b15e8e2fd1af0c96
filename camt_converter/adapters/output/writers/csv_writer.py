"""
Adaptador de salida: Escritor de CSV.

Formato:
- Separador ";" (Excel/LibreOffice en alemán lo abren sin asistente).
- Una fila de encabezado con las 10 columnas de columns.COLUMNS.
- Fechas "YYYY-MM-DD".
- Monto con 2 decimales y punto decimal, sin separador de miles, sin
  importar el locale del sistema: "-12.34".
- IBAN en bloques de 4, o vacío.
- UTF-8, fin de línea "\\n".

Cada fila se escribe y se hace flush de inmediato: si la corrida falla a
la mitad de la escritura, las filas anteriores ya están en la salida.
"""

import csv
import io
from collections.abc import Sequence
from typing import BinaryIO

from camt_converter.adapters.output.writers.columns import COLUMNS, text_row
from camt_converter.domain.exceptions import OutputError
from camt_converter.domain.models.formato_salida import OutputFormat
from camt_converter.domain.models.movimiento import Movimiento
from camt_converter.domain.ports.output_writer import OutputWriter


class CsvWriter(OutputWriter):
    """Genera CSV separado por punto y coma."""

    DELIMITER = ";"
    LINE_TERMINATOR = "\n"
    ENCODING = "utf-8"

    @property
    def output_format(self) -> OutputFormat:
        return OutputFormat.CSV

    def write(self, movimientos: Sequence[Movimiento], sink: BinaryIO) -> None:
        try:
            self._write_row(sink, COLUMNS)
            for mov in movimientos:
                self._write_row(sink, text_row(mov))
        except (OSError, csv.Error, UnicodeEncodeError) as e:
            raise OutputError(self.output_format.value, str(e)) from e

    def _write_row(self, sink: BinaryIO, row: Sequence[str]) -> None:
        buffer = io.StringIO()
        csv.writer(
            buffer,
            delimiter=self.DELIMITER,
            lineterminator=self.LINE_TERMINATOR,
            quoting=csv.QUOTE_MINIMAL,
        ).writerow(row)
        sink.write(buffer.getvalue().encode(self.ENCODING))
        sink.flush()
