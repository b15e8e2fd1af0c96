"""
Puerto de salida: Escritor de resultados.

Define el contrato para escribir los movimientos ya deduplicados y
ordenados en algún formato (CSV, Excel).

¿Por qué es un puerto de SALIDA?
Porque el dominio (orquestador, parser) no decide NI conoce el formato de
salida. Solo produce una lista de Movimiento y la pasa a quien implemente
este puerto. El WriterRegistry elige la implementación según el
OutputFormat configurado.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import BinaryIO

from camt_converter.domain.models.formato_salida import OutputFormat
from camt_converter.domain.models.movimiento import Movimiento


class OutputWriter(ABC):
    """Interfaz para escribir movimientos."""

    @property
    @abstractmethod
    def output_format(self) -> OutputFormat:
        """Formato que produce este writer. Clave en el WriterRegistry."""
        ...

    @abstractmethod
    def write(self, movimientos: Sequence[Movimiento], sink: BinaryIO) -> None:
        """Escribe los movimientos en el stream de salida.

        Args:
            movimientos: Movimientos ya deduplicados y ordenados por fecha.
            sink: Stream binario de salida (normalmente sys.stdout.buffer).

        Raises:
            OutputError: Si falla la escritura.
        """
        ...
