"""
Servicio de dominio: Procesador de reportes de cuenta.

Orquesta el pipeline completo:
1. Recibe una lista de rutas (XML sueltos o ZIP).
2. Obtiene los documentos de cada ruta (DocumentSource).
3. Parsea cada documento (StatementParser).
4. Consolida: elimina duplicados y ordena por fecha (aggregator).
5. Escribe con el OutputWriter del formato pedido (WriterRegistry).

Todo es secuencial: un archivo a la vez, un miembro del ZIP a la vez.
TODOS los documentos se leen antes de escribir la primera fila, porque
el ordenamiento y la deduplicación necesitan el conjunto completo.

¿Qué pasa si un archivo falla?
Se registra en la bitácora y la excepción se propaga: la corrida completa
se aborta. No hay resultados parciales por archivo ni por entrada.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from camt_converter.domain.exceptions import ConverterBaseError, OutputError
from camt_converter.domain.models.formato_salida import OutputFormat
from camt_converter.domain.models.movimiento import Movimiento
from camt_converter.domain.ports.document_source import DocumentSource
from camt_converter.domain.ports.process_logger import ProcessLogger
from camt_converter.domain.ports.statement_parser import StatementParser
from camt_converter.domain.services.aggregator import deduplicate_and_sort
from camt_converter.infrastructure.registry import WriterRegistry


class StatementProcessor:
    """Convierte archivos de entrada en una salida CSV/Excel.

    Recibe sus dependencias por constructor (Dependency Injection).
    No sabe qué DocumentSource, StatementParser ni OutputWriter concretos
    se están usando, solo conoce las interfaces (puertos).
    """

    def __init__(
        self,
        document_source: DocumentSource,
        parser: StatementParser,
        writer_registry: WriterRegistry,
        logger: ProcessLogger,
    ) -> None:
        """
        Args:
            document_source: Fuente que convierte rutas en documentos.
            parser: Parser del formato de los documentos (camt.052).
            writer_registry: Registro de writers por formato de salida.
            logger: Logger para la bitácora de procesamiento.
        """
        self._source = document_source
        self._parser = parser
        self._writers = writer_registry
        self._logger = logger

    def process_file(self, file_path: Path) -> list[Movimiento]:
        """Extrae los movimientos de un archivo, en orden de aparición.

        Raises:
            ConverterBaseError: Cualquier error de lectura o parseo.
                                Se registra en la bitácora antes de propagarse.
        """
        movimientos: list[Movimiento] = []
        try:
            for documento in self._source.documents(file_path):
                extraidos = self._parser.parse(documento)
                self._logger.log_extraction_complete(
                    documento.nombre, self._parser.format_name, len(extraidos)
                )
                movimientos.extend(extraidos)
        except ConverterBaseError as e:
            self._logger.log_error(file_path, e)
            raise
        return movimientos

    def process_files(self, file_paths: Sequence[Path]) -> list[Movimiento]:
        """Extrae y consolida los movimientos de todos los archivos.

        Returns:
            Movimientos sin duplicados, ordenados por fecha contable
            (desempate: orden de aparición).
        """
        todos: list[Movimiento] = []
        for file_path in file_paths:
            todos.extend(self.process_file(file_path))

        unicos = deduplicate_and_sort(todos)
        self._logger.log_aggregation(len(todos), len(unicos))
        return unicos

    def convert(
        self,
        file_paths: Sequence[Path],
        output_format: OutputFormat,
        sink: BinaryIO,
    ) -> list[Movimiento]:
        """Ejecuta el pipeline completo y escribe la salida en `sink`.

        Returns:
            Los movimientos escritos (útil para tests y para el resumen).

        Raises:
            ConverterBaseError: Si falla la lectura, el parseo o la escritura.
        """
        writer = self._writers.get(output_format)
        if writer is None:
            raise OutputError(
                output_format.value,
                f"No hay writer registrado. Formatos disponibles: "
                f"{self._writers.available_formats}",
            )

        movimientos = self.process_files(file_paths)

        try:
            writer.write(movimientos, sink)
        except OutputError as e:
            self._logger.log_error(Path("<salida>"), e)
            raise

        self._logger.log_output_complete(output_format.value, len(movimientos))
        return movimientos
