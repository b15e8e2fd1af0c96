"""
Punto de entrada CLI: camt-converter.

Uso:
    # Un XML a CSV (salida estándar)
    camt-converter reporte.xml > movimientos.csv

    # Varios ZIP/XML, consolidados, a Excel
    camt-converter enero.zip febrero.zip marzo.xml --format xlsx > movimientos.xlsx

    # Más detalle en stderr
    camt-converter export.zip --log-level INFO > movimientos.csv

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Configura logging una sola vez, antes de leer cualquier archivo.
- Crea las instancias concretas (ArchiveDocumentSource, Camt052Parser, writers).
- Las inyecta en el StatementProcessor.
- Ejecuta la conversión y traduce errores a código de salida.

No contiene lógica de negocio, solo "fontanería" (wiring).
"""

import argparse
import sys
from pathlib import Path
from typing import BinaryIO

from camt_converter.adapters.input.document_sources.archive_source import (
    ArchiveDocumentSource,
)
from camt_converter.adapters.input.statement_parsers.camt052_parser import Camt052Parser
from camt_converter.adapters.output.loggers.console_logger import ConsoleLogger
from camt_converter.domain.exceptions import ConverterBaseError
from camt_converter.domain.models.formato_salida import OutputFormat
from camt_converter.domain.models.movimiento import Movimiento
from camt_converter.domain.services.statement_processor import StatementProcessor
from camt_converter.infrastructure.config import Configuracion, default_locale
from camt_converter.infrastructure.logging_setup import (
    configure_logging,
    get_logger,
    parse_level,
)
from camt_converter.infrastructure.registry import WriterRegistry, create_default_registry

EXIT_OK = 0
EXIT_ERROR = 1

FORMAT_CHOICES = ["csv", "xlsx", "ods"]


def main(argv: list[str] | None = None, sink: BinaryIO | None = None) -> None:
    """Punto de entrada principal del CLI."""
    parser = _build_parser()
    config = _parse_config(parser, argv)

    configure_logging(config.log_level)

    try:
        registry = create_default_registry(locale=config.locale)
    except ValueError as e:
        parser.error(str(e))

    if sink is None:
        sink = sys.stdout.buffer

    try:
        run(config, registry, sink)
    except ConverterBaseError as e:
        get_logger("camt_converter.cli").error("Conversión abortada: %s", e)
        sys.exit(EXIT_ERROR)

    sys.exit(EXIT_OK)


def run(config: Configuracion, registry: WriterRegistry, sink: BinaryIO) -> list[Movimiento]:
    """Ensambla el pipeline y convierte los archivos de la configuración.

    Raises:
        ConverterBaseError: Si falla la lectura, el parseo o la escritura.
    """
    logger = ConsoleLogger()

    processor = StatementProcessor(
        document_source=ArchiveDocumentSource(logger),
        parser=Camt052Parser(logger),
        writer_registry=registry,
        logger=logger,
    )

    movimientos = processor.convert(list(config.archivos), config.formato, sink)
    logger.print_summary()
    return movimientos


def _parse_config(parser: argparse.ArgumentParser, argv: list[str] | None) -> Configuracion:
    """Parsea y valida los argumentos. Los errores salen con código 2."""
    args = parser.parse_args(argv)

    archivos = [Path(f) for f in args.files]

    no_existen = [str(p) for p in archivos if not p.is_file()]
    if no_existen:
        parser.error(f"Los archivos no existen: {', '.join(no_existen)}")

    vistos: set[Path] = set()
    repetidos: list[str] = []
    for p in archivos:
        key = p.resolve()
        if key in vistos:
            repetidos.append(str(p))
        vistos.add(key)
    if repetidos:
        parser.error(f"Archivos repetidos: {', '.join(repetidos)}")

    if args.log_level is not None:
        try:
            parse_level(args.log_level)
        except ValueError as e:
            parser.error(str(e))

    return Configuracion(
        archivos=tuple(archivos),
        formato=OutputFormat.from_name(args.format),
        locale=args.locale,
        log_level=args.log_level,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="camt-converter",
        description="Convierte reportes de cuenta camt.052 (XML o ZIP) a CSV o Excel",
        epilog="Ejemplo: camt-converter enero.zip febrero.zip -f xlsx > movimientos.xlsx",
    )

    parser.add_argument(
        "files",
        nargs="+",
        help="Archivos camt.052 (XML) o ZIP con varios XML",
    )

    parser.add_argument(
        "-f",
        "--format",
        dest="format",
        choices=FORMAT_CHOICES,
        default="csv",
        help="Formato de salida (default: csv). 'ods' es un alias de 'xlsx': en ambos "
        "casos la salida es un libro xlsx, así que conviene redirigirla a un archivo .xlsx.",
    )

    parser.add_argument(
        "--locale",
        dest="locale",
        default=default_locale(),
        help="Locale de la hoja de cálculo para el formato de moneda "
        "(default: $CAMT_CONVERTER_LOCALE o de_DE).",
    )

    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        help="Nivel de logging en stderr: DEBUG, INFO, WARNING, ERROR "
        "(default: $CAMT_CONVERTER_LOG_LEVEL o WARNING).",
    )

    return parser


if __name__ == "__main__":
    main()
