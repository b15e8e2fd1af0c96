"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from camt_converter.domain.ports import DocumentSource, StatementParser, OutputWriter
"""

from camt_converter.domain.ports.document_source import DocumentSource
from camt_converter.domain.ports.output_writer import OutputWriter
from camt_converter.domain.ports.process_logger import ProcessLogger
from camt_converter.domain.ports.statement_parser import StatementParser

__all__ = [
    "DocumentSource",
    "OutputWriter",
    "ProcessLogger",
    "StatementParser",
]
