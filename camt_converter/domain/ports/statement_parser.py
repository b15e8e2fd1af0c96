"""
Puerto de entrada: Parser de reportes de cuenta.

Define el contrato que cada parser de formato debe cumplir. Hoy solo
existe camt.052, pero la interfaz permite agregar camt.053 o MT940 sin
tocar el orquestador.

¿Por qué recibe un Documento y no una ruta?
Porque el mismo XML puede venir de un archivo suelto o de un miembro de
un ZIP. El parser no debe saber de dónde vienen los bytes.
"""

from abc import ABC, abstractmethod

from camt_converter.domain.models.documento import Documento
from camt_converter.domain.models.movimiento import Movimiento


class StatementParser(ABC):
    """Interfaz para extraer movimientos de un documento."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Nombre del formato que este parser maneja: 'camt.052', etc."""
        ...

    @abstractmethod
    def parse(self, documento: Documento) -> list[Movimiento]:
        """Extrae los movimientos del documento, en orden de documento.

        Args:
            documento: Documento XML crudo.

        Returns:
            Lista de Movimiento (vacía si el documento no tiene entradas).

        Raises:
            CampoFaltanteError: Si falta un campo obligatorio en una entrada.
            ValorInvalidoError: Si un valor no se puede interpretar.
                        Cualquier entrada inválida aborta el documento
                        completo; no se devuelven resultados parciales.
        """
        ...
