"""
Modelo de dominio: Documento XML crudo.

Un Documento es lo que produce un DocumentSource: los bytes de un XML y el
nombre de donde vino. Si el archivo de entrada es un ZIP, el nombre incluye
el miembro: "export.zip/2023-01.xml". El nombre solo sirve para mensajes
de error y bitácora.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Documento:
    """Bytes de un documento camt, listos para parsear."""

    nombre: str
    contenido: bytes

    @property
    def is_empty(self) -> bool:
        return not self.contenido.strip()
