"""
Adaptador de entrada: Fuente de documentos con soporte de ZIP.

Los bancos entregan los exportes camt de dos formas:
- Un XML suelto por consulta.
- Un ZIP con varios XML (por ejemplo, uno por mes o uno por cuenta).

DETECCIÓN POR CONTENIDO:
El tipo se decide por los primeros bytes del archivo (firma "PK"), NUNCA
por la extensión. Es común recibir "export.xml" que en realidad es un ZIP,
o un ZIP renombrado a ".camt".

Firmas reconocidas:
    PK\\x03\\x04  → ZIP con al menos un miembro (local file header)
    PK\\x05\\x06  → ZIP vacío (end of central directory)
    PK\\x07\\x08  → ZIP dividido (spanned archive)

Los miembros que son directorios se descartan. Un miembro que a su vez es
un ZIP se expande con la misma regla.
"""

import io
import zipfile
import zlib
from collections.abc import Iterator
from pathlib import Path

from camt_converter.domain.exceptions import ArchivoIlegibleError
from camt_converter.domain.models.documento import Documento
from camt_converter.domain.ports.document_source import DocumentSource
from camt_converter.domain.ports.process_logger import ProcessLogger

ZIP_SIGNATURES: tuple[bytes, ...] = (
    b"PK\x03\x04",
    b"PK\x05\x06",
    b"PK\x07\x08",
)


def is_zip_content(data: bytes) -> bool:
    """True si los bytes empiezan con una firma ZIP."""
    return data.startswith(ZIP_SIGNATURES)


class ArchiveDocumentSource(DocumentSource):
    """Produce documentos a partir de XML sueltos o ZIP."""

    def __init__(self, logger: ProcessLogger) -> None:
        self._logger = logger

    def documents(self, file_path: Path) -> Iterator[Documento]:
        data = self._read_file(file_path)

        if is_zip_content(data):
            self._logger.log_file_received(file_path, "zip")
            yield from self._iter_archive(file_path, str(file_path), data)
        else:
            self._logger.log_file_received(file_path, "xml")
            yield Documento(nombre=str(file_path), contenido=data)

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    @staticmethod
    def _read_file(file_path: Path) -> bytes:
        try:
            return file_path.read_bytes()
        except OSError as e:
            raise ArchivoIlegibleError(str(file_path), str(e)) from e

    def _iter_archive(
        self, file_path: Path, archive_name: str, data: bytes
    ) -> Iterator[Documento]:
        """Recorre los miembros del ZIP en el orden del contenedor.

        Args:
            file_path: Archivo de entrada original (para la bitácora).
            archive_name: Nombre del ZIP actual. Para un ZIP anidado es
                          "externo.zip/interno.zip".
            data: Bytes del ZIP.
        """
        try:
            archive = zipfile.ZipFile(io.BytesIO(data))
        except (zipfile.BadZipFile, zipfile.LargeZipFile, OSError) as e:
            raise ArchivoIlegibleError(archive_name, f"ZIP inválido: {e}") from e

        with archive:
            for info in archive.infolist():
                if info.is_dir():
                    self._logger.log_archive_member_skipped(file_path, info.filename)
                    continue

                member_name = f"{archive_name}/{info.filename}"
                try:
                    member_data = archive.read(info)
                except (
                    zipfile.BadZipFile,
                    RuntimeError,
                    NotImplementedError,
                    OSError,
                    zlib.error,
                ) as e:
                    raise ArchivoIlegibleError(member_name, str(e)) from e

                self._logger.log_archive_member(file_path, info.filename)

                if is_zip_content(member_data):
                    yield from self._iter_archive(file_path, member_name, member_data)
                else:
                    yield Documento(nombre=member_name, contenido=member_data)
