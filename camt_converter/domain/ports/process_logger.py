"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos durante la conversión.

¿Por qué no usar simplemente el módulo `logging` de Python en el dominio?
Porque `logging` es una herramienta de infraestructura (HOW), mientras que
este puerto define los EVENTOS de negocio (WHAT):
- "Se recibió un archivo" (no "INFO: archivo recibido")
- "Una entrada no tiene acreedor" (no "WARNING: nombre vacío")

La implementación (ConsoleLogger) usa `logging` internamente y escribe a
stderr, porque stdout está reservado para el CSV/Excel. En tests se puede
usar un logger en memoria y hacer asserts sobre los eventos.
"""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from pathlib import Path


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Fase 1: Lectura de archivos ---

    @abstractmethod
    def log_file_received(self, file_path: Path, file_type: str) -> None:
        """Registra que se recibió un archivo para procesar.

        Args:
            file_path: Ruta del archivo.
            file_type: Tipo detectado por contenido: 'zip' o 'xml'.
        """
        ...

    @abstractmethod
    def log_archive_member(self, archive_path: Path, member_name: str) -> None:
        """Registra que se leyó un miembro de un ZIP."""
        ...

    @abstractmethod
    def log_archive_member_skipped(self, archive_path: Path, member_name: str) -> None:
        """Registra que se descartó un miembro de un ZIP (directorio)."""
        ...

    # --- Fase 2: Extracción ---

    @abstractmethod
    def log_no_entries(self, document_name: str) -> None:
        """Registra que un documento no tiene entradas (Ntry)."""
        ...

    @abstractmethod
    def log_party_missing(
        self, document_name: str, role: str, fecha: date, monto: Decimal
    ) -> None:
        """Registra que una entrada no tiene nombre de acreedor/deudor.

        No es un error: el nombre queda como cadena vacía.

        Args:
            document_name: Documento de la entrada.
            role: 'acreedor' o 'deudor'.
            fecha: Fecha contable de la entrada (para ubicarla).
            monto: Monto con signo de la entrada (para ubicarla).
        """
        ...

    @abstractmethod
    def log_extraction_complete(
        self, document_name: str, format_name: str, num_movimientos: int
    ) -> None:
        """Registra el fin exitoso del parseo de un documento.

        Args:
            document_name: Nombre del documento ("export.zip/enero.xml").
            format_name: Formato con el que se parseó ("camt.052").
            num_movimientos: Entradas extraídas del documento.
        """
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error fatal. La corrida se aborta después de esto."""
        ...

    # --- Fase 3: Consolidación y salida ---

    @abstractmethod
    def log_aggregation(self, num_total: int, num_unicos: int) -> None:
        """Registra cuántos movimientos quedaron tras eliminar duplicados."""
        ...

    @abstractmethod
    def log_output_complete(self, output_format: str, num_movimientos: int) -> None:
        """Registra que el writer terminó de escribir la salida."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'documentos_procesados': int,
                'total_movimientos': int,
                'duplicados_eliminados': int,
                'errores': List[dict],  # [{archivo, error}]
            }
        """
        ...
