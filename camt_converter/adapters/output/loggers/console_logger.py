"""
Adaptador de salida: Logger a consola.

Implementación de ProcessLogger sobre el módulo `logging`. Los mensajes
van a stderr (ver infrastructure.logging_setup), porque stdout lleva el
CSV/Excel. Además acumula contadores para el resumen final.

Niveles:
- DEBUG:   cada miembro de ZIP leído o descartado.
- INFO:    archivos recibidos, documentos procesados, consolidación.
- WARNING: documentos sin entradas, entradas sin acreedor/deudor.
- ERROR:   errores fatales (la corrida se aborta).
"""

from datetime import date
from decimal import Decimal
from pathlib import Path

from camt_converter.domain.ports.process_logger import ProcessLogger
from camt_converter.infrastructure.logging_setup import get_logger


class ConsoleLogger(ProcessLogger):
    """Logger que registra eventos de procesamiento con `logging`."""

    def __init__(self) -> None:
        self._log = get_logger("camt_converter.process")
        self._archivos_recibidos: int = 0
        self._documentos_procesados: int = 0
        self._total_movimientos: int = 0
        self._duplicados_eliminados: int = 0
        self._errores: list[dict] = []

    # --- Fase 1: Lectura ---

    def log_file_received(self, file_path: Path, file_type: str) -> None:
        self._archivos_recibidos += 1
        self._log.info("Recibido: %s (%s)", file_path, file_type)

    def log_archive_member(self, archive_path: Path, member_name: str) -> None:
        self._log.debug("Miembro de ZIP: %s/%s", archive_path, member_name)

    def log_archive_member_skipped(self, archive_path: Path, member_name: str) -> None:
        self._log.debug("Descartado (directorio): %s/%s", archive_path, member_name)

    # --- Fase 2: Extracción ---

    def log_no_entries(self, document_name: str) -> None:
        self._log.warning("Sin entradas: %s", document_name)

    def log_party_missing(
        self, document_name: str, role: str, fecha: date, monto: Decimal
    ) -> None:
        self._log.warning(
            "Sin %s: %s — fecha %s, monto %s", role, document_name, fecha, monto
        )

    def log_extraction_complete(
        self, document_name: str, format_name: str, num_movimientos: int
    ) -> None:
        self._documentos_procesados += 1
        self._log.info(
            "Completado: %s (%s) — %d movimientos", document_name, format_name, num_movimientos
        )

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": str(file_path), "error": str(error)})
        self._log.error("Error: %s — %s", file_path, error)

    # --- Fase 3: Consolidación y salida ---

    def log_aggregation(self, num_total: int, num_unicos: int) -> None:
        self._total_movimientos = num_unicos
        self._duplicados_eliminados = num_total - num_unicos
        self._log.info(
            "Consolidados %d movimientos (%d duplicados eliminados)",
            num_unicos,
            num_total - num_unicos,
        )

    def log_output_complete(self, output_format: str, num_movimientos: int) -> None:
        self._log.info("Salida %s generada: %d movimientos", output_format, num_movimientos)

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "documentos_procesados": self._documentos_procesados,
            "total_movimientos": self._total_movimientos,
            "duplicados_eliminados": self._duplicados_eliminados,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Registra el resumen final del procesamiento (nivel INFO)."""
        summary = self.get_summary()
        self._log.info(
            "Resumen: %d archivos, %d documentos, %d movimientos, "
            "%d duplicados, %d errores",
            summary["archivos_recibidos"],
            summary["documentos_procesados"],
            summary["total_movimientos"],
            summary["duplicados_eliminados"],
            len(summary["errores"]),
        )
