"""
Registro de writers de salida disponibles.

Centraliza la relación OutputFormat → writer_instance.
Agregar un nuevo formato de salida requiere solo 2 pasos:
1. Crear la clase XxxWriter que implemente OutputWriter.
2. Agregar el valor a OutputFormat y registrarla en create_default_registry().

El orquestador no sabe qué formatos existen. Solo pide "dame el writer
para CSV" y el registro se lo da.
"""

from camt_converter.domain.models.formato_salida import OutputFormat
from camt_converter.domain.ports.output_writer import OutputWriter


class WriterRegistry:
    """Registro de writers por formato de salida."""

    def __init__(self) -> None:
        self._writers: dict[OutputFormat, OutputWriter] = {}

    def register(self, writer: OutputWriter) -> None:
        """Registra un writer. La clave es writer.output_format.

        Raises:
            ValueError: Si ya existe un writer para ese formato.
        """
        output_format = writer.output_format
        if output_format in self._writers:
            raise ValueError(
                f"Ya existe un writer registrado para '{output_format.value}': "
                f"{type(self._writers[output_format]).__name__}. "
                f"No se puede registrar {type(writer).__name__}."
            )
        self._writers[output_format] = writer

    def get(self, output_format: OutputFormat) -> OutputWriter | None:
        """Obtiene el writer para un formato, o None si no hay ninguno."""
        return self._writers.get(output_format)

    @property
    def available_formats(self) -> list[str]:
        """Lista de formatos con writer disponible."""
        return sorted(f.value for f in self._writers)

    def __len__(self) -> int:
        return len(self._writers)


def create_default_registry(locale: str = "de_DE") -> WriterRegistry:
    """Crea un registro con todos los writers disponibles.

    Args:
        locale: Locale de la hoja de cálculo (símbolo y formato de moneda).

    Returns:
        WriterRegistry con CSV y Excel registrados.
    """
    registry = WriterRegistry()

    from camt_converter.adapters.output.writers.csv_writer import CsvWriter

    registry.register(CsvWriter())

    from camt_converter.adapters.output.writers.excel_writer import ExcelWriter

    registry.register(ExcelWriter(locale=locale))

    return registry
