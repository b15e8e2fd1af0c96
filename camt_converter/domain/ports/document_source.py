"""
Puerto de entrada: Fuente de documentos.

Define el contrato para convertir una ruta de entrada en una secuencia de
documentos XML crudos. Un archivo puede ser:
- Un XML suelto → un Documento.
- Un ZIP con varios XML (uno por mes, por ejemplo) → un Documento por miembro.

¿Por qué un puerto y no una función en el orquestador?
Porque la forma de obtener los bytes (disco, ZIP, en el futuro tal vez
un directorio remoto) no es lógica de negocio. El StatementProcessor solo
necesita "dame los documentos de esta ruta, en orden".
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from camt_converter.domain.models.documento import Documento


class DocumentSource(ABC):
    """Interfaz para obtener documentos a partir de una ruta."""

    @abstractmethod
    def documents(self, file_path: Path) -> Iterator[Documento]:
        """Produce los documentos contenidos en la ruta, en orden.

        El orden importa: es el desempate del ordenamiento final por fecha.
        Para un ZIP, es el orden de los miembros dentro del contenedor.

        Args:
            file_path: Ruta a un archivo existente.

        Yields:
            Documento con nombre y bytes.

        Raises:
            ArchivoIlegibleError: Si el archivo o el ZIP no se puede leer.
        """
        ...
