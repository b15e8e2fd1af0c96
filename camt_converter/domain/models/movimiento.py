"""
Modelo de dominio: Movimiento bancario.

Un Movimiento representa una entrada (Ntry) de un reporte camt.052: un
cargo o un abono ya contabilizado por el banco.

Decisiones de diseño:
- Se usa `Decimal` para montos porque `float` tiene errores de redondeo
  con dinero. Ejemplo: float(0.1) + float(0.2) = 0.30000000000000004.
- Se usa `date` (no `str`) para las fechas porque permite ordenar los
  movimientos cronológicamente sin parsear strings cada vez.
- El signo del monto ya está aplicado: negativo = cargo (DBIT),
  positivo = abono (CRDT). Así los writers no necesitan saber del
  indicador CdtDbtInd.
- Dos movimientos con TODOS los campos iguales son el mismo movimiento.
  Esto es lo que permite deduplicar exportes con periodos solapados.
"""

from dataclasses import dataclass
from datetime import date

from camt_converter.domain.models.contraparte import Contraparte
from camt_converter.domain.models.monto import Monto


@dataclass(frozen=True)
class Movimiento:
    """Representa una entrada individual de un reporte de cuenta.

    frozen=True hace que la instancia sea inmutable y hashable, lo que
    permite usarla como clave de un dict al eliminar duplicados.
    """

    fecha: date
    """Fecha contable (BookgDt/Dt). Clave de ordenamiento."""

    valuta: date
    """Fecha valor (ValDt/Dt). No tiene por qué coincidir con la contable."""

    monto: Monto
    """Importe con signo y moneda."""

    acreedor: Contraparte
    """Quien recibe el dinero (Cdtr / CdtrAcct)."""

    deudor: Contraparte
    """Quien paga (Dbtr / DbtrAcct)."""

    tipo: str = ""
    """Texto libre de clasificación (AddtlNtryInf). Vacío si no existe."""

    descripcion: str = ""
    """Texto de remesa (RmtInf/Ustrd). Si hay varias líneas se unen con '; '."""

    def __post_init__(self) -> None:
        if not isinstance(self.fecha, date):
            raise TypeError(f"fecha debe ser date, recibió {type(self.fecha).__name__}")
        if not isinstance(self.valuta, date):
            raise TypeError(f"valuta debe ser date, recibió {type(self.valuta).__name__}")
