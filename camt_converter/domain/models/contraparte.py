"""
Modelo de dominio: Contraparte de un movimiento (acreedor o deudor).

En camt.052 cada entrada tiene dos partes relacionadas (RltdPties):
- Cdtr / CdtrAcct → quien recibe el dinero.
- Dbtr / DbtrAcct → quien paga.

El nombre siempre existe (cadena vacía si el banco no lo manda). El IBAN
es opcional y se representa con None, NO con cadena vacía: "no hay IBAN"
es un estado distinto a "IBAN vacío". La conversión a "" ocurre solo en
los writers, al momento de presentar.
"""

from dataclasses import dataclass

from camt_converter.domain.models.iban import Iban


@dataclass(frozen=True)
class Contraparte:
    """Acreedor o deudor de un movimiento."""

    nombre: str
    """Nombre normalizado (espacios colapsados). Cadena vacía si no existe."""

    iban: Iban | None = None
    """IBAN validado, o None si el XML no lo incluye."""

    @property
    def iban_formateado(self) -> str:
        """IBAN en bloques de 4, o cadena vacía si no hay IBAN."""
        return self.iban.formateado if self.iban is not None else ""
