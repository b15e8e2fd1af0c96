"""
Modelo de dominio: Monto con moneda.

El valor ya tiene el signo aplicado (negativo = cargo, positivo = abono).
La moneda es un código ISO 4217 validado.
"""

from dataclasses import dataclass
from decimal import Decimal

from camt_converter.domain.shared.currency import normalize_currency


@dataclass(frozen=True)
class Monto:
    """Importe firmado en una moneda."""

    valor: Decimal
    """Importe con signo. Decimal, nunca float."""

    moneda: str
    """Código ISO 4217 en mayúsculas: 'EUR', 'USD'..."""

    @property
    def es_cargo(self) -> bool:
        return self.valor < 0

    def __post_init__(self) -> None:
        if not isinstance(self.valor, Decimal):
            raise TypeError(f"valor debe ser Decimal, recibió {type(self.valor).__name__}")
        if normalize_currency(self.moneda) != self.moneda:
            raise ValueError(f"La moneda debe estar normalizada: '{self.moneda}'")
