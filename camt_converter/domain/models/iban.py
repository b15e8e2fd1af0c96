"""
Modelo de dominio: IBAN de una contraparte.

Value object inmutable que SOLO se puede crear con un IBAN válido: la
validación ocurre en __post_init__, igual que en Movimiento. Así, si un
Movimiento tiene un Iban, está garantizado que es correcto.
"""

from dataclasses import dataclass

from camt_converter.domain.shared.iban import compact_iban, format_iban, validate_iban


@dataclass(frozen=True)
class Iban:
    """IBAN validado, guardado en forma compacta."""

    compacto: str
    """IBAN sin espacios y en mayúsculas: 'DE89370400440532013000'."""

    @classmethod
    def parse(cls, text: str) -> "Iban":
        """Crea un Iban a partir de texto libre (con o sin espacios).

        Raises:
            ValueError: Si el IBAN no es válido.
        """
        return cls(compact_iban(text))

    @property
    def formateado(self) -> str:
        """Forma canónica en bloques de 4: 'DE89 3704 0044 0532 0130 00'."""
        return format_iban(self.compacto)

    def __str__(self) -> str:
        return self.formateado

    def __post_init__(self) -> None:
        if validate_iban(self.compacto) != self.compacto:
            raise ValueError(f"El IBAN debe guardarse en forma compacta: '{self.compacto}'")
