"""
Servicio de dominio: Consolidación de movimientos.

Cuando se convierten varios exportes del mismo banco (por ejemplo, un ZIP
por mes descargado en fechas distintas) los periodos suelen solaparse y
las mismas entradas aparecen dos veces. Aquí se:
1. Eliminan duplicados exactos (todos los campos iguales).
2. Ordenan los movimientos por fecha contable, de menor a mayor.

El ordenamiento es ESTABLE: movimientos con la misma fecha conservan el
orden en que se encontraron (orden de archivos, luego de miembros del ZIP,
luego de entradas dentro del documento). Así la salida es determinista.
"""

from collections.abc import Iterable

from camt_converter.domain.models.movimiento import Movimiento


def deduplicate(movimientos: Iterable[Movimiento]) -> list[Movimiento]:
    """Elimina duplicados conservando la primera aparición de cada movimiento.

    Movimiento es frozen y hashable, así que un dict sirve como "set
    ordenado" (los dict preservan orden de inserción).
    """
    return list(dict.fromkeys(movimientos))


def sort_by_booking_date(movimientos: Iterable[Movimiento]) -> list[Movimiento]:
    """Ordena por fecha contable. sorted() es estable."""
    return sorted(movimientos, key=lambda mov: mov.fecha)


def deduplicate_and_sort(movimientos: Iterable[Movimiento]) -> list[Movimiento]:
    """Aplica deduplicate() y luego sort_by_booking_date().

    Args:
        movimientos: Todos los movimientos de todos los documentos, en el
                     orden en que se extrajeron.

    Returns:
        Lista nueva sin duplicados, no decreciente por fecha contable.
    """
    return sort_by_booking_date(deduplicate(movimientos))
