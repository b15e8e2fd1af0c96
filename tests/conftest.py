"""
Fixtures compartidas de los tests.

- memory_logger: ProcessLogger que acumula los eventos en memoria, para
  hacer asserts sin depender de `logging`.
- camt_entry / camt_document: construyen XML camt.052 mínimos. Cada test
  arma solo los campos que le importan; el resto usa valores por defecto
  razonables de un exporte real.
"""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from camt_converter.domain.ports.process_logger import ProcessLogger

CAMT_NAMESPACE = "urn:iso:std:iso:20022:tech:xsd:camt.052.001.02"

# IBAN de ejemplo con dígitos de control válidos.
IBAN_ACREEDOR = "DE89370400440532013000"
IBAN_DEUDOR = "GB29NWBK60161331926819"


class MemoryLogger(ProcessLogger):
    """ProcessLogger que guarda cada evento como tupla (evento, *args)."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def names(self) -> list[str]:
        return [event[0] for event in self.events]

    def log_file_received(self, file_path: Path, file_type: str) -> None:
        self.events.append(("file_received", file_path, file_type))

    def log_archive_member(self, archive_path: Path, member_name: str) -> None:
        self.events.append(("archive_member", archive_path, member_name))

    def log_archive_member_skipped(self, archive_path: Path, member_name: str) -> None:
        self.events.append(("archive_member_skipped", archive_path, member_name))

    def log_no_entries(self, document_name: str) -> None:
        self.events.append(("no_entries", document_name))

    def log_party_missing(
        self, document_name: str, role: str, fecha: date, monto: Decimal
    ) -> None:
        self.events.append(("party_missing", document_name, role, fecha, monto))

    def log_extraction_complete(
        self, document_name: str, format_name: str, num_movimientos: int
    ) -> None:
        self.events.append(("extraction_complete", document_name, format_name, num_movimientos))

    def log_error(self, file_path: Path, error: Exception) -> None:
        self.events.append(("error", file_path, error))

    def log_aggregation(self, num_total: int, num_unicos: int) -> None:
        self.events.append(("aggregation", num_total, num_unicos))

    def log_output_complete(self, output_format: str, num_movimientos: int) -> None:
        self.events.append(("output_complete", output_format, num_movimientos))

    def get_summary(self) -> dict:
        return {"eventos": len(self.events)}


@pytest.fixture
def memory_logger() -> MemoryLogger:
    return MemoryLogger()


def build_entry(
    indicador: str | None = "DBIT",
    monto: str | None = "12.34",
    moneda: str | None = "EUR",
    fecha: str | None = "2023-01-05",
    valuta: str | None = "2023-01-06",
    acreedor: str | None = "Stadtwerke Hamburg",
    acreedor_pty: str | None = None,
    iban_acreedor: str | None = IBAN_ACREEDOR,
    deudor: str | None = "Max Mustermann",
    deudor_pty: str | None = None,
    iban_deudor: str | None = IBAN_DEUDOR,
    tipo: str | None = "SEPA Lastschrift",
    remesa: list[str] | None = None,
) -> str:
    """Arma un elemento <Ntry>. None en un campo = el elemento no existe."""
    if remesa is None:
        remesa = ["Abschlag Strom Januar"]

    partes = []
    if indicador is not None:
        partes.append(f"<CdtDbtInd>{indicador}</CdtDbtInd>")
    if monto is not None:
        ccy = f' Ccy="{moneda}"' if moneda is not None else ""
        partes.append(f"<Amt{ccy}>{monto}</Amt>")
    if fecha is not None:
        partes.append(f"<BookgDt><Dt>{fecha}</Dt></BookgDt>")
    if valuta is not None:
        partes.append(f"<ValDt><Dt>{valuta}</Dt></ValDt>")
    if tipo is not None:
        partes.append(f"<AddtlNtryInf>{tipo}</AddtlNtryInf>")

    rltd = []
    if acreedor is not None:
        rltd.append(f"<Cdtr><Nm>{acreedor}</Nm></Cdtr>")
    elif acreedor_pty is not None:
        rltd.append(f"<Cdtr><Pty><Nm>{acreedor_pty}</Nm></Pty></Cdtr>")
    if iban_acreedor is not None:
        rltd.append(f"<CdtrAcct><Id><IBAN>{iban_acreedor}</IBAN></Id></CdtrAcct>")
    if deudor is not None:
        rltd.append(f"<Dbtr><Nm>{deudor}</Nm></Dbtr>")
    elif deudor_pty is not None:
        rltd.append(f"<Dbtr><Pty><Nm>{deudor_pty}</Nm></Pty></Dbtr>")
    if iban_deudor is not None:
        rltd.append(f"<DbtrAcct><Id><IBAN>{iban_deudor}</IBAN></Id></DbtrAcct>")

    ustrd = "".join(f"<Ustrd>{linea}</Ustrd>" for linea in remesa)
    rmt = f"<RmtInf>{ustrd}</RmtInf>" if remesa else ""

    partes.append(
        "<NtryDtls><TxDtls>"
        f"<RltdPties>{''.join(rltd)}</RltdPties>"
        f"{rmt}"
        "</TxDtls></NtryDtls>"
    )
    return f"<Ntry>{''.join(partes)}</Ntry>"


def build_document(*entries: str, namespace: str | None = CAMT_NAMESPACE) -> bytes:
    """Arma un documento camt.052 completo con las entradas dadas."""
    xmlns = f' xmlns="{namespace}"' if namespace else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f"<Document{xmlns}><BkToCstmrAcctRpt>"
        "<GrpHdr><MsgId>camt052-test</MsgId></GrpHdr>"
        f"<Rpt><Id>1</Id>{''.join(entries)}</Rpt>"
        "</BkToCstmrAcctRpt></Document>"
    ).encode("utf-8")


@pytest.fixture
def camt_entry():
    return build_entry


@pytest.fixture
def camt_document():
    return build_document
