"""
Adaptador de entrada: Parser de reportes camt.052 (ISO 20022).

camt.052 = "Bank-to-Customer Account Report". Los nombres de elementos son
abreviaturas crípticas; las que se usan aquí:

    BkToCstmrAcctRpt  Bank-to-Customer Account Report (el mensaje)
    Rpt               Report (uno por cuenta)
    Ntry              Entry: un movimiento
    CdtDbtInd         Credit/Debit Indicator: CRDT | DBIT
    Amt               Amount, con atributo Ccy (moneda)
    BookgDt / ValDt   Booking Date / Value Date
    NtryDtls/TxDtls   Entry Details / Transaction Details
    RltdPties         Related Parties: Cdtr, Dbtr, CdtrAcct, DbtrAcct
    RmtInf/Ustrd      Remittance Information, Unstructured (texto libre)
    AddtlNtryInf      Additional Entry Information (tipo de movimiento)

LÓGICA DE PARSEO:
1. Se parsea el XML con lxml (sin resolver entidades externas ni red).
2. Se localizan las entradas en /Document/BkToCstmrAcctRpt/Rpt/Ntry.
3. Por cada entrada se leen los campos obligatorios (indicador, monto,
   moneda, fechas) y los opcionales (partes, IBAN, tipo, remesa).
4. El nombre de cada parte se busca primero en Cdtr/Nm y, si no existe,
   en Cdtr/Pty/Nm (las versiones nuevas del esquema envuelven la parte).

Los elementos se comparan por nombre local: el mismo parser acepta
documentos con el namespace de ISO 20022 (urn:iso:std:iso:20022:tech:xsd:
camt.052.001.02, .08, ...) y documentos sin namespace.

ERRORES:
Cualquier entrada con un campo obligatorio faltante o un valor inválido
aborta el documento completo con CampoFaltanteError / ValorInvalidoError.
No se devuelven movimientos parciales.
"""

from datetime import date
from decimal import Decimal

from lxml import etree

from camt_converter.domain.exceptions import CampoFaltanteError, ValorInvalidoError
from camt_converter.domain.models.contraparte import Contraparte
from camt_converter.domain.models.documento import Documento
from camt_converter.domain.models.iban import Iban
from camt_converter.domain.models.monto import Monto
from camt_converter.domain.models.movimiento import Movimiento
from camt_converter.domain.ports.process_logger import ProcessLogger
from camt_converter.domain.ports.statement_parser import StatementParser
from camt_converter.domain.shared.currency import normalize_currency
from camt_converter.domain.shared.date_parser import parse_iso_date
from camt_converter.domain.shared.money import apply_sign, parse_amount
from camt_converter.domain.shared.text_cleaner import clean_whitespace, join_lines


def local_xpath(path: str, absolute: bool = False) -> etree.XPath:
    """Compila una ruta "A/B/C" a XPath que ignora namespaces.

    Ejemplo:
        "BookgDt/Dt" → "*[local-name()='BookgDt']/*[local-name()='Dt']"
    """
    steps = "/".join(f"*[local-name()='{step}']" for step in path.strip("/").split("/"))
    return etree.XPath(("/" if absolute else "") + steps)


class Camt052Parser(StatementParser):
    """Parser de documentos camt.052."""

    # --- Rutas (relativas a cada Ntry, salvo ENTRIES) ---

    ENTRIES = "Document/BkToCstmrAcctRpt/Rpt/Ntry"

    CREDIT_DEBIT_INDICATOR = "CdtDbtInd"
    AMOUNT = "Amt"
    CURRENCY_ATTRIBUTE = "Ccy"
    BOOKING_DATE = "BookgDt/Dt"
    VALUE_DATE = "ValDt/Dt"

    CREDITOR_NAME = "NtryDtls/TxDtls/RltdPties/Cdtr/Nm"
    CREDITOR_PARTY_NAME = "NtryDtls/TxDtls/RltdPties/Cdtr/Pty/Nm"
    CREDITOR_IBAN = "NtryDtls/TxDtls/RltdPties/CdtrAcct/Id/IBAN"

    DEBTOR_NAME = "NtryDtls/TxDtls/RltdPties/Dbtr/Nm"
    DEBTOR_PARTY_NAME = "NtryDtls/TxDtls/RltdPties/Dbtr/Pty/Nm"
    DEBTOR_IBAN = "NtryDtls/TxDtls/RltdPties/DbtrAcct/Id/IBAN"

    ADDITIONAL_INFO = "AddtlNtryInf"
    REMITTANCE_LINES = "NtryDtls/TxDtls/RmtInf/Ustrd"

    def __init__(self, logger: ProcessLogger) -> None:
        self._logger = logger
        self._entries = local_xpath(self.ENTRIES, absolute=True)
        self._paths: dict[str, etree.XPath] = {
            path: local_xpath(path)
            for path in (
                self.CREDIT_DEBIT_INDICATOR,
                self.AMOUNT,
                self.BOOKING_DATE,
                self.VALUE_DATE,
                self.CREDITOR_NAME,
                self.CREDITOR_PARTY_NAME,
                self.CREDITOR_IBAN,
                self.DEBTOR_NAME,
                self.DEBTOR_PARTY_NAME,
                self.DEBTOR_IBAN,
                self.ADDITIONAL_INFO,
                self.REMITTANCE_LINES,
            )
        }

    @property
    def format_name(self) -> str:
        return "camt.052"

    def parse(self, documento: Documento) -> list[Movimiento]:
        root = self._parse_xml(documento)
        entries = self._entries(root)

        if not entries:
            self._logger.log_no_entries(documento.nombre)
            return []

        return [
            self._parse_entry(entry, documento.nombre, index)
            for index, entry in enumerate(entries, start=1)
        ]

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    @staticmethod
    def _parse_xml(documento: Documento) -> etree._Element:
        if documento.is_empty:
            raise ValorInvalidoError(documento.nombre, "XML", "", "documento vacío")

        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            return etree.fromstring(documento.contenido, parser)
        except etree.XMLSyntaxError as e:
            raise ValorInvalidoError(documento.nombre, "XML", "", str(e)) from e

    def _parse_entry(self, entry: etree._Element, archivo: str, index: int) -> Movimiento:
        """Convierte un elemento Ntry en un Movimiento."""
        fecha = self._required_date(entry, self.BOOKING_DATE, archivo, index)
        valuta = self._required_date(entry, self.VALUE_DATE, archivo, index)
        monto = self._parse_amount(entry, archivo, index)

        acreedor = self._parse_party(
            entry,
            self.CREDITOR_NAME,
            self.CREDITOR_PARTY_NAME,
            self.CREDITOR_IBAN,
            archivo,
            index,
        )
        if not acreedor.nombre:
            self._logger.log_party_missing(archivo, "acreedor", fecha, monto.valor)

        deudor = self._parse_party(
            entry,
            self.DEBTOR_NAME,
            self.DEBTOR_PARTY_NAME,
            self.DEBTOR_IBAN,
            archivo,
            index,
        )
        if not deudor.nombre:
            self._logger.log_party_missing(archivo, "deudor", fecha, monto.valor)

        tipo = clean_whitespace(self._find_text(entry, self.ADDITIONAL_INFO))
        lineas = [
            clean_whitespace(node.text) for node in self._paths[self.REMITTANCE_LINES](entry)
        ]

        return Movimiento(
            fecha=fecha,
            valuta=valuta,
            monto=monto,
            acreedor=acreedor,
            deudor=deudor,
            tipo=tipo,
            descripcion=join_lines(lineas),
        )

    def _parse_amount(self, entry: etree._Element, archivo: str, index: int) -> Monto:
        """Lee CdtDbtInd, Amt y Amt/@Ccy y devuelve el monto con signo."""
        indicador = self._required_text(entry, self.CREDIT_DEBIT_INDICATOR, archivo, index)

        amount_element = self._find(entry, self.AMOUNT)
        if amount_element is None or not clean_whitespace(amount_element.text):
            raise CampoFaltanteError(archivo, self.AMOUNT, index)

        moneda = amount_element.get(self.CURRENCY_ATTRIBUTE)
        if not moneda or not moneda.strip():
            raise CampoFaltanteError(archivo, f"{self.AMOUNT}/@{self.CURRENCY_ATTRIBUTE}", index)

        raw_amount = amount_element.text
        try:
            magnitud = parse_amount(raw_amount)
        except ValueError as e:
            raise ValorInvalidoError(archivo, self.AMOUNT, raw_amount, str(e)) from e

        try:
            valor: Decimal = apply_sign(magnitud, indicador)
        except ValueError as e:
            raise ValorInvalidoError(
                archivo, self.CREDIT_DEBIT_INDICATOR, indicador, str(e)
            ) from e

        try:
            moneda = normalize_currency(moneda)
        except ValueError as e:
            raise ValorInvalidoError(
                archivo, f"{self.AMOUNT}/@{self.CURRENCY_ATTRIBUTE}", moneda, str(e)
            ) from e

        return Monto(valor=valor, moneda=moneda)

    def _parse_party(
        self,
        entry: etree._Element,
        name_path: str,
        fallback_name_path: str,
        iban_path: str,
        archivo: str,
        index: int,
    ) -> Contraparte:
        """Lee nombre (con ruta alternativa) e IBAN opcional de una parte."""
        nombre = self._find_text(entry, name_path)
        if nombre is None:
            nombre = self._find_text(entry, fallback_name_path)

        iban: Iban | None = None
        iban_text = self._find_text(entry, iban_path)
        if iban_text is not None and iban_text.strip():
            try:
                iban = Iban.parse(iban_text)
            except ValueError as e:
                raise ValorInvalidoError(archivo, iban_path, iban_text, str(e)) from e

        return Contraparte(nombre=clean_whitespace(nombre), iban=iban)

    def _required_date(
        self, entry: etree._Element, path: str, archivo: str, index: int
    ) -> date:
        text = self._required_text(entry, path, archivo, index)
        try:
            return parse_iso_date(text)
        except ValueError as e:
            raise ValorInvalidoError(archivo, path, text, str(e)) from e

    def _required_text(
        self, entry: etree._Element, path: str, archivo: str, index: int
    ) -> str:
        text = clean_whitespace(self._find_text(entry, path))
        if not text:
            raise CampoFaltanteError(archivo, path, index)
        return text

    def _find(self, entry: etree._Element, path: str) -> etree._Element | None:
        """Primer elemento que coincide con la ruta, o None."""
        matches = self._paths[path](entry)
        return matches[0] if matches else None

    def _find_text(self, entry: etree._Element, path: str) -> str | None:
        """Texto del primer elemento de la ruta.

        None si el elemento no existe; cadena vacía si existe pero está vacío.
        """
        element = self._find(entry, path)
        if element is None:
            return None
        return element.text or ""
