"""
Tests de punta a punta del CLI.

Se llama a main() con argv y un sink en memoria: recorre el pipeline real
(ZIP → parser → consolidación → writer) sin lanzar un subproceso.
"""

import io
import zipfile
from pathlib import Path

import pytest

from camt_converter.cli.main import main, run
from camt_converter.domain.exceptions import CampoFaltanteError
from camt_converter.domain.models import OutputFormat
from camt_converter.infrastructure.config import Configuracion
from camt_converter.infrastructure.registry import create_default_registry

HEADER = b"Date;Valuta;Amount;Currency;Creditor;Creditor IBAN;Debtor;Debtor IBAN;Type;Description\n"


def _run_main(argv: list[str]) -> tuple[int, bytes]:
    sink = io.BytesIO()
    with pytest.raises(SystemExit) as exc_info:
        main(argv, sink=sink)
    return exc_info.value.code, sink.getvalue()


def _zip(path: Path, miembros: dict[str, bytes]) -> Path:
    with zipfile.ZipFile(path, "w") as zf:
        for nombre, contenido in miembros.items():
            zf.writestr(nombre, contenido)
    return path


class TestMain:
    def test_xml_a_csv(self, tmp_path, camt_entry, camt_document):
        path = tmp_path / "reporte.xml"
        path.write_bytes(camt_document(camt_entry()))

        code, salida = _run_main([str(path)])

        assert code == 0
        assert salida == HEADER + (
            "2023-01-05;2023-01-06;-12.34;EUR;Stadtwerke Hamburg;"
            "DE89 3704 0044 0532 0130 00;Max Mustermann;GB29 NWBK 6016 1331 9268 19;"
            "SEPA Lastschrift;Abschlag Strom Januar\n"
        ).encode("utf-8")

    def test_duplicados_entre_miembros_de_zip(self, tmp_path, camt_entry, camt_document):
        enero = camt_document(
            camt_entry(fecha="2023-01-20", remesa=["Miete"]),
            camt_entry(fecha="2023-01-03", remesa=["Strom"]),
        )
        febrero = camt_document(
            camt_entry(fecha="2023-01-20", remesa=["Miete"]),
            camt_entry(fecha="2023-02-01", remesa=["Gas"]),
        )
        path = _zip(tmp_path / "export.zip", {"enero.xml": enero, "febrero.xml": febrero})

        code, salida = _run_main([str(path)])

        lineas = salida.decode("utf-8").splitlines()
        assert code == 0
        assert len(lineas) == 4
        assert [linea.split(";")[-1] for linea in lineas[1:]] == ["Strom", "Miete", "Gas"]

    def test_varios_archivos_consolidados(self, tmp_path, camt_entry, camt_document):
        a = tmp_path / "a.xml"
        a.write_bytes(
            camt_document(
                camt_entry(fecha="2023-03-01", remesa=["a1"]),
                camt_entry(fecha="2023-01-15", remesa=["a2"]),
            )
        )
        b = tmp_path / "b.xml"
        b.write_bytes(
            camt_document(
                camt_entry(fecha="2023-01-01", remesa=["b1"]),
                camt_entry(fecha="2023-02-10", remesa=["b2"]),
            )
        )
        c = _zip(
            tmp_path / "c.zip",
            {"c.xml": camt_document(camt_entry(fecha="2023-01-15", remesa=["c1"]))},
        )

        code, salida = _run_main([str(a), str(b), str(c)])

        lineas = salida.decode("utf-8").splitlines()
        fechas = [linea.split(";")[0] for linea in lineas[1:]]
        assert code == 0
        assert fechas == sorted(fechas)
        assert [linea.split(";")[-1] for linea in lineas[1:]] == ["b1", "a2", "c1", "b2", "a1"]

    def test_campo_faltante_aborta_sin_salida(self, tmp_path, camt_entry, camt_document):
        path = tmp_path / "reporte.xml"
        path.write_bytes(camt_document(camt_entry(), camt_entry(monto=None)))

        code, salida = _run_main([str(path)])

        assert code == 1
        assert salida == b""

    def test_zip_corrupto(self, tmp_path):
        path = tmp_path / "roto.zip"
        path.write_bytes(b"PK\x03\x04basura")

        code, salida = _run_main([str(path)])

        assert code == 1
        assert salida == b""

    def test_sin_entradas(self, tmp_path, camt_document):
        path = tmp_path / "vacio.xml"
        path.write_bytes(camt_document())

        code, salida = _run_main([str(path)])

        assert code == 0
        assert salida == HEADER

    @pytest.mark.parametrize("formato", ["xlsx", "ods"])
    def test_hoja_de_calculo(self, tmp_path, camt_entry, camt_document, formato):
        path = tmp_path / "reporte.xml"
        path.write_bytes(camt_document(camt_entry()))

        code, salida = _run_main([str(path), "--format", formato])

        assert code == 0
        assert salida.startswith(b"PK\x03\x04")

    def test_archivo_inexistente(self, tmp_path):
        code, salida = _run_main([str(tmp_path / "no_existe.xml")])
        assert code == 2
        assert salida == b""

    def test_archivo_repetido(self, tmp_path, camt_entry, camt_document):
        path = tmp_path / "reporte.xml"
        path.write_bytes(camt_document(camt_entry()))

        code, _ = _run_main([str(path), str(tmp_path / "." / "reporte.xml")])

        assert code == 2

    def test_sin_archivos(self):
        code, _ = _run_main([])
        assert code == 2

    def test_formato_desconocido(self, tmp_path, camt_entry, camt_document):
        path = tmp_path / "reporte.xml"
        path.write_bytes(camt_document(camt_entry()))

        code, _ = _run_main([str(path), "--format", "pdf"])

        assert code == 2

    def test_locale_no_soportado(self, tmp_path, camt_entry, camt_document):
        path = tmp_path / "reporte.xml"
        path.write_bytes(camt_document(camt_entry()))

        code, _ = _run_main([str(path), "--locale", "xx_XX"])

        assert code == 2

    def test_log_level_invalido(self, tmp_path, camt_entry, camt_document):
        path = tmp_path / "reporte.xml"
        path.write_bytes(camt_document(camt_entry()))

        code, _ = _run_main([str(path), "--log-level", "MUCHO"])

        assert code == 2


class TestRun:
    def test_devuelve_movimientos(self, tmp_path, camt_entry, camt_document):
        path = tmp_path / "reporte.xml"
        path.write_bytes(camt_document(camt_entry(), camt_entry(indicador="CRDT")))
        config = Configuracion(archivos=(path,), formato=OutputFormat.CSV)

        movimientos = run(config, create_default_registry(), io.BytesIO())

        assert [str(m.monto.valor) for m in movimientos] == ["-12.34", "12.34"]

    def test_propaga_errores_de_dominio(self, tmp_path, camt_entry, camt_document):
        path = tmp_path / "reporte.xml"
        path.write_bytes(camt_document(camt_entry(fecha=None)))
        config = Configuracion(archivos=(path,))

        with pytest.raises(CampoFaltanteError):
            run(config, create_default_registry(), io.BytesIO())


class TestAyuda:
    def test_ods_documentado_como_xlsx(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])

        assert exc_info.value.code == 0
        ayuda = " ".join(capsys.readouterr().out.split())
        assert "'ods' es un alias de 'xlsx'" in ayuda
        assert "libro xlsx" in ayuda
