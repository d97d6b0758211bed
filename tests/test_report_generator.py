"""
QA Test Suite — services/report_generator.py
===========================================
PDF bytes, core-font text coercion, deterministic filenames.
"""
from __future__ import annotations

import os
import sys

import pytest

_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _root not in sys.path:
    sys.path.insert(0, _root)

from services import report_generator as rg
from core.errors import ReportGenerationError
from core.wizard import AnalysisResult, AssetForm, LeadData


def _result(text: str = "Texto narrativo.") -> AnalysisResult:
    return AnalysisResult(
        analysis_text=text,
        risks={"Olas de Calor": "Alto", "Inundaciones": "Bajo", "Sequías": "medio", "Viento": "?"},
        sources=({"maps": {"uri": "https://maps.google.com/?cid=1", "title": "Torre Picasso"}},),
    )


class TestGenerateReport:
    def test_returns_pdf_bytes(self):
        pdf = rg.generate_analysis_report(AssetForm(), _result())
        assert isinstance(pdf, bytes)
        assert pdf.startswith(b"%PDF")

    def test_long_narrative_with_typographic_characters(self):
        text = ("El activo — situado en “zona cálida” — afronta riesgos… " * 120).strip()
        pdf = rg.generate_analysis_report(AssetForm(), _result(text), LeadData(name="Iñaki"))
        assert pdf.startswith(b"%PDF")

    def test_data_center_without_risks_or_sources(self):
        form = AssetForm(asset_type="Data Center", pue="")
        pdf = rg.generate_analysis_report(form, AnalysisResult("Solo texto."))
        assert pdf.startswith(b"%PDF")

    def test_builder_failure_is_wrapped(self, monkeypatch):
        def boom(*a, **k):
            raise RuntimeError("layout exploded")
        monkeypatch.setattr(rg, "_build_pdf", boom)
        with pytest.raises(ReportGenerationError, match="layout exploded"):
            rg.generate_analysis_report(AssetForm(), _result())


class TestPdfText:
    def test_transliterates_typographic_characters(self):
        assert rg._pdf_text("a — b “c” d…") == 'a - b "c" d...'

    def test_keeps_spanish_accents(self):
        assert rg._pdf_text("Sequías, año, Ñ") == "Sequías, año, Ñ"

    def test_unencodable_characters_are_replaced(self):
        assert rg._pdf_text("🌿 ok") == "? ok"


class TestReportFilename:
    def test_deterministic(self):
        form = AssetForm()
        assert rg.report_filename(form) == rg.report_filename(form)
        assert rg.report_filename(form) == "Informe_Resiliencia_Paseo_de_la_Castellana_93_28046.pdf"

    def test_accents_and_symbols_are_stripped(self):
        form = AssetForm(address="Avda. de Andalucía, 5", postal_code="41 005")
        assert rg.report_filename(form) == "Informe_Resiliencia_Avda_de_Andalucia_5_41005.pdf"

    def test_empty_address_and_postal_code(self):
        assert rg.report_filename(AssetForm(address="", postal_code="")) == "Informe_Resiliencia_activo.pdf"
