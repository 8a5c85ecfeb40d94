"""
PDF text extraction tests; pdfminer / pdf2image / tesseract are stubbed.
"""

import sys
from pathlib import Path

import pytest
from PIL import Image

sys.path.insert(0, str(Path(__file__).parent.parent))

import menutext.sources.pdf_text as pdf_text
from menutext.config import Settings
from menutext.sources.pdf_text import PdfTextError, extract_pdf_text


@pytest.fixture()
def pdf_file(tmp_path):
    p = tmp_path / "Monday.pdf"
    p.write_bytes(b"%PDF-1.4 stub")
    return p


class TestExtract:

    def test_missing_file(self, tmp_path):
        with pytest.raises(PdfTextError):
            extract_pdf_text(tmp_path / "nope.pdf")

    def test_text_layer_used(self, pdf_file, monkeypatch):
        monkeypatch.setattr(pdf_text, "extract_text", lambda path: "Wings .. $9.50\n")

        def no_ocr(*a, **k):
            raise AssertionError("OCR should not run")

        monkeypatch.setattr(pdf_text, "convert_from_path", no_ocr)
        assert extract_pdf_text(pdf_file) == "Wings .. $9.50\n"

    def test_ocr_fallback(self, pdf_file, monkeypatch):
        monkeypatch.setattr(pdf_text, "extract_text", lambda path: "  \n\x0c")
        pages = [Image.new("RGB", (20, 20), "white"), Image.new("RGB", (20, 20), "white")]
        seen = {}

        def fake_convert(path, dpi, poppler_path=None):
            seen["dpi"] = dpi
            return pages

        def fake_ocr(img, lang, config):
            seen.setdefault("modes", []).append(img.mode)
            seen["lang"] = lang
            return "Wings .. $9.50"

        monkeypatch.setattr(pdf_text, "convert_from_path", fake_convert)
        monkeypatch.setattr(pdf_text.pytesseract, "image_to_string", fake_ocr)

        settings = Settings(ocr_dpi=150, tesseract_lang="eng")
        text = extract_pdf_text(pdf_file, settings=settings)
        assert text == "Wings .. $9.50\nWings .. $9.50"
        assert seen["dpi"] == 150
        assert seen["modes"] == ["L", "L"]
        assert seen["lang"] == "eng"

    def test_fallback_disabled(self, pdf_file, monkeypatch):
        monkeypatch.setattr(pdf_text, "extract_text", lambda path: "")
        assert extract_pdf_text(pdf_file, ocr_fallback=False) == ""

    def test_pdfminer_failure_wrapped(self, pdf_file, monkeypatch):
        def boom(path):
            raise ValueError("bad xref")

        monkeypatch.setattr(pdf_text, "extract_text", boom)
        with pytest.raises(PdfTextError, match="bad xref"):
            extract_pdf_text(pdf_file)


class TestHealth:

    def test_shape(self, monkeypatch):
        monkeypatch.setattr(pdf_text, "configure_tesseract", lambda settings=None: "")
        info = pdf_text.health(Settings(poppler_path=""))
        assert info["tesseract"] == {"cmd": "", "version": None, "found_on_disk": False}
        assert "on_path" in info["poppler"]
