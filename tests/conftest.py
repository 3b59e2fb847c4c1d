"""Shared fixtures for the extraction tests."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_HOCR = """<?xml version="1.0" encoding="UTF-8"?>
<html xmlns="http://www.w3.org/1999/xhtml">
 <body>
  <div class="ocr_page" id="page_1" title="image &quot;scan.png&quot;; bbox 0 0 1000 800; ppageno 0">
   <span class="ocr_line" id="line_1_1" title="bbox 10 10 260 30">
    <span class="ocrx_word" id="word_1_1" title="bbox 10 10 60 30; x_wconf 95">Name</span>
    <span class="ocrx_word" id="word_1_2" title="bbox 200 10 260 30; x_wconf 95">Qty</span>
   </span>
   <span class="ocr_line" id="line_1_2" title="bbox 10 40 220 60">
    <span class="ocrx_word" id="word_1_3" title="bbox 10 40 70 60; x_wconf 93">Apple</span>
    <span class="ocrx_word" id="word_1_4" title="bbox 200 40 220 60; x_wconf 91">3</span>
   </span>
  </div>
 </body>
</html>
"""

EMPTY_HOCR = """<?xml version="1.0" encoding="UTF-8"?>
<html xmlns="http://www.w3.org/1999/xhtml"><body></body></html>
"""


@pytest.fixture
def hocr_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.hocr"
    path.write_text(SAMPLE_HOCR, encoding="utf-8")
    return path


@pytest.fixture
def empty_hocr_file(tmp_path: Path) -> Path:
    path = tmp_path / "empty.hocr"
    path.write_text(EMPTY_HOCR, encoding="utf-8")
    return path


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """Two-page PDF with a small two-column table on each page."""
    import pymupdf

    doc = pymupdf.open()
    for rows in ([("Name", "Qty"), ("Apple", "3")], [("Pear", "7")]):
        page = doc.new_page(width=595, height=842)
        for i, (label, value) in enumerate(rows):
            baseline = 100 + 30 * i
            page.insert_text((72, baseline), label, fontsize=11)
            page.insert_text((300, baseline), value, fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data
