import random

from pypdf import PdfReader

from barcodegen.document import write_document
from barcodegen.models import FillerKind, RunConfig


def test_write_document_page_count_and_size(tmp_path):
    out = tmp_path / "codes.pdf"
    config = RunConfig(file_name=str(out), pages=2)
    assert write_document(config, rng=random.Random(3)) == str(out)

    reader = PdfReader(str(out))
    assert len(reader.pages) == 3
    box = reader.pages[0].mediabox
    assert round(float(box.width)) == 595
    assert round(float(box.height)) == 842
    assert reader.metadata.title == "Barcodes"


def test_write_document_survives_unencodable_text(tmp_path):
    out = tmp_path / "broken.pdf"
    config = RunConfig(prefix="x" * 5000, filler=FillerKind.NONE, file_name=str(out))
    write_document(config)
    assert len(PdfReader(str(out)).pages) == 2
