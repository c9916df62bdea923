import random
import uuid

from barcodegen.codes import build_code_text, render_filler
from barcodegen.models import FillerKind, RunConfig


def test_build_code_text_static():
    config = RunConfig(prefix="ITEM-", suffix="X", filler=FillerKind.NONE)
    assert build_code_text(config) == "ITEM-X}"
    assert build_code_text(config) == build_code_text(config)


def test_build_code_text_without_suffix():
    config = RunConfig(prefix="ITEM-", filler=FillerKind.NONE)
    assert build_code_text(config) == "ITEM-}"


def test_build_code_text_uuid_differs_per_call():
    config = RunConfig(prefix="A", suffix="Z")
    first = build_code_text(config)
    second = build_code_text(config)
    assert first != second
    assert first.startswith("A") and first.endswith("Z}")
    uuid.UUID(first[1:-2])


def test_render_filler_uses_injected_generator():
    a = render_filler(FillerKind.UUID, random.Random(42))
    b = render_filler(FillerKind.UUID, random.Random(42))
    assert a == b
    assert uuid.UUID(a).version == 4


def test_render_filler_none_is_empty():
    assert render_filler(FillerKind.NONE, random.Random(1)) == ""
