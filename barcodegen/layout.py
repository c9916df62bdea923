from __future__ import annotations

import random
from typing import Callable, Iterator

from reportlab.pdfgen import canvas

from .codes import build_code_text
from .models import RunConfig
from .render import add_qr_code
from .settings import Settings, get_settings

Renderer = Callable[[canvas.Canvas, str, float, float, float], None]


def page_count(config: RunConfig) -> int:
    # Page indices run 0..pages inclusive, so one extra sheet is produced
    return config.pages + 1


def iter_cells(settings: Settings | None = None) -> Iterator[tuple[int, int]]:
    """Yield ``(column, row)`` for every grid cell, row by row."""
    settings = settings or get_settings()
    for row in range(settings.rows):
        for column in range(settings.columns):
            yield column, row


def cell_position(column: int, row: int, settings: Settings | None = None) -> tuple[float, float]:
    """Bottom-left corner of the QR square centered in cell ``(column, row)``."""
    settings = settings or get_settings()
    x = (settings.cell_width - settings.qr_size) / 2 + column * settings.cell_width
    y = (settings.cell_height - settings.qr_size) / 2 + row * settings.cell_height
    return x, y


def fill_page(
    pdf: canvas.Canvas,
    config: RunConfig,
    settings: Settings | None = None,
    renderer: Renderer = add_qr_code,
    rng: random.Random | None = None,
) -> None:
    settings = settings or get_settings()
    for column, row in iter_cells(settings):
        x, y = cell_position(column, row, settings)
        renderer(pdf, build_code_text(config, rng), x, y, settings.qr_size)


def fill_document(
    pdf: canvas.Canvas,
    config: RunConfig,
    settings: Settings | None = None,
    renderer: Renderer = add_qr_code,
    rng: random.Random | None = None,
) -> int:
    """Draw every page of the sheet onto *pdf* and return the page count."""
    settings = settings or get_settings()
    pages = page_count(config)
    for _ in range(pages):
        pdf.setPageSize(settings.page_size)
        fill_page(pdf, config, settings, renderer=renderer, rng=rng)
        pdf.showPage()
    return pages
