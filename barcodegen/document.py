from __future__ import annotations

import random

from reportlab.pdfgen import canvas

from .layout import Renderer, fill_document
from .models import RunConfig
from .render import add_qr_code
from .settings import Settings, get_settings


def open_document(file_name: str, settings: Settings | None = None) -> canvas.Canvas:
    settings = settings or get_settings()
    pdf = canvas.Canvas(file_name, pagesize=settings.page_size)
    pdf.setTitle(settings.document_title)
    return pdf


def write_document(
    config: RunConfig,
    settings: Settings | None = None,
    renderer: Renderer = add_qr_code,
    rng: random.Random | None = None,
) -> str:
    """Build the whole PDF and write it to ``config.file_name``.

    Nothing is written until every page is drawn; an interrupted run leaves
    no file behind.
    """
    pdf = open_document(config.file_name, settings)
    fill_document(pdf, config, settings, renderer=renderer, rng=rng)
    pdf.save()
    return config.file_name
