from __future__ import annotations

import logging

import qrcode
from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

logger = logging.getLogger(__name__)


def make_qr_image(text: str, size: int = 100) -> Image.Image:
    """Render *text* as a QR code on a white square of ``size`` pixels.

    The symbol has no quiet zone and uses the lowest error correction level.
    Modules are scaled by the largest whole factor that fits; a symbol wider
    than *size* is returned at one pixel per module.
    """
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=1,
        border=0,
    )
    qr.add_data(text)
    qr.make(fit=True)
    qr.box_size = max(1, size // qr.modules_count)

    img: Image.Image = qr.make_image(fill_color="black", back_color="white").convert("RGB")
    if img.width >= size:
        return img

    square = Image.new("RGB", (size, size), "white")
    offset = (size - img.width) // 2
    square.paste(img, (offset, offset))
    return square


def add_qr_code(pdf: canvas.Canvas, text: str, x: float, y: float, size: float) -> None:
    # A failing cell is left blank; the rest of the sheet still gets drawn
    try:
        img = make_qr_image(text, int(size))
        pdf.drawImage(ImageReader(img), x, y, width=size, height=size)
    except Exception:
        logger.exception("Could not draw QR code for %r at (%s, %s)", text, x, y)
