from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict
from reportlab.lib.pagesizes import A4


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Grid geometry, in PDF points
    cell_width: float = 198
    cell_height: float = 105
    qr_size: float = 100
    columns: int = 3
    rows: int = 9

    page_size: tuple[float, float] = A4

    # Output
    default_file_name: str = "barcode.pdf"
    document_title: str = "Barcodes"


@lru_cache
def get_settings() -> Settings:
    return Settings()
