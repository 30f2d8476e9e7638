from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import pytesseract
from PIL import Image

logger = logging.getLogger(__name__)


class OcrEngine:
    """Single-use OCR worker bound to one language model.

    Holds the open image handles it was asked to read; close() releases them.
    """

    def __init__(self, lang: str = "eng"):
        self.lang = lang
        self.closed = False
        self._images: list = []

    def recognize(self, path: str) -> str:
        if self.closed:
            raise RuntimeError("OCR engine already released")
        img = Image.open(path)
        self._images.append(img)
        # multi-frame TIFFs: recognize every frame
        n_frames = getattr(img, "n_frames", 1)
        if n_frames <= 1:
            return pytesseract.image_to_string(img, lang=self.lang)
        parts = []
        for idx in range(n_frames):
            img.seek(idx)
            parts.append(pytesseract.image_to_string(img, lang=self.lang))
        return "\n".join(parts)

    def close(self) -> None:
        for img in self._images:
            try:
                img.close()
            except Exception:  # pragma: no cover - PIL close is best effort
                logger.debug("failed closing image handle", exc_info=True)
        self._images = []
        self.closed = True


@contextmanager
def ocr_engine(lang: Optional[str] = None) -> Iterator[OcrEngine]:
    engine = OcrEngine(lang or "eng")
    try:
        yield engine
    finally:
        engine.close()
