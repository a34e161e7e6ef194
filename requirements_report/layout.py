"""
Layout helpers for the requirements report PDF.

The report is drawn directly onto a reportlab canvas. Callers work in
millimetres with the origin at the top-left corner and a cursor that grows
downwards; `LayoutEngine` converts to reportlab's bottom-left point space.

Page breaks are caller-driven: renderers check their own cursor with
`ensure_space` before writing a block. There is no automatic reflow.
"""

from __future__ import annotations

from io import BytesIO
from typing import BinaryIO, List, Optional, Tuple, Union

from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader, simpleSplit
from reportlab.pdfgen import canvas

from .logging_utils import get_logger
from .models import ChartImage, PageGeometry, ReportSettings

logger = get_logger(__name__)

# Cursor advance per line, as a factor of the font size.
LINE_FACTOR = 0.5


def is_drawable(image: ChartImage) -> bool:
    """True when the image has a positive size and reportlab can decode it."""
    if image.width <= 0 or image.height <= 0:
        return False
    try:
        width, height = ImageReader(BytesIO(image.data)).getSize()
    except Exception as exc:
        logger.debug("Undecodable %s chart: %s", image.kind.value, exc)
        return False
    return width > 0 and height > 0


class LayoutEngine:
    """Places wrapped text and images on pages and tracks the vertical cursor."""

    def __init__(
        self,
        output: Union[str, BinaryIO],
        settings: Optional[ReportSettings] = None,
        title: str = "",
    ):
        self.settings = settings or ReportSettings.default()
        self.geometry: PageGeometry = self.settings.geometry
        # invariant=1 keeps the output byte-stable for identical input
        self.canvas = canvas.Canvas(
            output,
            pagesize=(self.geometry.width * mm, self.geometry.height * mm),
            invariant=1,
        )
        if title:
            self.canvas.setTitle(title)
        self.pages: List[List[str]] = [[]]
        self.images: List[Tuple[int, ChartImage]] = []
        self.y = self.geometry.margin

    @property
    def margin(self) -> float:
        return self.geometry.margin

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def _font(self, bold: bool) -> str:
        return self.settings.bold_font_name if bold else self.settings.font_name

    def wrap(self, text: str, max_width: float, font_size: float = 10, bold: bool = False) -> List[str]:
        return simpleSplit(text, self._font(bold), font_size, max_width * mm) or [""]

    def place(
        self,
        text: str,
        x: float,
        y: float,
        max_width: Optional[float] = None,
        font_size: float = 10,
        bold: bool = False,
    ) -> float:
        """
        Draw `text` with its first baseline at (x, y) and return the new cursor.

        With `max_width` the text is word-wrapped and the cursor advances by one
        line step per wrapped line; otherwise a single line step is used.
        """
        line_step = font_size * LINE_FACTOR
        lines = self.wrap(text, max_width, font_size, bold) if max_width else [text]

        obj = self.canvas.beginText(x * mm, (self.geometry.height - y) * mm)
        obj.setFont(self._font(bold), font_size)
        obj.setLeading(line_step * mm)
        for line in lines:
            obj.textLine(line)
        self.canvas.drawText(obj)

        self.pages[-1].extend(lines)
        self.y = y + len(lines) * line_step
        return self.y

    def place_image(self, image: ChartImage, x: float, y: float, width: float, height: float) -> float:
        """Draw a PNG with its top-left corner at (x, y); returns the cursor below it."""
        reader = ImageReader(BytesIO(image.data))
        self.canvas.drawImage(
            reader,
            x * mm,
            (self.geometry.height - y - height) * mm,
            width=width * mm,
            height=height * mm,
            mask="auto",
        )
        self.images.append((len(self.pages) - 1, image))
        self.y = y + height
        return self.y

    def new_page(self) -> float:
        self.canvas.showPage()
        self.pages.append([])
        self.y = self.geometry.margin
        return self.y

    def ensure_space(self, y: float, reserve: float) -> float:
        """Start a new page when `y` has passed `page height - reserve`."""
        if y > self.geometry.height - reserve:
            return self.new_page()
        return y

    def fit_image(self, image: ChartImage, max_width: float, max_height: float) -> Tuple[float, float]:
        """Scale to `max_width`, then shrink to `max_height`, keeping the aspect ratio."""
        ratio = image.aspect_ratio
        width = max_width
        height = width / ratio
        if height > max_height:
            height = max_height
            width = height * ratio
        return width, height

    def text(self) -> List[str]:
        return [line for page in self.pages for line in page]

    def finish(self) -> None:
        self.canvas.save()


__all__ = ["LayoutEngine", "LINE_FACTOR", "is_drawable"]
