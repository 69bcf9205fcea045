"""Portrait TV-screen rendering of a published menu with Pillow."""

import io
import logging
from datetime import date as date_cls
from typing import List, Optional

from PIL import Image, ImageDraw, ImageFont

from app.schemas import CatalogItem, DisplayMenu

logger = logging.getLogger(__name__)

WIDTH = 1080
HEIGHT = 1920

COLORS = {
    "paprika": "#8B2C1D",
    "bisque": "#F4B966",
    "sage": "#9FB88F",
    "cream": "#FFF8F0",
    "emerald": "#2C6E49",
    "warm_brown": "#5D4037",
    "gold": "#D4A574",
    "dark_text": "#2D2D2D",
}

GRADIENT = ((255, 248, 240), (255, 228, 196))

SPECIAL_TITLES = (
    ("panini", "Panini"),
    ("sandwich", "Sandwich"),
    ("salad", "Salad"),
    ("entree", "Entree"),
)


def _font(size: int) -> ImageFont.ImageFont:
    try:
        return ImageFont.truetype("DejaVuSans-Bold.ttf", size)
    except OSError:
        return ImageFont.load_default(size=size)


def _wrap(draw: ImageDraw.ImageDraw, text: str, font, max_width: int) -> List[str]:
    lines: List[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}".strip()
        if draw.textlength(candidate, font=font) <= max_width:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


def _centered(draw: ImageDraw.ImageDraw, y: int, text: str, font, fill) -> None:
    x = (WIDTH - draw.textlength(text, font=font)) / 2
    draw.text((x, y), text, font=font, fill=fill)


def _background() -> Image.Image:
    image = Image.new("RGB", (WIDTH, HEIGHT))
    draw = ImageDraw.Draw(image)
    top, bottom = GRADIENT
    for y in range(HEIGHT):
        t = y / (HEIGHT - 1)
        color = tuple(int(a + (b - a) * t) for a, b in zip(top, bottom))
        draw.line([(0, y), (WIDTH, y)], fill=color)
    return image


def _format_date(value: str) -> str:
    parsed = date_cls.fromisoformat(value)
    return f"{parsed:%A}, {parsed:%B} {parsed.day}, {parsed.year}"


def render_tv_image(menu: DisplayMenu, title: str = "The Soup Shoppe") -> Image.Image:
    """Lay out soups and specials on a 1080x1920 canvas."""
    image = _background()
    draw = ImageDraw.Draw(image)

    heading = _font(84)
    subheading = _font(40)
    section = _font(56)
    item_font = _font(44)
    body = _font(30)

    draw.rectangle([(0, 0), (WIDTH, 260)], fill=COLORS["paprika"])
    _centered(draw, 60, title, heading, COLORS["cream"])
    _centered(draw, 175, _format_date(menu.date), subheading, COLORS["bisque"])

    y = 320
    margin = 80
    text_width = WIDTH - 2 * margin

    draw.text((margin, y), "Today's Soups", font=section, fill=COLORS["paprika"])
    y += 90
    soups: List[CatalogItem] = [soup for soup in menu.soups if soup is not None]
    if not soups:
        draw.text((margin, y), "Check back soon!", font=item_font, fill=COLORS["warm_brown"])
        y += 70
    for soup in soups:
        draw.ellipse([(margin, y + 14), (margin + 20, y + 34)], fill=COLORS["sage"])
        draw.text((margin + 40, y), soup.name, font=item_font, fill=COLORS["dark_text"])
        y += 70

    y += 40
    draw.line([(margin, y), (WIDTH - margin, y)], fill=COLORS["gold"], width=4)
    y += 50

    draw.text((margin, y), "Daily Specials", font=section, fill=COLORS["emerald"])
    y += 90
    for key, label in SPECIAL_TITLES:
        item: Optional[CatalogItem] = menu.specials.get(key)
        if item is None:
            continue
        draw.text((margin, y), label.upper(), font=body, fill=COLORS["warm_brown"])
        y += 44
        draw.text((margin, y), item.name, font=item_font, fill=COLORS["dark_text"])
        y += 60
        for line in _wrap(draw, item.description, body, text_width)[:3]:
            draw.text((margin, y), line, font=body, fill=COLORS["warm_brown"])
            y += 40
        y += 30
        if y > HEIGHT - 120:
            logger.warning("TV layout overflow for %s; remaining specials omitted", menu.date)
            break

    return image


def render_tv_png(menu: DisplayMenu, title: str = "The Soup Shoppe") -> bytes:
    buffer = io.BytesIO()
    render_tv_image(menu, title).save(buffer, format="PNG", optimize=True)
    return buffer.getvalue()
