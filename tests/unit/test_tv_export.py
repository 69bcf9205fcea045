"""Tests for the TV screen renderer."""
import io

from PIL import Image

from app.display.tv_export import HEIGHT, WIDTH, _format_date, render_tv_image, render_tv_png
from app.schemas import CatalogItem, DisplayMenu


def display_menu(soups=None, **specials):
    return DisplayMenu(
        date="2024-01-15",
        soups=soups if soups is not None else [None] * 6,
        specials={slot: specials.get(slot) for slot in ("panini", "sandwich", "salad", "entree")},
        is_published=True,
    )


def test_format_date():
    assert _format_date("2024-01-15") == "Monday, January 15, 2024"


def test_renders_portrait_png():
    menu = display_menu(
        soups=[CatalogItem(id="s6", name="Black Angus Beef Chilli", type="soup")] + [None] * 5,
        panini=CatalogItem(
            id="p1", name="Cuban", type="panini", description="Roast pork, ham, swiss and pickles"
        ),
    )

    data = render_tv_png(menu)

    assert data.startswith(b"\x89PNG")
    assert Image.open(io.BytesIO(data)).size == (WIDTH, HEIGHT)


def test_empty_menu_still_renders():
    image = render_tv_image(display_menu())

    assert image.size == (1080, 1920)
    assert image.mode == "RGB"


def test_many_long_specials_do_not_overflow(caplog):
    long_text = "word " * 200
    item = lambda slot: CatalogItem(id=slot, name=slot.title(), type=slot, description=long_text)  # noqa: E731

    menu = display_menu(
        soups=[CatalogItem(id=f"s{i}", name=f"Soup {i}", type="soup") for i in range(6)],
        panini=item("panini"),
        sandwich=item("sandwich"),
        salad=item("salad"),
        entree=item("entree"),
    )

    assert render_tv_image(menu).size == (WIDTH, HEIGHT)
