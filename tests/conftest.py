"""Shared fixtures for tag locator tests."""

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


def _read(name: str) -> str:
    return (DATA_DIR / name).read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def iso_xml() -> str:
    """ISO 19139 metadata document."""
    return _read("iso.xml")


@pytest.fixture(scope="session")
def mrf_xml() -> str:
    """Meta Raster Format descriptor."""
    return _read("raster.mrf")


@pytest.fixture(scope="session")
def tiff_aux_xml() -> str:
    """GDAL .aux.xml sidecar with per-band statistics."""
    return _read("rgb_raster.tif.aux.xml")


@pytest.fixture(scope="session")
def tmx_xml() -> str:
    """Translation Memory eXchange document."""
    return _read("tmx.xml")


@pytest.fixture(scope="session")
def svg_xml() -> str:
    """SVG drawing."""
    return _read("example.svg")


@pytest.fixture
def nested_xml() -> str:
    """Tag nested inside tags of the same name."""
    return "<Thing><Thing attr=1></Thing><Thing attr=2></Thing></Thing>"


@pytest.fixture
def multiline_xml() -> str:
    """Opening tags whose attributes span several lines, one never terminated."""
    return (
        "<div\n"
        'id="container"\n'
        ">\n"
        "  <div\n"
        '    id="inside"\n'
        '    data-foo="bar"\n'
        "  </div>\n"
        "</div>\n"
    )
