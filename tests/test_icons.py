import xml.etree.ElementTree as ET

import pytest

from taskit.icons import get_svg

SVG_NS = "{http://www.w3.org/2000/svg}"

KNOWN = [
    "inbox",
    "inbox_alt",
    "calendar",
    "calendar-days",
    "folder",
    "plus",
    "settings",
    "trash-2",
    "pencil",
    "check",
    "circle",
]


@pytest.mark.parametrize("name", ["", "unknown", "Inbox", "trash"])
def test_unknown_icon(name):
    assert get_svg(name) is None


@pytest.mark.parametrize("name", KNOWN)
def test_known_icon_is_valid_svg(name):
    svg = get_svg(name)
    root = ET.fromstring(svg)
    assert root.tag == SVG_NS + "svg"
    assert root.get("width") == "24"
    assert root.get("height") == "24"
    assert root.get("viewBox") == "0 0 24 24"
    assert root.get("stroke") == "#555555"
    assert root.get("fill") == "none"
    assert len(root) >= 1


def test_check_icon_content():
    root = ET.fromstring(get_svg("check"))
    paths = root.findall(SVG_NS + "path")
    assert [p.get("d") for p in paths] == ["M20 6 9 17l-5-5"]


def test_circle_icon_content():
    root = ET.fromstring(get_svg("circle"))
    circle = root.find(SVG_NS + "circle")
    assert (circle.get("cx"), circle.get("cy"), circle.get("r")) == ("12", "12", "10")


def test_icons_are_distinct():
    bodies = {get_svg(name) for name in KNOWN}
    assert len(bodies) == len(KNOWN)