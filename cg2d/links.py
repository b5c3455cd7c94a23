from __future__ import annotations
import xml.etree.ElementTree as ET
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from .geom import Pt
from .mesh import Triangle

LINK_COLOR = (255, 0, 0)
LINK_WIDTH = 1.5
MARKER_COLOR = (0, 0, 0)

Link = Tuple[Pt, Pt]


def unique_links(triangles: Iterable[Triangle]) -> List[Link]:
    """
    Ребра всіх трикутників без повторів - за значенням координат.

    Тут рівність слабша, ніж у тріангуляції: дві різні вершини з однаковими
    координатами дають одну лінію. Порядок - перша поява.
    """
    seen: Set[Tuple[int, int, int, int]] = set()
    out: List[Link] = []
    for t in triangles:
        p = t.points
        e = t.edges()
        for k in range(0, 6, 2):
            a, b = p[e[k]], p[e[k + 1]]
            key = (a.x, a.y, b.x, b.y)
            if key in seen:
                continue
            seen.add(key)
            out.append((a, b))
    return out


def _rgb(color: Sequence[int]) -> str:
    r, g, b = color
    return f"rgb({r},{g},{b})"


def to_svg(
    links: Iterable[Link],
    width: int,
    height: int,
    href: Optional[str] = None,
    markers: Iterable = (),
) -> str:
    """
    SVG 1.1 з лініями links.
    href - фонове зображення (<image> на весь розмір).
    markers - прямокутники з .min_x, .min_y, .width() (див. markers.Rect), малюються колами.
    """
    root = ET.Element("svg", {
        "version": "1.1",
        "height": str(height),
        "width": str(width),
        "xmlns": "http://www.w3.org/2000/svg",
        "xmlns:xlink": "http://www.w3.org/1999/xlink",
    })
    if href is not None:
        ET.SubElement(root, "image", {
            "xlink:href": href,
            "x": "0",
            "y": "0",
            "width": str(width),
            "height": str(height),
        })
    for m in markers:
        radius = m.width() // 2
        ET.SubElement(root, "circle", {
            "cx": str(m.min_x + radius),
            "cy": str(m.min_y + radius),
            "r": str(radius),
            "style": f"stroke:{_rgb(MARKER_COLOR)};stroke-width:1;opacity:0.5;",
        })
    style = f"stroke:{_rgb(LINK_COLOR)};stroke-width:{LINK_WIDTH}"
    for a, b in links:
        ET.SubElement(root, "line", {
            "x1": str(a.x),
            "x2": str(b.x),
            "y1": str(a.y),
            "y2": str(b.y),
            "style": style,
        })
    ET.indent(root, space="\t")
    return ET.tostring(root, encoding="unicode")


def write_svg(path: str, links: Iterable[Link], width: int, height: int,
              href: Optional[str] = None, markers: Iterable = ()) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(to_svg(links, width, height, href, markers))
