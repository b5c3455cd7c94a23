from __future__ import annotations
import logging
from typing import Iterable, List, Sequence, Tuple

from .geom import Pt, as_points
from .links import Link, unique_links
from .markers import DEFAULT_MARKER_COLOR, DEFAULT_MARKER_SIZE, Rect, find_markers, load_rgb
from .mesh import Triangle
from .sweep import triangulate

log = logging.getLogger(__name__)


def triangulate_points(
    points: Iterable[Sequence[int]],
    backend: str = "internal",
) -> Tuple[List[Pt], List[Tuple[int, int, int]]]:
    """
    Тріангуляція як індекси:
      - "internal" - наш SweepDelaunay;
      - "scipy" - scipy.spatial.Delaunay (Qhull), для звірки.

    Повертає:
      pts   - список Pt у вхідному порядку (дублікати НЕ прибираються);
      tris  - список трикутників (індекси у pts).
    """
    pts: List[Pt] = as_points(points)

    if backend.lower() == "internal":
        return pts, [t.v for t in triangulate(pts)]

    if backend.lower() == "scipy":
        try:
            import numpy as np
            from scipy.spatial import Delaunay
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy', але SciPy не встановлено. "
                "Встанови scipy або використай backend='internal'."
            ) from e

        if len(pts) < 3:
            return pts, []
        arr = np.array([(p.x, p.y) for p in pts], dtype=float)
        dela = Delaunay(arr)
        tris = [tuple(int(i) for i in simplex) for simplex in dela.simplices]
        return pts, tris

    raise ValueError(f"Невідомий backend: {backend}")


def links_from_image(
    path: str,
    color: int = DEFAULT_MARKER_COLOR,
    size: int = DEFAULT_MARKER_SIZE,
):
    """
    Повний пайплайн з картинки:
      - знаходить маркери кольору color;
      - тріангулює їхні центри;
      - збирає унікальні (за координатами) ребра.

    Повертає (image, markers, triangles, links).
    """
    image = load_rgb(path)
    markers: List[Rect] = find_markers(image, color, size)
    log.debug("found %d markers in %s", len(markers), path)
    triangles: List[Triangle] = triangulate(r.center() for r in markers)
    links: List[Link] = unique_links(triangles)
    log.debug("%d triangles, %d links", len(triangles), len(links))
    return image, markers, triangles, links
