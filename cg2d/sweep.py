from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .geom import Pt, EPS, SUPER_SCALE, as_points
from .mesh import Edge, Triangle, dedupe_edges
from .predicates import in_circumcircle, orient2d

log = logging.getLogger(__name__)


class SweepDelaunay:
    """
    Інкрементальна 2D Делоне зі зсувною прямою зліва направо.

    На відміну від класичного Bowyer–Watson вершини вставляються в порядку
    зростання x, а трикутники, чиє описане коло повністю лівіше поточної
    вершини, одразу закриваються: жодна наступна вершина (x не менший)
    вже не потрапить у їхнє коло, тож перевіряти їх більше не треба.

    points - таблиця вершин: спочатку вхід у вихідному порядку (індекси 0..n-1),
    після build() - ще три вершини супер-трикутника.
    """
    def __init__(self, points: Iterable[Sequence[int]]):
        self.points: List[Pt] = as_points(points)
        self.n = len(self.points)
        self.super_verts: Optional[Tuple[int, int, int]] = None
        self._result: List[Triangle] = []
        self._built = False

    # ---- супер-трикутник ----
    def _build_super_triangle(self, order: List[int]) -> Triangle:
        P = self.points
        xmin = P[order[-1]].x
        xmax = P[order[0]].x
        ymin = ymax = P[order[-1]].y
        for i in order:
            y = P[i].y
            if y < ymin: ymin = y
            if y > ymax: ymax = y

        # усі точки в одній - без цього супер-трикутник виродиться
        dmax = max(xmax - xmin, ymax - ymin) or 1
        xmid = _half(xmax + xmin)
        ymid = _half(ymax + ymin)
        ia = len(P); P.append(Pt(xmid - SUPER_SCALE*dmax, ymid - dmax))
        ib = len(P); P.append(Pt(xmid, ymax + SUPER_SCALE*dmax))
        ic = len(P); P.append(Pt(xmid + SUPER_SCALE*dmax, ymid - dmax))
        self.super_verts = (ia, ib, ic)
        return Triangle.build(P, ia, ib, ic)

    # ---- вставка однієї вершини ----
    def _insert(self, vi: int, open_: List[Triangle], closed: List[Triangle]) -> None:
        p = self.points[vi]
        edges: List[int] = []
        # з хвоста, щоб видалення не зсувало ще не переглянуті елементи
        for j in range(len(open_) - 1, -1, -1):
            t = open_[j]
            dx = p.x - t.xc
            if dx > 0 and dx*dx > t.r:
                closed.append(t)
                del open_[j]
                continue
            dy = p.y - t.yc
            if dx*dx + dy*dy > t.r:
                continue
            edges.extend(t.edges())
            del open_[j]

        cavity = len(edges) // 2
        edges = dedupe_edges(edges)
        log.debug("vertex #%d (%d, %d): cavity edges %d, boundary %d, open %d, closed %d",
                  vi, p.x, p.y, cavity, len(edges) // 2, len(open_), len(closed))
        for j in range(len(edges) - 2, -1, -2):
            open_.append(Triangle.build(self.points, edges[j], edges[j + 1], vi))

    def build(self) -> List[Triangle]:
        """Побудувати тріангуляцію. Менше трьох вершин - порожній результат, не помилка."""
        if self._built:
            return self._result
        self._built = True
        if self.n < 3:
            log.debug("too few points to triangulate: %d", self.n)
            return self._result

        # x за спаданням; обходимо з хвоста, тобто x за зростанням
        order = sorted(range(self.n), key=lambda i: self.points[i].x, reverse=True)
        open_: List[Triangle] = [self._build_super_triangle(order)]
        closed: List[Triangle] = []

        for vi in reversed(order):
            self._insert(vi, open_, closed)

        closed.extend(open_)
        sv = set(self.super_verts)
        self._result = [t for t in closed if not t.touches(sv)]
        if not self._result and self.n == 3:
            self._result = self._collinear_triple()
        log.debug("triangulated %d points: %d triangles (%d before super-triangle removal)",
                  self.n, len(self._result), len(closed))
        return self._result

    def _collinear_triple(self) -> List[Triangle]:
        """
        Три колінеарні вершини: sweep їх не з'єднує (третя лежить поза будь-яким
        колом через перші дві), тож повертаємо один трикутник з bbox-колом.
        Три точки в одній - як і раніше, порожньо.
        """
        a, b, c = self.points[:3]
        if orient2d(a, b, c) != 0 or a == b == c:
            return []
        log.debug("three collinear points: bounding-box triangle")
        return [Triangle.build(self.points, 0, 1, 2)]

    def triangles(self) -> List[Triangle]:
        return self.build()

    def validate(self, eps: float = EPS) -> dict:
        return validate_triangles(self.points[:self.n], self.build(), eps, self.super_verts)


def _half(s: int) -> int:
    """Ціле s/2 з відкиданням дробової частини (до нуля), не floor."""
    return s // 2 if s >= 0 else -(-s // 2)


def triangulate(vertices: Iterable[Sequence[int]]) -> List[Triangle]:
    """Делоне-тріангуляція цілих 2D точок. Індекси у Triangle.v - позиції у вхідній послідовності."""
    return SweepDelaunay(vertices).build()


def validate_triangles(
    points: Sequence[Pt],
    triangles: Sequence[Triangle],
    eps: float = EPS,
    super_verts: Optional[Iterable[int]] = None,
) -> dict:
    """
    Перевірка тріангуляції:
      - жодна вершина не лежить строго всередині описаного кола (з допуском eps);
      - вершини кожного трикутника попарно різні (за індексом);
      - трикутники не торкаються супер-вершин;
      - кожне ребро належить не більше ніж двом трикутникам.
    Повертає словник з діагностикою (порожні списки = все ок).
    """
    sv: Set[int] = set(super_verts or ())
    bad_delaunay: List[Tuple[int, int]] = []
    super_refs: List[int] = []
    repeated: List[int] = []
    degenerate: List[int] = []
    edge_count: Dict[Edge, int] = {}

    for ti, t in enumerate(triangles):
        a, b, c = t.v
        if len({a, b, c}) != 3:
            repeated.append(ti)
        elif orient2d(*t.vertices()) == 0:
            degenerate.append(ti)
        if t.touches(sv):
            super_refs.append(ti)
        for u, w in ((a, b), (b, c), (c, a)):
            key = (min(u, w), max(u, w))
            edge_count[key] = edge_count.get(key, 0) + 1
        for vi, p in enumerate(points):
            if vi in t.v:
                continue
            if in_circumcircle(t.xc, t.yc, t.r, p, eps):
                bad_delaunay.append((ti, vi))

    return {
        "triangles": len(triangles),
        "bad_delaunay": bad_delaunay,        # [(tri_index, vertex_index), ...]
        "super_refs": super_refs,            # трикутники з супер-вершинами
        "repeated_vertices": repeated,       # трикутники з повтореним слотом
        "degenerate": degenerate,            # колінеарні (коло - bbox-наближення)
        "bad_edges": [(e, k) for e, k in edge_count.items() if k > 2],
    }
