# cg2d/mesh.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .geom import Pt, precedes
from .predicates import circumcircle

Edge = Tuple[int, int]   # канонічне ребро (індекси у таблиці точок)


def canonical_edge(points: Sequence[Pt], i: int, j: int) -> Edge:
    """Впорядкувати кінці ребра за координатами: менший (x, потім y) - першим."""
    if precedes(points[i], points[j]):
        return i, j
    return j, i


@dataclass(eq=False)
class Triangle:
    """
    Трикутник тріангуляції.
    v: три індекси вершин у таблиці points у тому порядку, в якому їх передали.
    xc, yc: центр описаного кола; r: квадрат радіуса. Рахуються один раз у build().
    Рівність - ідентичність об'єкта: два трикутники з однаковими координатами,
    але різними слотами вершин, це різні трикутники.
    """
    v: Tuple[int, int, int]
    xc: float
    yc: float
    r: float
    points: Sequence[Pt] = field(repr=False)

    @classmethod
    def build(cls, points: Sequence[Pt], ia: int, ib: int, ic: int) -> "Triangle":
        xc, yc, r = circumcircle(points[ia], points[ib], points[ic])
        return cls((ia, ib, ic), xc, yc, r, points)

    def vertices(self) -> Tuple[Pt, Pt, Pt]:
        a, b, c = self.v
        return self.points[a], self.points[b], self.points[c]

    def edges(self) -> Tuple[int, int, int, int, int, int]:
        """Три канонічні ребра (A,B), (B,C), (C,A) пласким кортежем з 6 індексів."""
        a, b, c = self.v
        p = self.points
        return canonical_edge(p, a, b) + canonical_edge(p, b, c) + canonical_edge(p, c, a)

    def edge_pairs(self) -> List[Edge]:
        e = self.edges()
        return [(e[0], e[1]), (e[2], e[3]), (e[4], e[5])]

    def touches(self, verts) -> bool:
        return any(i in verts for i in self.v)

    def __str__(self) -> str:
        a, b, c = self.vertices()
        return (f"A({a.x},{a.y}) B({b.x},{b.y}) C({c.x},{c.y}) "
                f"X{self.xc:8.3f} Y{self.yc:8.3f} R{self.r:8.3f}")


def dedupe_edges(edges: Sequence[int]) -> List[int]:
    """
    Межа порожнини: прибрати ребра, що зустрічаються двічі.

    edges - пласка послідовність індексів, пари (p, q) поспіль.
    Йдемо з хвоста; для кожного ребра шукаємо найближчий збіг раніше у списку
    (у будь-якій орієнтації, порівняння за індексом, не за координатами).
    Знайшли - видаляємо обидва. Решта йде у вихід у вихідному порядку.
    """
    out = list(edges)
    if len(out) % 2:
        raise ValueError("edge list must have even length")
    j = len(out) - 2
    while j >= 0:
        a, b = out[j], out[j + 1]
        for i in range(j - 2, -1, -2):
            m, n = out[i], out[i + 1]
            if (a == m and b == n) or (a == n and b == m):
                del out[j:j + 2]
                del out[i:i + 2]
                # ребро перед j зсунулось на дві позиції вліво
                j -= 2
                break
        j -= 2
    return out
