# cg2d/predicates.py
from __future__ import annotations
from typing import Tuple

from .geom import Pt, sq_dist

def orient2d(a: Pt, b: Pt, c: Pt) -> int:
    """>0 - обхід a,b,c проти годинникової, <0 - за, 0 - колінеарні (точно, у цілих)."""
    return (b.x - a.x)*(c.y - a.y) - (b.y - a.y)*(c.x - a.x)

def circumcircle(a: Pt, b: Pt, c: Pt) -> Tuple[float, float, float]:
    """
    Центр (xc, yc) і квадрат радіуса r описаного кола трикутника a,b,c.

    Перетин серединних перпендикулярів. Знаменник G рахується в цілих,
    тож G == 0 рівно тоді, коли точки колінеарні. У цьому разі замість кола
    беремо bbox трьох точок: центр - центр коробки, r - квадрат половини
    діагоналі. Це наближення, а не справжнє коло; помилки не кидаємо.
    """
    A = b.x - a.x
    B = b.y - a.y
    C = c.x - a.x
    D = c.y - a.y
    E = A*(a.x + b.x) + B*(a.y + b.y)
    F = C*(a.x + c.x) + D*(a.y + c.y)
    G = 2 * (A*(c.y - b.y) - B*(c.x - b.x))

    if G == 0:
        minx = min(a.x, b.x, c.x)
        miny = min(a.y, b.y, c.y)
        dx = (max(a.x, b.x, c.x) - minx) / 2
        dy = (max(a.y, b.y, c.y) - miny) / 2
        return minx + dx, miny + dy, dx*dx + dy*dy

    xc = (D*E - B*F) / G
    yc = (A*F - C*E) / G
    return xc, yc, sq_dist(xc, yc, a)

def in_circumcircle(xc: float, yc: float, r: float, p: Pt, eps: float = 0.0) -> bool:
    """
    Чи лежить p строго всередині кола (xc, yc, r)?
    eps - відносний допуск: точки ближче ніж r*eps до межі вважаються «на колі».
    """
    return sq_dist(xc, yc, p) < r - abs(r)*eps
