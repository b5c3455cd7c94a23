from __future__ import annotations
from dataclasses import dataclass
from operator import index
from typing import Iterable, List, Sequence

EPS = 1e-9         # відносний допуск для перевірок кола (validate)
SUPER_SCALE = 20   # у скільки разів супер-трикутник більший за bbox

@dataclass(frozen=True)
class Pt:
    """Вершина з цілими координатами. Ідентичність - індекс у таблиці точок, не координати."""
    x: int
    y: int
    def __iter__(self):
        yield self.x; yield self.y

def as_points(points: Iterable[Sequence[int]]) -> List[Pt]:
    """
    Привести вхід до списку Pt (нова таблиця на кожен виклик).
    Координати мають бути цілими: int, numpy-цілі тощо (через operator.index).
    """
    out: List[Pt] = []
    for i, p in enumerate(points):
        if isinstance(p, Pt):
            out.append(p)
            continue
        coords = tuple(p)
        if len(coords) != 2:
            raise ValueError(f"point #{i}: expected 2 coordinates, got {len(coords)}")
        out.append(Pt(index(coords[0]), index(coords[1])))
    return out

def precedes(a: Pt, b: Pt) -> bool:
    """Канонічний порядок кінців ребра: x за зростанням, потім y."""
    return a.x < b.x or (a.x == b.x and a.y < b.y)

def sq_dist(x: float, y: float, p: Pt) -> float:
    dx = p.x - x
    dy = p.y - y
    return dx*dx + dy*dy
