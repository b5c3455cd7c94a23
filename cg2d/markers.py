"""
Пошук кольорових маркерів на растрі - джерело вершин для тріангуляції.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .geom import Pt

log = logging.getLogger(__name__)

DEFAULT_MARKER_COLOR = 0xFF9900
DEFAULT_MARKER_SIZE = 16


@dataclass(frozen=True)
class Rect:
    """Напіввідкритий прямокутник [min_x, max_x) x [min_y, max_y)."""
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    def width(self) -> int:
        return self.max_x - self.min_x

    def height(self) -> int:
        return self.max_y - self.min_y

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y

    def center(self) -> Pt:
        return Pt(self.min_x + self.width() // 2, self.min_y + self.height() // 2)


def split_color(color: int) -> Tuple[int, int, int]:
    """0xRRGGBB -> (r, g, b)."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def parse_color(text: str) -> int:
    """Колір як ціле з префіксом основи: "0xFF9900", "16750848", "0o77"."""
    value = int(text, 0)
    if not 0 <= value <= 0xFFFFFF:
        raise ValueError(f"colour out of range: {text}")
    return value


def load_rgb(path: str) -> np.ndarray:
    """Прочитати зображення як масив (H, W, 3) uint8. PNG matplotlib віддає float у [0, 1]."""
    import matplotlib.image as mpimg

    img = mpimg.imread(path)
    if img.ndim == 2:
        img = np.stack([img, img, img], axis=-1)
    img = img[..., :3]
    if np.issubdtype(img.dtype, np.floating):
        img = np.rint(img * 255.0)
    return img.astype(np.uint8)


def find_markers(image: np.ndarray, color: int = DEFAULT_MARKER_COLOR,
                 size: int = DEFAULT_MARKER_SIZE) -> List[Rect]:
    """
    Маркери - пікселі точно заданого кольору (альфа ігнорується).

    Пікселі переглядаються рядок за рядком; кожен збіг, що не лежить у вже
    знайденому прямокутнику, відкриває новий маркер розміром size x size,
    який починається з цього пікселя (верхня кромка кільця маркера).
    """
    if image.ndim != 3 or image.shape[2] < 3:
        raise ValueError(f"expected (H, W, 3|4) image, got shape {image.shape}")
    target = np.array(split_color(color), dtype=image.dtype)
    mask = np.all(image[..., :3] == target, axis=-1)

    half = size // 2
    found: List[Rect] = []
    # argwhere віддає (y, x) у порядку рядків
    for y, x in np.argwhere(mask):
        x = int(x); y = int(y)
        if any(r.contains(x, y) for r in found):
            continue
        found.append(Rect(x - half + 1, y, x + half + 1, y + size))
    log.debug("matched %d pixels, %d markers", int(mask.sum()), len(found))
    return found


def marker_centers(image: np.ndarray, color: int = DEFAULT_MARKER_COLOR,
                   size: int = DEFAULT_MARKER_SIZE) -> List[Pt]:
    return [r.center() for r in find_markers(image, color, size)]
