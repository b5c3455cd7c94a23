# examples/main.py
"""
Зображення з кольоровими маркерами -> Делоне-тріангуляція центрів -> SVG з лініями.

    python examples/main.py map.png links.svg --border 0xFF9900 --size 16
"""
from __future__ import annotations

import argparse
import logging
import sys

from cg2d.links import write_svg
from cg2d.markers import DEFAULT_MARKER_COLOR, DEFAULT_MARKER_SIZE, parse_color, split_color
from cg2d.pipeline import links_from_image

log = logging.getLogger("cg2d.main")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Draw Delaunay links between colour markers.")
    parser.add_argument("input", help="вхідне зображення (PNG)")
    parser.add_argument("output", help="куди записати SVG")
    parser.add_argument("--border", type=parse_color, default=DEFAULT_MARKER_COLOR,
                        help="колір рамки маркера як ціле 0xRRGGBB (типово #FF9900)")
    parser.add_argument("--size", type=int, default=DEFAULT_MARKER_SIZE,
                        help="діаметр маркера в пікселях")
    parser.add_argument("--markers", action="store_true", help="малювати кола маркерів")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug-лог")
    args = parser.parse_args(argv)
    if args.size <= 0:
        parser.error("--size must be positive")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s.%(msecs)03d %(message)s",
        datefmt="%H:%M:%S",
    )

    log.info("Target color: rgb%s", split_color(args.border))
    log.info("Searching image for markers")
    try:
        image, markers, triangles, links = links_from_image(args.input, args.border, args.size)
    except OSError as e:
        log.error("cannot read %s: %s", args.input, e)
        return 1
    log.info("Found %d markers", len(markers))
    log.info("Found %d triangles", len(triangles))
    log.info("Drew %d links", len(links))

    height, width = image.shape[:2]
    log.info("Saving to %s", args.output)
    try:
        write_svg(args.output, links, width, height, href=args.input,
                  markers=markers if args.markers else ())
    except OSError as e:
        log.error("cannot write %s: %s", args.output, e)
        return 1
    log.info("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
