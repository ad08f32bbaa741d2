"""Generate sample decompositions as JSON.

Decomposes a handful of reference polygons:
  - a square and a rectangle (single rectangle each)
  - two L-shapes
  - a thin triangle (border cells merged)
  - a pentagon refined with divide_rectangles

Each polygon is written to samples/<name>.json with its hull, inscribed
rectangle, grid rectangles and, where a min_area is given, the refined set.
"""

import json
import logging
from pathlib import Path

from rectangulate import approximate, construct

SAMPLES_DIR = Path(__file__).resolve().parent / "samples"

SAMPLES = [
    ("square_10x10", [(0, 0), (10, 0), (10, 10), (0, 10)], None),
    ("rect_30x18", [(0, 0), (30, 0), (30, 18), (0, 18)], None),
    ("l_shape_20", [(0, 0), (20, 0), (20, 10), (10, 10), (10, 20), (0, 20)], 50),
    ("l_shape_arm", [(0, 0), (50, 0), (50, 4), (40, 4), (40, 40), (0, 40)], 100),
    ("thin_triangle", [(0, 0), (64, 0), (0, 8)], None),
    ("pentagon", [(20, 0), (40, 14), (32, 38), (8, 38), (0, 14)], 60),
]


def write_sample(name: str, points: list, min_area):
    """Decompose *points* and save the result as JSON."""
    handle = construct(points)
    data = handle.to_dict()
    data["name"] = name
    data["grid"] = [r.to_dict() for r in handle.grid_rectangles]
    if min_area is not None:
        data["min_area"] = min_area
        data["refined"] = [r.to_dict() for r in approximate(points, min_area)]

    filepath = SAMPLES_DIR / f"{name}.json"
    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
    print(f"  Created: {filepath.name}  ({len(data['rectangles'])} rectangles)")
    return filepath


def main():
    logging.basicConfig(level=logging.INFO)
    SAMPLES_DIR.mkdir(exist_ok=True)
    print("Generating sample decompositions...\n")

    for name, points, min_area in SAMPLES:
        write_sample(name, points, min_area)

    print(f"\nAll {len(SAMPLES)} samples saved to: {SAMPLES_DIR}")


if __name__ == "__main__":
    main()
