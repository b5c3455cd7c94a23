# examples/demo_sweep.py
from cg2d.sweep import SweepDelaunay, triangulate

if __name__ == "__main__":
    cases = [
        [(3, 0), (5, 5), (0, 2)],
        [(3, 0), (5, 5), (0, 2), (-1, -4)],
        [(3, 0), (5, 5), (0, 2), (-1, -4), (1, 4)],
        [(0, 0), (1, 1)],            # замало точок -> []
        [(0, 0), (1, 1), (2, 2)],    # колінеарні -> bbox-наближення кола
    ]
    for pts in cases:
        tris = triangulate(pts)
        print(f"{pts}: {len(tris)} triangles")
        for t in tris:
            print("   ", t)

    d = SweepDelaunay(cases[2])
    d.build()
    print("VALIDATION:", d.validate())
