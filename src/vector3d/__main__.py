# vector3d/__main__.py
import argparse

from vector3d.vector import Vector3D


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="vector3d",
        description="Compare precise and fast normalization of a 3D vector.",
    )
    parser.add_argument("x", type=float, nargs="?", default=2.0)
    parser.add_argument("y", type=float, nargs="?", default=3.0)
    parser.add_argument("z", type=float, nargs="?", default=4.0)
    args = parser.parse_args(argv)

    v = Vector3D(args.x, args.y, args.z)
    precise = v.normalize_precise()
    fast = v.normalize()

    print("\n=== Vector3D ===")
    print(f"Vector: {v}")
    print(f"Magnitude: {v.magnitude():.9f}")
    print(f"Precise normalize: {precise}")
    print(f"Fast normalize:    {fast}")
    print(f"Difference: {precise - fast}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
