"""Command-line demos printing the results of linal operations."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, TextIO

from linal import Point, Vec2, Vec3, cross, dual_basis
from linal.config import DEFAULT_LOG_LEVEL
from linal.errors import LinalError
from linal.log import get_logger, setup_logging

logger = get_logger(__name__)

Printer = Callable[[str], None]


@dataclass(frozen=True)
class DemoSpec:
    name: str
    runner: Callable[[Printer], None]


def _vector2(out: Printer) -> None:
    a = Vec2(2.0, 4.0)
    b = Vec2(3.15, 3.0)
    k, n = 3.4, 8.0
    r, theta = 2.0, 3.14
    out(f"({a}) + ({b}) = ({a + b})")
    out(f"({b}) - ({a}) = ({b - a})")
    out(f"({a}) * {k} = ({a * k})")
    out(f"({b}) / {n} = ({b / n})")
    out(f"Vec2.zero() = ({Vec2.zero()})")
    out(f"from_polar({r}, {theta}) = ({Vec2.from_polar(r, theta)})")
    out(f"<({a}), ({b})> = {a.dot(b)}")
    out(f"({a}).cross({b}) = {cross(a, b)}")
    out(f"({a}).cross({k}) = ({cross(a, k)})")
    out(f"({a}).area({b}) = {a.area(b)}")
    out(f"({a}).length() = {a.length()}")
    out(f"({b}).ort() = ({b.ort()})")
    out(f"({a}).sqr() = ({a.sqr()})")
    out(f"({b}).sqrt() = ({b.sqrt()})")
    out(f"-({a}) = ({-a})")
    out(f"({a}) == ({b}) = {a == b}")
    b1, b2 = dual_basis((Vec2(2.0, 0.0), Vec2(3.0, 4.0)))
    out(f"dual_basis((2 0), (3 4)) = (({b1}), ({b2}))")
    text = "3.5 2.8"
    out(f"{text} --> ({Vec2.from_text(text)})")


def _vector3(out: Printer) -> None:
    a = Vec3(2.0, 4.0, 8.0)
    b = Vec3(3.15, 3.0, 3.3)
    k, n = 3.4, 8.0
    r, theta, phi = 2.0, 1.57, 3.14
    out(f"({a}) + ({b}) = ({a + b})")
    out(f"({b}) - ({a}) = ({b - a})")
    out(f"({a}) * {k} = ({a * k})")
    out(f"({b}) / {n} = ({b / n})")
    out(f"Vec3.zero() = ({Vec3.zero()})")
    out(f"from_spherical({r}, {theta}, {phi}) = ({Vec3.from_spherical(r, theta, phi)})")
    a1, a2, a3 = Vec3(2.0, 0.0, 0.0), Vec3(3.0, 4.0, 0.0), Vec3(3.0, 4.0, 5.0)
    b1, b2, b3 = dual_basis((a1, a2, a3))
    out(f"dual_basis(({a1}), ({a2}), ({a3})) = (({b1}), ({b2}), ({b3}))")
    out(f"<({a}), ({b})> = {a.dot(b)}")
    out(f"({a}).cross({b}) = ({cross(a, b)})")
    out(f"({a}).length() = {a.length()}")
    out(f"({b}).ort() = ({b.ort()})")
    out(f"({a}).sqr() = ({a.sqr()})")
    out(f"({b}).sqrt() = ({b.sqrt()})")
    out(f"-({a}) = ({-a})")
    out(f"({a}) == ({b}) = {a == b}")
    text = "3.5 2.8 2.71"
    out(f"{text} --> ({Vec3.from_text(text)})")


def _point(out: Printer) -> None:
    vec = Vec2(3.3, 5.5)
    a = Point(2.3, 4.5)
    b = Point.from_vec2(vec)
    out(f"a = ({a})")
    out(f"convert Vec2({vec}) to Point({b})")
    out(f"Point.zero() = ({Point.zero()})")
    out(f"({a}).position() = ({a.position()})")
    out(f"({a}) + ({vec}) = ({a + vec})")
    out(f"({a}) - ({vec}) = ({a - vec})")
    out(f"({a}) - ({b}) = ({a - b})")
    out(f"-({a}) = ({-a})")
    out(f"({a}) == ({b}) = {a == b}")
    text = "3.5 2.8"
    out(f"{text} --> ({Point.from_text(text)})")


DEMOS: dict[str, DemoSpec] = {
    spec.name: spec
    for spec in (
        DemoSpec("vector2", _vector2),
        DemoSpec("vector3", _vector3),
        DemoSpec("point", _point),
    )
}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the linal example programs.")
    parser.add_argument(
        "demo",
        nargs="?",
        choices=(*DEMOS, "all"),
        default="all",
        help="Which example to run.",
    )
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, help="Logging level (DEBUG, INFO, ...).")
    return parser.parse_args(argv)


def run(names: list[str], stream: TextIO | None = None) -> None:
    def out(line: str) -> None:
        print(line, file=stream)

    for name in names:
        logger.info("Running demo %s", name)
        out(f"== {name}")
        DEMOS[name].runner(out)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging(args.log_level)
    names = list(DEMOS) if args.demo == "all" else [args.demo]
    try:
        run(names)
    except LinalError as exc:
        logger.error("Demo failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
