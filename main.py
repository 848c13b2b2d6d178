#!/usr/bin/env python3
"""
geom2d demonstration.

Exercises every Point operation once and prints the results for manual
inspection. Nothing is asserted.
"""
__version__ = "1.0"

import logging
import math
from geom2d import Point

logger = logging.getLogger(__name__)


def main() -> None:
    """Main function to run the demonstration."""
    logger.info("Starting Point demonstration")

    p0 = Point()
    p1 = Point(1, 1)
    p2 = Point(1, 7)
    p3 = p1.model_copy()

    print("Hello, World!")
    print(f"p0 :{p0}")
    print(f"p1 :{p1}")
    print(f"p2 :{p2}")
    print(f"p2.x :{p2.x}")
    print(f"p2.y :{p2.y}")
    p2.x = 2
    print(f"p2.x = 2 :{p2}")
    p2.y = 3
    print(f"p2.y = 3 :{p2}")

    print(f"p1 + p2 :{p1 + p2}")
    print(f"p1 - p2 :{p1 - p2}")
    print(f"p1 * 2 :{p1 * 2}")
    print(f"p1 / 2 :{p1 / 2}")
    print(f"p2.norm() :{p2.norm()}")
    print(f"p3 = p1 :{p3}")
    print(f"p3 == p1 :{p3 == p1}")
    print(f"p2.model_copy() :{p2.model_copy()}")
    print(f"p2.norm() :{p2.norm()}")
    print(f"p2.normalize() :{p2.normalize()}")
    print(f"p2 :{p2}")
    print(f"p0.dist(p2) :{p0.dist(p2)}")
    print(f"p0.dist(p2, p1) :{p0.dist(p2, p1)}")
    print(f"p0.project(p2, p1) :{p0.project(p2, p1)}")
    print(f"p0.reflect(p2, p1) :{p0.reflect(p2, p1)}")
    print(f"p1.rotate(pi) :{p1.rotate(math.pi)}")

    logger.info("Point demonstration complete")


if __name__ == "__main__":
    main()
