# geom2d.py
"""
geom2d - 2D point geometry package module
"""
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Import main components to expose them at package level
from domain.geometry.constants import EPSILON
from domain.geometry.point import Point

# Make them available when someone does 'import geom2d'
__all__ = [
    'EPSILON',
    'Point',
]

# This allows running the module directly
if __name__ == "__main__":
    from main import main
    main()
