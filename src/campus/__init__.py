"""Campus passages: floors, buildings and the passages connecting them."""

__version__ = "0.1.0"
