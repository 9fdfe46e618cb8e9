"""
Type definitions used across layers
"""

from enum import StrEnum

# --- NOTE The domain layer has its own Color enum (src/chess/pieces.py). These string versions are what travels
# --- through the API / Service / DB layers, so they serialize to readable values.


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"
