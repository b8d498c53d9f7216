"""Device receiver implementations."""

from .simulated_light import SimulatedLight

__all__ = ["SimulatedLight"]
