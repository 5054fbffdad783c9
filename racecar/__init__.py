"""Rendering-free core of a race car simulation: checkpoints, lap timing, button panel state, generation reports and car monitoring."""

__version__ = "0.1.0"
__all__ = [
    "checkpoint",
    "checkpoint_handler",
    "timer",
    "ui",
    "generation",
    "monitoring",
]