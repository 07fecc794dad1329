"""
Flappy Bird dashboard widget: a tap-to-flap arcade game rendered with pygame.
"""

from .widget import metadata, render

__all__ = ["metadata", "render"]
