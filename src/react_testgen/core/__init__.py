"""Core application package."""

from .application import ReactTestgenApp

__all__ = [
    'ReactTestgenApp',
]
