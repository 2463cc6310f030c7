from .reduction import Reduction

__all__ = ("Reduction",)
