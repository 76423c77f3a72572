from .delay import delay

__all__ = ("delay",)
