from .branch import branch

__all__ = ("branch",)
