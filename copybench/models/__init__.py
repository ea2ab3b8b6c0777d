from .base import CopyBenchBaseModel


__all__ = ["CopyBenchBaseModel"]
