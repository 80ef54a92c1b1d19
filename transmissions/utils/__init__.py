from .handles import normalize_handle

__all__ = ["normalize_handle"]
