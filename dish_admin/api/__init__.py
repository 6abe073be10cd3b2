from . import dishes

__all__ = ["dishes"]
