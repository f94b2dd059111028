from .user import UserIn

__all__ = ["UserIn"]
