from .user_validator import UserValidator, validate_user

__all__ = ["UserValidator", "validate_user"]
