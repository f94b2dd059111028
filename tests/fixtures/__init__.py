from .registry import registry
from .user_fixture import UserFixture, UserRoleFixture

__all__ = ["UserFixture", "UserRoleFixture", "registry"]
