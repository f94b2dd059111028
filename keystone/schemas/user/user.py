from pydantic import ConfigDict

from keystone.schemas._keystone import _KeystoneModel


class UserIn(_KeystoneModel):
    """
    User data as submitted by a client. Presence and format are not enforced here;
    see `keystone.services.user.user_validator.UserValidator`.
    """

    username: str | None = None
    email: str | None = None
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "email": "alice@example.com",
            }
        },
    )
