"""
This module defines the `UserValidator` service, which checks the username and
email of a submitted user and collects field level error messages.

Invalid input never raises: every problem is reported through the returned
`ValidationResult`. `validate_user_or_fail` is provided for callers that prefer
an exception.
"""

from collections.abc import Callable

from email_validator import EmailNotValidError
from email_validator import validate_email as _validate_email

from keystone.core.exceptions import ValidationFailed
from keystone.lang import local_provider
from keystone.schemas.response.validation import ValidationResult
from keystone.schemas.user.user import UserIn
from keystone.services import BaseService

MessageResolver = Callable[[str], str]


def is_empty(value: str | None) -> bool:
    """`None`, `""` and `"0"` count as empty input."""
    return not value or value == "0"


def is_email(value: str) -> bool:
    """
    Syntax-only email check. No DNS or deliverability lookups are made, local
    parts must be ASCII and domains need not be publicly routable.
    """
    try:
        _validate_email(
            value,
            check_deliverability=False,
            globally_deliverable=False,
            allow_smtputf8=False,
            # accepts the reserved `.test` TLD
            test_environment=True,
        )
    except EmailNotValidError:
        return False
    return True


class UserValidator(BaseService):
    """
    Validates `UserIn` payloads.

    Args:
        translator (MessageResolver | None, optional): Maps a fixed source message
            (ex. "Input required") to the text reported to the caller. Defaults
            to the translator for the configured `DEFAULT_LOCALE`.
    """

    def __init__(self, translator: MessageResolver | None = None) -> None:
        super().__init__()
        self._translator = translator

    def t(self, key: str) -> str:
        if self._translator is None:
            self._translator = local_provider().t
        return self._translator(key)

    def validate_user(self, user: UserIn) -> ValidationResult:
        """
        Checks that a username is present and that an email is present and well formed.

        Both fields are checked independently; a missing username never suppresses
        the email checks.

        Args:
            user (UserIn): The user to validate.

        Returns:
            ValidationResult: A frozen result; empty when the user is valid.
        """
        validation = ValidationResult()

        if is_empty(user.username):
            validation.add_error("username", self.t("Input required"))

        if is_empty(user.email):
            validation.add_error("email", self.t("Input required"))
        elif not is_email(user.email):
            validation.add_error("email", self.t("Invalid email address"))

        if validation.fails():
            self.logger.debug(f"User validation failed for fields: {list(validation)}")

        return validation.freeze()

    def validate_user_or_fail(self, user: UserIn) -> ValidationResult:
        """
        Same as `validate_user` but raises `ValidationFailed` when any error was recorded.
        """
        validation = self.validate_user(user)
        if validation.fails():
            raise ValidationFailed(validation, self.t("Please check your input"))
        return validation


def validate_user(user: UserIn, translator: MessageResolver | None = None) -> ValidationResult:
    return UserValidator(translator).validate_user(user)
