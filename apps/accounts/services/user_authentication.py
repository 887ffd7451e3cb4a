"""Staff login service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Check staff credentials and stamp ``last_login``.

    The email lookup is case-insensitive. Unknown email and wrong password
    raise the same error so the response does not reveal which accounts exist.

    Args:
        email: Login email
        password: Plain password

    Returns:
        The authenticated User

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
        InactiveAccountError: Account has been disabled by an admin
    """
    user = (
        User.objects
        .select_for_update()
        .filter(email__iexact=email)
        .first()
    )

    if user is None or not user.check_password(password):
        logger.warning("Failed login for %s", email)
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        logger.warning("Login attempt on disabled account %s", user.id)
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user
