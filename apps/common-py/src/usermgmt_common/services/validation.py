"""Field-level validation for users."""

from email_validator import EmailNotValidError, validate_email

from usermgmt_common.models.user import FieldError, User

NAME_REQUIRED = "Name is required."
EMAIL_REQUIRED = "Email is required."
EMAIL_INVALID = "Email is not a valid email address."


def validate_user(user: User) -> list[FieldError]:
    """Check a user's name and email before it is stored.

    Args:
        user: User to check

    Returns:
        List of field errors, empty when the user is valid
    """
    errors: list[FieldError] = []

    if not user.name.strip():
        errors.append(FieldError(property_name="name", error_message=NAME_REQUIRED))

    if not user.email.strip():
        errors.append(FieldError(property_name="email", error_message=EMAIL_REQUIRED))
    elif not _is_valid_email(user.email):
        errors.append(FieldError(property_name="email", error_message=EMAIL_INVALID))

    return errors


def _is_valid_email(email: str) -> bool:
    # Syntax only; no DNS lookups.
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True
