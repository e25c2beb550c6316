"""Input validation for mime type registration."""


class RegistrationError(ValueError):
    """Required registration argument missing."""

    pass


class MediaTypeError(ValueError):
    """Media type string could not be parsed."""

    pass


def strip_dot(extension: str) -> str:
    """Remove a single leading dot from an extension."""
    return extension[1:] if extension.startswith(".") else extension


def validate_text_type(mime: str, extension: str) -> tuple[str, str]:
    """Validate text type registration arguments.

    Args:
        mime: Media type to register
        extension: File extension, with or without a leading dot

    Returns:
        Tuple of (mime, undotted extension)

    Raises:
        RegistrationError: If either argument is empty
    """
    extension = strip_dot(extension)
    if not mime or not extension:
        raise RegistrationError("mime and extension arguments must not be empty")
    return mime, extension
