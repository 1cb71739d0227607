# domain/errors.py


class InvalidArgumentError(ValueError):
    """Raised for a None endpoint, an unknown vertex or a negative edge length."""
