"""Root of the registry's exception hierarchy."""


class RegistryError(Exception):
    """Base for every error raised by the registry domain.

    Catching RegistryError separates rejected registry operations from
    programming errors and infrastructure failures. Coded subclasses live
    in src.domain.errors.
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
