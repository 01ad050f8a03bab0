"""Translation errors surfaced to the UI."""


class TranslationError(Exception):
    """Base class for failures raised by translation engines and coordinators."""

    default_message = "Translation failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def user_message(self) -> str:
        """Message suitable for display in the error area."""
        return str(self)


class UnsupportedLanguagePairing(TranslationError):
    default_message = "The selected language pairing is not supported."


class UnableToIdentifyLanguage(TranslationError):
    default_message = "Unable to identify the source language."


class InternalError(TranslationError):
    default_message = "The translation engine reported an unknown status."


class TranslationFailed(TranslationError):
    """Wraps an engine or provisioning failure; the cause is chained."""
