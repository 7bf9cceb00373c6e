"""Application error types."""


class DataStoreError(Exception):
    """Raised when the document store rejects or fails an operation."""


class ImageProviderError(Exception):
    """Raised when the random image provider cannot supply an image URL."""


class LoginRequiredError(Exception):
    """Raised when a protected route is requested without a session user."""
