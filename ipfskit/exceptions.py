class BaseIPFSKitError(Exception):
    pass


class ValidationError(BaseIPFSKitError):
    """Raised when something does not pass a validation check."""


class ParseError(BaseIPFSKitError):
    pass
