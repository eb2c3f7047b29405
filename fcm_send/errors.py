class FcmSendError(Exception):
    """Base class for every error that ends a run."""


class ConfigError(FcmSendError):
    """Missing or invalid command line arguments."""


class AuthError(FcmSendError):
    """The credential could not be loaded or the token exchange failed."""


class CredentialNotFoundError(AuthError):
    pass


class CredentialParseError(AuthError):
    pass


class TransportError(FcmSendError):
    """The request to the messaging endpoint failed at the network layer."""
