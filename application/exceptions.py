"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""


class GatewayError(Exception):
    """Error raised by a remote data gateway.

    Raised when a call to the remote fitness-tracking service could not be
    completed: network failure, timeout, non-success status, or an
    unreadable payload. Adapters raise subclasses of this error so that
    services can tell remote failures apart from programming errors.
    """

    pass
