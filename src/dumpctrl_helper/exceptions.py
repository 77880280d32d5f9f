class InvalidEndpointError(ValueError):
    """Raised when a bridge URL can not be turned into host and port."""
    pass
