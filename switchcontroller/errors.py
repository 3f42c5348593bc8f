class SwitchControllerError(RuntimeError):
    """Base class for errors raised by this package."""
    pass


class TransportOpenError(SwitchControllerError):
    """Raised when the transport to the device could not be opened."""
    pass


class TransportIOError(SwitchControllerError):
    """Raised when writing to or flushing the transport fails."""
    pass
