class LinkError(Exception):
    pass


class LinkInitError(LinkError):
    """Raised when the serial port of the display can not be opened."""
    pass


class LinkIOError(LinkError):
    """Raised on serial failures while polling or reading the display."""
    pass
