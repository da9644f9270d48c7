""" Exception classes raised by the NWS client. Every exception raised
    deliberately by this package is a subclass of :class:`NwsError`; errors
    from the operating system are translated at the transport boundary and
    chained to the original exception.
"""


class NwsError(Exception):
    """ Base class for all NWS client errors.
    """


class ConnectError(NwsError):
    """ The server could not be reached: unknown host, refused connection,
        or any other failure while establishing the TCP connection.
    """


class UnsupportedProtocol(NwsError):
    """ The server answered the handshake with the legacy protocol token.
    """


class ConnectionDropped(NwsError):
    """ The connection closed, locally or by the peer, before a complete
        response arrived. The connection cannot be used again.
    """


class FrameError(NwsError):
    """ A fixed-width numeric field could not be encoded or decoded.
    """


class OperationError(NwsError):
    """ The server answered a request with a nonzero status. The protocol
        does not say why; for the non-blocking retrieval operations this
        means there was no value available.
    """


class DeclarationFailed(OperationError):
    """ A variable declaration was rejected, typically because the variable
        already exists with a different mode.
    """


class NoWorkspace(OperationError):
    """ The workspace does not exist and creation was not requested.
    """


class DeserializeError(NwsError):
    """ A retrieved payload could not be turned back into a value.
    """


class InvalidArgument(NwsError, ValueError):
    """ A local precondition failed; nothing was sent to the server.
    """


class NoSuchElement(NwsError, LookupError):
    """ A cursor was asked for a value it does not have.
    """


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
