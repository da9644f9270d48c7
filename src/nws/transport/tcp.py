""" Blocking TCP transport for the NWS protocol. A :class:`Connection` owns
    one socket; requests are buffered with :func:`Connection.write` and sent
    as a unit by :func:`Connection.flush`, responses are read with
    :func:`Connection.read_exact`.

    There is no timeout: a read blocks until the server answers or the
    connection goes away. Calling :func:`Connection.close` from another
    thread is the way to abandon a blocked read.
"""

import logging
import socket
import threading

from ..errors import ConnectError, ConnectionDropped, UnsupportedProtocol
from ..protocol import fields

logger = logging.getLogger(__name__)


class Connection:
    """ A single TCP connection to an NWS server at *host* and *port*. The
        connection is not established until :func:`open` is called.

        :ivar handshake: The four bytes the server sent during the handshake.
    """

    def __init__(self, host, port):

        self.host = host
        self.port = int(port)
        self.handshake = None
        self.socket = None

        self._closed = False
        self._outgoing = list()
        self._close_lock = threading.Lock()


    def __repr__(self):
        return 'Connection %s:%d' % (self.host, self.port)


    @property
    def is_open(self):
        return self.socket is not None and not self._closed


    def open(self):
        """ Connect to the server and perform the protocol handshake.
        """

        if self._closed:
            raise ConnectionDropped('connection was closed: ' + repr(self))

        address = (self.host, self.port)

        try:
            sock = socket.create_connection(address)
        except socket.gaierror as e:
            raise ConnectError('unable to connect to unknown host: ' + str(self.host)) from e
        except OSError as e:
            raise ConnectError('unable to connect to the NWS server at %s:%d' % address) from e

        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)

        self.socket = sock
        logger.debug('connected to %s:%d', self.host, self.port)

        try:
            self._handshake()
        except Exception:
            self.close()
            raise


    def _handshake(self):

        # Tell the server that we speak the cookie protocol.

        self.write(fields.HANDSHAKE)
        self.flush()

        handshake = self.read_exact(len(fields.HANDSHAKE))
        self.handshake = handshake

        if handshake == fields.OLD_PROTOCOL:
            raise UnsupportedProtocol('old/unsupported protocol: ' + repr(self))

        logger.debug('handshake reply %r from %s:%d', handshake, self.host, self.port)


    def _socket(self):

        sock = self.socket
        if sock is None or self._closed:
            raise ConnectionDropped('NWS server connection is closed: ' + repr(self))

        return sock


    def write(self, data):
        """ Queue *data* for the next :func:`flush`.
        """

        self._socket()
        self._outgoing.append(bytes(data))


    def flush(self):
        """ Send everything queued by :func:`write`.
        """

        sock = self._socket()
        outgoing = b''.join(self._outgoing)
        self._outgoing = list()

        try:
            sock.sendall(outgoing)
        except OSError as e:
            self.close()
            raise ConnectionDropped('NWS server connection dropped: ' + repr(self)) from e


    def read_exact(self, count):
        """ Block until exactly *count* bytes have arrived, and return them.
        """

        sock = self._socket()
        buffer = bytearray(count)
        view = memoryview(buffer)
        total = 0

        while total < count:
            try:
                received = sock.recv_into(view[total:], count - total)
            except OSError as e:
                self.close()
                raise ConnectionDropped('NWS server connection dropped: ' + repr(self)) from e

            if received == 0:
                self.close()
                raise ConnectionDropped('NWS server connection dropped: ' + repr(self))

            total += received

        return bytes(buffer)


    def close(self):
        """ Release the socket. Any read blocked in another thread fails
            with :class:`nws.errors.ConnectionDropped`, as does any later
            use of this connection.
        """

        with self._close_lock:
            if self._closed:
                return

            self._closed = True
            sock = self.socket

        self._outgoing = list()

        if sock is None:
            return

        # Shutting down first is what wakes up a recv() blocked elsewhere;
        # close() alone does not reliably do so.

        try:
            sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass

        sock.close()
        logger.debug('closed connection to %s:%d', self.host, self.port)


# end of class Connection


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
