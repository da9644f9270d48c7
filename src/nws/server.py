""" The session layer. A :class:`Server` owns one connection to an NWS
    server, the value codec used by every workspace built on it, and the
    operations that act on workspaces as a whole. Workspaces refer back to
    their :class:`Server`; a :class:`Server` never tracks its workspaces.
"""

import logging
import threading

from . import config
from .errors import NoWorkspace, OperationError
from .protocol import fields
from .protocol import frame
from .protocol.value import ValueCodec
from .serializer import PickleSerializer
from .transport import Connection
from .workspace import Workspace

logger = logging.getLogger(__name__)


class Server:
    """ A connected session with the NWS server at *host* and *port*; both
        default to the values in :mod:`nws.config`. Values that are not byte
        strings are encoded with *serializer*, a
        :class:`nws.serializer.PickleSerializer` if none is given.

        The connection is established, and the handshake performed, before
        the constructor returns. One request is in flight at a time: a
        blocking retrieval holds the session until the server answers or
        :func:`close` is called from another thread.
    """

    def __init__(self, host=None, port=None, serializer=None):

        if host is None:
            host = config.host()
        if port is None:
            port = config.port()
        if serializer is None:
            serializer = PickleSerializer()

        self.codec = ValueCodec(serializer)
        self.connection = Connection(host, port)
        self._request_lock = threading.Lock()

        self.connection.open()


    def __enter__(self):
        return self


    def __exit__(self, *exc_info):
        self.close()


    def __repr__(self):
        return 'Server %s:%d' % (self.host, self.port)


    @property
    def host(self):
        return self.connection.host


    @property
    def port(self):
        return self.connection.port


    @property
    def handshake(self):
        return self.connection.handshake


    def close(self):
        """ Close the connection. Pending and future operations on this
            session, and on every workspace built on it, fail with
            :class:`nws.errors.ConnectionDropped`.
        """

        self.connection.close()


    # --- request/response exchanges ---

    def _exchange(self, request_fields, read):

        request = frame.pack_request(request_fields)

        with self._request_lock:
            logger.debug('%r request: %s', self, request_fields[0])
            self.connection.write(request)
            self.connection.flush()

            try:
                return read(self.connection)
            except BaseException:
                # A response that was not read to the end leaves the position
                # in the byte stream unknown; nothing else can be read from
                # this connection.
                self.connection.close()
                raise


    def status(self, request_fields):
        """ Send a request and return the status code of the response.
        """

        return self._exchange(request_fields, frame.read_status)


    def retrieve(self, request_fields):
        """ Send a request and return the complete
            :class:`nws.protocol.Response`.
        """

        return self._exchange(request_fields, frame.read_response)


    def iretrieve(self, request_fields):
        """ Send a cursor request and return the complete
            :class:`nws.protocol.Response`, with a parsed cookie.
        """

        return self._exchange(request_fields, frame.read_cursor_response)


    # --- workspace management ---

    def delete_workspace(self, name):
        """ Delete the workspace *name* and every variable in it.
        """

        status = self.status((fields.DELETE_WS, name))
        if status != 0:
            raise OperationError("deletion of workspace '%s' failed" % (name))


    def list_workspaces(self):
        """ Return the server's listing of all workspaces, verbatim.
        """

        response = self.retrieve((fields.LIST_WSS,))
        if not response.ok:
            raise OperationError('listing workspaces failed')

        return response.payload.decode('utf-8')


    def mktemp_workspace(self, template='__pyws__%d'):
        """ Ask the server for a unique workspace name built from *template*.
            The workspace is not opened; pass the returned name to
            :func:`open_workspace` or :func:`use_workspace`.
        """

        response = self.retrieve((fields.MKTEMP_WS, template))
        if not response.ok:
            raise OperationError("mktemp with template '%s' failed" % (template))

        return response.payload.decode('utf-8')


    def open_workspace(self, name, persistent=False, create=True):
        """ Open the workspace *name*, claiming ownership of it unless
            another client already owns it. Workspaces are deleted when
            their owner disconnects, unless *persistent* is True. The
            workspace is created if it does not exist; with *create* set
            to False, :class:`nws.errors.NoWorkspace` is raised instead.
        """

        request = (fields.OPEN_WS, name, config.owner(), _flag(persistent), _flag(create))
        return self._workspace(name, request)


    def use_workspace(self, name, persistent=False, create=True):
        """ Same as :func:`open_workspace`, but never claim ownership.
        """

        request = (fields.USE_WS, name, '', _flag(persistent), _flag(create))
        return self._workspace(name, request)


    def _workspace(self, name, request):

        status = self.status(request)
        if status != 0:
            raise NoWorkspace("workspace '%s' doesn't exist" % (name))

        return Workspace(self, name)


# end of class Server



def _flag(value):
    if value:
        return fields.YES
    return fields.NO



def connect(host=None, port=None, serializer=None):
    """ Return a new, connected :class:`Server` session. Each call opens a
        new connection; sessions are never shared or cached.
    """

    return Server(host, port, serializer)



def open_workspace(name, host=None, port=None, persistent=False, create=True, use=False, serializer=None):
    """ Connect to a server and open (or, if *use* is True, use) the
        workspace *name* in one step. The returned :class:`Workspace` owns
        its session; call :func:`Workspace.close` when finished. The session
        is closed again if the workspace cannot be opened.
    """

    server = Server(host, port, serializer)

    try:
        if use:
            return server.use_workspace(name, persistent, create)
        else:
            return server.open_workspace(name, persistent, create)
    except Exception:
        server.close()
        raise


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
