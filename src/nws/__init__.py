""" Python client for NetWorkSpaces (NWS). An NWS server hosts named
    workspaces, each holding named variables; clients on any number of
    machines store values into those variables and fetch or find them
    again, which is enough to build task queues, publish/subscribe, and
    barriers between otherwise independent processes.

    A session starts with an explicit connection::

        import nws

        with nws.connect('localhost', 8765) as server:
            workspace = server.open_workspace('example')
            workspace.store('x', 1)
            workspace.fetch('x')
"""

# Utility components.

from . import config
from . import errors
from . import json

# Submodules used by multiple other components.

from . import protocol
from . import serializer
from . import transport

# Primary public-facing interfaces.

from .errors import (
    NwsError,
    ConnectError,
    UnsupportedProtocol,
    ConnectionDropped,
    FrameError,
    OperationError,
    DeclarationFailed,
    NoWorkspace,
    DeserializeError,
    InvalidArgument,
    NoSuchElement,
)

from .protocol.fields import FIFO, LIFO, MULTI, SINGLE
from .serializer import JsonSerializer, PickleSerializer, Serializer
from .server import Server, connect, open_workspace
from .variable import Cursor, Variable
from .workspace import Workspace


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
