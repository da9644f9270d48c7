""" Default connection parameters. The environment is consulted each time
    one of these functions is called, so changes to ``NWS_HOST`` or
    ``NWS_PORT`` take effect for the next connection without re-importing
    anything. Nothing here opens a connection; see :func:`nws.connect`.
"""

import os

from .errors import InvalidArgument


default_host = 'localhost'
default_port = 8765


def host():
    """ Return the default server hostname: the ``NWS_HOST`` environment
        variable if it is set, otherwise ``localhost``.
    """

    return os.environ.get('NWS_HOST', default_host)



def port():
    """ Return the default server port: the ``NWS_PORT`` environment
        variable if it is set, otherwise 8765.
    """

    found = os.environ.get('NWS_PORT')

    if found is None or found == '':
        return default_port

    try:
        found = int(found)
    except ValueError:
        raise InvalidArgument('NWS_PORT is not an integer: ' + repr(found))

    return found



def owner():
    """ Return the owner label sent when claiming a workspace.
    """

    return str(os.getpid())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
