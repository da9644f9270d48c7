""" The babelfish is a long-running translation service for the NWS web
    interface: it fetches values stored into the 'food' variable of its
    workspace, renders each one as text, and stores the text as UTF-8 bytes
    into 'doof'. Clients that cannot decode Python values themselves can use
    it to see what another client stored.
"""

import argparse
import logging

from . import config
from .errors import DeserializeError
from .server import open_workspace

logger = logging.getLogger(__name__)

default_workspace = 'Python babelfish'
maximum_length = 1000


def translate(value):
    """ Return the text rendering of *value* that the babelfish stores.
    """

    if isinstance(value, bytes):
        text = value.decode('utf-8', errors='replace')
    else:
        text = str(value)

    if len(text) > maximum_length:
        text = text[:maximum_length] + '[WARNING: output truncated]'
    elif len(text) == 0:
        text = '""'

    return text



def serve(workspace, limit=None):
    """ Translate values until the connection goes away, or until *limit*
        values have been translated.
    """

    translated = 0

    while limit is None or translated < limit:
        translated += 1

        try:
            value = workspace.fetch('food')
        except DeserializeError as e:
            text = str(e)
            if text == '':
                text = '[Error: unable to deserialize object]'
        else:
            text = translate(value)

        workspace.store('doof', text.encode('utf-8'))



def main(argv=None):

    parser = argparse.ArgumentParser(description='NWS babelfish translation service.')
    parser.add_argument('--host', default=None, help='NWS server hostname (default: %s)' % (config.host()))
    parser.add_argument('--port', default=None, type=int, help='NWS server port (default: %d)' % (config.port()))
    parser.add_argument('--workspace', default=default_workspace, help='workspace to serve (default: %(default)s)')
    parser.add_argument('--verbose', '-v', action='store_true', help='log debugging information')
    arguments = parser.parse_args(argv)

    level = logging.DEBUG if arguments.verbose else logging.INFO
    logging.basicConfig(level=level, format='%(asctime)s %(name)s %(levelname)s %(message)s')

    workspace = open_workspace(arguments.workspace, arguments.host, arguments.port)
    logger.info('serving %r', workspace)

    try:
        serve(workspace)
    finally:
        workspace.close()


if __name__ == '__main__':
    main()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
