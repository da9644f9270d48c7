""" Publish/subscribe example: the publisher stores ten values into a FIFO
    variable followed by a poison pill; each subscriber iterates over the
    variable with its own non-destructive cursor, so every subscriber sees
    every value.
"""

import argparse
import threading

import nws


def subscriber(name, workspace_name, host, port):

    with nws.connect(host, port) as server:
        workspace = server.use_workspace(workspace_name)

        for value in workspace.ifind('x', int):
            if value == -1:
                break
            print('%s: got %d' % (name, value))



def main():

    parser = argparse.ArgumentParser(description='NWS publish/subscribe example.')
    parser.add_argument('--host', default=None)
    parser.add_argument('--port', default=None, type=int)
    parser.add_argument('--subscribers', default=3, type=int)
    arguments = parser.parse_args()

    with nws.connect(arguments.host, arguments.port) as server:
        workspace = server.open_workspace(server.mktemp_workspace())
        workspace.declare('x', nws.FIFO)

        threads = list()
        for number in range(arguments.subscribers):
            name = 'Sub_%d' % (number)
            args = (name, workspace.name, server.host, server.port)
            thread = threading.Thread(target=subscriber, args=args)
            thread.start()
            threads.append(thread)

        for value in range(10):
            workspace.store('x', value)

        workspace.store('x', -1)

        for thread in threads:
            thread.join()


if __name__ == '__main__':
    main()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
