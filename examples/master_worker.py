""" Master/worker example: the master stores tasks into a FIFO variable,
    three worker threads, each with its own connection, fetch and square
    them, and the master collects the results.
"""

import argparse
import threading

import nws


def worker(name, workspace_name, host, port):

    with nws.connect(host, port) as server:
        workspace = server.use_workspace(workspace_name)
        result = workspace.variable('result')

        for task in workspace.ifetch('task', int):
            if task < 0:
                break
            result.store((name, task, task * task))



def main():

    parser = argparse.ArgumentParser(description='NWS master/worker example.')
    parser.add_argument('--host', default=None)
    parser.add_argument('--port', default=None, type=int)
    parser.add_argument('--tasks', default=30, type=int)
    parser.add_argument('--workers', default=3, type=int)
    arguments = parser.parse_args()

    with nws.connect(arguments.host, arguments.port) as server:
        workspace = server.open_workspace(server.mktemp_workspace())
        workspace.declare('task', nws.FIFO)

        threads = list()
        for number in range(arguments.workers):
            name = 'Worker_%d' % (number)
            args = (name, workspace.name, server.host, server.port)
            thread = threading.Thread(target=worker, args=args, daemon=True)
            thread.start()
            threads.append(thread)

        for task in range(arguments.tasks):
            workspace.store('task', task)

        for task in range(arguments.tasks):
            name, number, squared = workspace.fetch('result')
            print('%s: %d squared is %d' % (name, number, squared))

        # One poison pill per worker.

        for thread in threads:
            workspace.store('task', -1)

        for thread in threads:
            thread.join()


if __name__ == '__main__':
    main()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
