import itertools
import pytest

import nws
import nwsd


_workspace_names = itertools.count(1)


@pytest.fixture(scope="session")
def run_nwsd():

    server = nwsd.Server()

    yield server

    server.stop()


@pytest.fixture
def legacy_nwsd():

    server = nwsd.Server(legacy=True)

    yield server

    server.stop()


@pytest.fixture
def session(run_nwsd):

    server = nws.connect(run_nwsd.host, run_nwsd.port)

    yield server

    server.close()


@pytest.fixture
def workspace(session):

    # Each test gets its own workspace so that leftover values from one
    # test never leak into the next.

    name = 'unittest %d' % (next(_workspace_names))
    workspace = session.open_workspace(name)

    yield workspace

    try:
        session.delete_workspace(name)
    except nws.NwsError:
        pass


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
