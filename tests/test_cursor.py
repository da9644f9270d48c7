import threading
import time
import pytest

import nws
from nws import variable as cursors


def fill(workspace, name, count, mode=nws.FIFO):
    workspace.declare(name, mode)
    for number in range(count):
        workspace.store(name, number)


def test_ifind_try(workspace):

    fill(workspace, 'iterator', 10)

    for attempt in range(3):
        cursor = workspace.ifind_try('iterator')
        for number in range(10):
            assert cursor.has_next()
            assert cursor.next() == number
        assert not cursor.has_next()

    # Nothing was consumed.

    assert workspace.find('iterator') == 0


def test_ifetch_try(workspace):

    fill(workspace, 'iterator', 10)

    cursor = workspace.ifetch_try('iterator')
    assert cursor.destructive
    assert list(cursor) == list(range(10))

    assert workspace.fetch_try('iterator') is None
    assert not workspace.ifind_try('iterator').has_next()


def test_state_machine(run_nwsd, workspace):

    fill(workspace, 'states', 2)

    cursor = workspace.ifind_try('states')
    assert cursor.state == cursors.FRESH
    assert cursor.cookie == nws.protocol.Cookie()

    before = len(run_nwsd.requests)

    assert cursor.has_next()
    assert cursor.state == cursors.PEEKED

    # A peeked cursor answers from its buffer.

    assert cursor.has_next()
    assert cursor.has_next()
    assert len(run_nwsd.requests) == before + 1

    assert cursor.next() == 0
    assert cursor.state == cursors.FRESH
    assert cursor.cookie != nws.protocol.Cookie()

    # next() without a preceding has_next() fetches on its own.

    assert cursor.next() == 1
    assert len(run_nwsd.requests) == before + 2

    assert not cursor.has_next()
    assert cursor.state == cursors.EXHAUSTED

    with pytest.raises(nws.NoSuchElement):
        cursor.next()

    with pytest.raises(StopIteration):
        next(cursor)


def test_cursor_wire_format(run_nwsd, workspace):

    fill(workspace, 'wire', 2)

    cursor = workspace.ifind_try('wire')
    cursor.next()

    fields = run_nwsd.requests[-1]
    assert fields == [b'ifindTry', workspace.name.encode(), b'wire', b'', b'0' * 20]

    first = cursor.cookie
    cursor.next()

    # The second request replays the cookie issued with the first value.

    fields = run_nwsd.requests[-1]
    assert len(first.var_id) == 20
    assert fields[3] == first.var_id
    assert fields[4] == b'%020d' % (first.index)


def test_reset(workspace):

    fill(workspace, 'replay', 5)

    cursor = workspace.ifind_try('replay')
    first = list(cursor)

    cursor.reset()
    assert cursor.state == cursors.FRESH
    second = list(cursor)

    assert first == second == [0, 1, 2, 3, 4]

    # Reset also discards a buffered value.

    cursor.reset()
    assert cursor.has_next()
    cursor.reset()
    assert cursor.next() == 0


def test_destructive_reset(workspace):

    fill(workspace, 'consumed', 4)

    cursor = workspace.ifetch_try('consumed')
    assert cursor.next() == 0
    assert cursor.next() == 1

    cursor.reset()
    assert list(cursor) == [2, 3]


def test_exhausted_cursor_sees_new_values(workspace):

    fill(workspace, 'growing', 2)

    cursor = workspace.ifind_try('growing')
    assert list(cursor) == [0, 1]

    workspace.store('growing', 2)

    # The position is kept while exhausted; only the new value appears.

    assert list(cursor) == [2]


def test_independent_cursors(workspace):

    fill(workspace, 'shared', 3)

    one = workspace.ifind_try('shared')
    two = workspace.ifind_try('shared')

    assert one.next() == 0
    assert one.next() == 1
    assert two.next() == 0
    assert one.next() == 2
    assert two.next() == 1


def test_single_cursor(workspace):

    workspace.declare('latest', nws.SINGLE)
    workspace.store('latest', 'a')

    cursor = workspace.ifind_try('latest')
    assert list(cursor) == ['a']

    workspace.store('latest', 'b')
    workspace.store('latest', 'c')

    assert list(cursor) == ['c']

    cursor.reset()
    assert list(cursor) == ['c']


def test_raw_values(workspace):

    workspace.store('raw', b'one')
    workspace.store('raw', b'')
    workspace.store('raw', b'three')

    assert list(workspace.ifind_try('raw')) == [b'one', b'', b'three']


def test_unsupported_modes(workspace):

    workspace.declare('stack', nws.LIFO)
    workspace.declare('bag', nws.MULTI)

    for name in ('stack', 'bag'):
        for method in (workspace.ifind, workspace.ifind_try, workspace.ifetch, workspace.ifetch_try):
            with pytest.raises(nws.InvalidArgument):
                method(name)

    # Once deleted, the name is free to be declared again in another mode.

    workspace.delete_var('stack')
    workspace.declare('stack', nws.FIFO)
    workspace.ifind_try('stack')


def test_invalid_operation(workspace):

    with pytest.raises(nws.InvalidArgument):
        nws.Cursor(workspace, 'x', 'fetch')


def test_hint(workspace):

    workspace.store('typed', 1)
    workspace.store('typed', 'two')

    cursor = workspace.ifind_try('typed', int)
    assert cursor.next() == 1

    with pytest.raises(nws.DeserializeError):
        cursor.next()

    # The undecodable value was still consumed from the cursor's point of
    # view; iteration carries on past it.

    assert not cursor.has_next()


def test_blocking_ifetch(run_nwsd, workspace):

    workspace.declare('tasks', nws.FIFO)
    results = list()

    def worker():
        with nws.connect(run_nwsd.host, run_nwsd.port) as server:
            tasks = server.use_workspace(workspace.name).ifetch('tasks')
            for task in tasks:
                results.append(task)
                if task == 'stop':
                    break

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()

    for task in ('one', 'two', 'stop'):
        time.sleep(0.05)
        workspace.store('tasks', task)

    thread.join(5)

    assert not thread.is_alive()
    assert results == ['one', 'two', 'stop']


def test_blocking_ifind(run_nwsd, workspace):

    workspace.declare('news', nws.FIFO)
    workspace.store('news', 'first')
    results = list()

    def subscriber():
        with nws.connect(run_nwsd.host, run_nwsd.port) as server:
            news = server.use_workspace(workspace.name).ifind('news')
            results.append(news.next())
            results.append(news.next())

    thread = threading.Thread(target=subscriber, daemon=True)
    thread.start()

    time.sleep(0.2)
    assert results == ['first']

    workspace.store('news', 'second')
    thread.join(5)

    assert results == ['first', 'second']

    # Subscribers never consume.

    assert workspace.find('news') == 'first'


def test_repr(workspace):

    cursor = workspace.ifind_try('x')
    assert 'ifindTry' in repr(cursor)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
