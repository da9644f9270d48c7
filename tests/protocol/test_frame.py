import io
import pytest

import nws
from nws.protocol import frame


class Stream:
    """ Minimal stand-in for a Connection, reading from a byte string.
    """

    def __init__(self, data):
        self.buffer = io.BytesIO(data)

    def read_exact(self, count):
        data = self.buffer.read(count)
        if len(data) != count:
            raise nws.ConnectionDropped('short read')
        return data

    def remaining(self):
        return self.buffer.read()


def test_pack_number():

    assert frame.pack_number(0) == b'0' * 20
    assert frame.pack_number(42) == b'00000000000000000042'
    assert frame.pack_number(7, 4) == b'0007'
    assert frame.pack_number(99999999999999999999) == b'99999999999999999999'

    with pytest.raises(nws.FrameError):
        frame.pack_number(10000, 4)

    with pytest.raises(nws.FrameError):
        frame.pack_number(-1)


def test_unpack_number():

    assert frame.unpack_number(b'0000') == 0
    assert frame.unpack_number(b'00000000000000000042') == 42

    for bad in (b'', b'00 1', b'-001', b'12a4'):
        with pytest.raises(nws.FrameError):
            frame.unpack_number(bad)


def test_pack_request():

    packed = frame.pack_request(('declare var', 'ws', 'x', 'fifo'))

    expected = b'0004'
    expected += b'00000000000000000011declare var'
    expected += b'00000000000000000002ws'
    expected += b'00000000000000000001x'
    expected += b'00000000000000000004fifo'

    assert packed == expected


def test_pack_request_binary_and_text():

    payload = bytes(range(256))
    packed = frame.pack_request(('store', 'wé', payload))

    assert packed.startswith(b'0003')

    # Text is sent as UTF-8, so the length prefix counts bytes, not
    # characters.

    assert b'00000000000000000003w\xc3\xa9' in packed
    assert packed.endswith(b'00000000000000000256' + payload)


def test_pack_request_empty_field():

    packed = frame.pack_request(('use ws', 'ws', ''))
    assert packed.endswith(b'00000000000000000002ws' + b'0' * 20)


def test_read_status():

    stream = Stream(b'0000trailing')
    assert frame.read_status(stream) == 0
    assert stream.remaining() == b'trailing'

    stream = Stream(b'0001')
    assert frame.read_status(stream) == 1


def test_read_response():

    cookie = b'c' * 40
    data = b'0000' + frame.pack_number(16777217) + cookie + frame.pack_number(5) + b'hello' + b'next'

    stream = Stream(data)
    response = frame.read_response(stream)

    assert response.ok
    assert response.status == 0
    assert response.descriptor == 16777217
    assert response.cookie == cookie
    assert response.payload == b'hello'
    assert stream.remaining() == b'next'


def test_read_response_failure_is_fully_consumed():

    data = b'0001' + b'0' * 20 + b'0' * 40 + b'0' * 20 + b'next'

    stream = Stream(data)
    response = frame.read_response(stream)

    assert not response.ok
    assert response.payload == b''
    assert stream.remaining() == b'next'


def test_read_cursor_response():

    var_id = b'00000000000000000007'
    data = b'0000' + frame.pack_number(1) + var_id + frame.pack_number(3) + frame.pack_number(2) + b'ab'

    response = frame.read_cursor_response(Stream(data))

    assert response.ok
    assert response.cookie == frame.Cookie(var_id, 3)
    assert response.payload == b'ab'


def test_read_malformed():

    with pytest.raises(nws.FrameError):
        frame.read_status(Stream(b'OK!!'))

    with pytest.raises(nws.ConnectionDropped):
        frame.read_response(Stream(b'0000' + b'0' * 10))


def test_cookie():

    initial = frame.Cookie()
    assert initial.var_id == b''
    assert initial.index == 0

    parsed = frame.Cookie.parse(b'x' * 20 + frame.pack_number(12))
    assert parsed == frame.Cookie(b'x' * 20, 12)
    assert parsed != initial

    with pytest.raises(nws.FrameError):
        frame.Cookie.parse(b'short')

    repr(parsed)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
