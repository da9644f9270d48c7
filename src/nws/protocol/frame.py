""" Length-prefixed framing for NWS requests and responses.

    Request layout::

        <4-digit field count> (<20-digit length><field bytes>)...

    Response layout, status-only operations::

        <4-digit status>

    Response layout, operations returning a value::

        <4-digit status><20-digit descriptor><40-byte cookie>
        <20-digit length><payload bytes>

    Cursor responses split the 40-byte cookie into a 20-byte variable id
    and a 20-digit value index. All numbers are zero-padded ASCII decimal.

    The decoding functions take a *stream*, any object with a
    ``read_exact(n)`` method returning exactly *n* bytes; in practice this
    is a :class:`nws.transport.tcp.Connection`.
"""

from ..errors import FrameError
from . import fields


class Cookie:
    """ Opaque cursor position issued by the server: a variable instance
        id and a value index. The client only stores and replays it.
    """

    __slots__ = ('var_id', 'index')

    def __init__(self, var_id=b'', index=0):
        self.var_id = var_id
        self.index = index


    @classmethod
    def parse(cls, raw):
        """ Build a :class:`Cookie` from the 40 bytes found on the wire.
        """

        if len(raw) != fields.COOKIE_WIDTH:
            raise FrameError('cookie must be %d bytes, got %d' % (fields.COOKIE_WIDTH, len(raw)))

        var_id = raw[:fields.VAR_ID_WIDTH]
        index = unpack_number(raw[fields.VAR_ID_WIDTH:])
        return cls(var_id, index)


    def __eq__(self, other):
        if not isinstance(other, Cookie):
            return NotImplemented
        return self.var_id == other.var_id and self.index == other.index


    def __repr__(self):
        return 'Cookie(%r, %d)' % (self.var_id, self.index)


# end of class Cookie



class Response:
    """ A decoded value-bearing response. *cookie* is the raw 40 bytes for
        plain retrieval responses and a :class:`Cookie` for cursor
        responses.
    """

    __slots__ = ('status', 'descriptor', 'cookie', 'payload')

    def __init__(self, status, descriptor, cookie, payload):
        self.status = status
        self.descriptor = descriptor
        self.cookie = cookie
        self.payload = payload


    @property
    def ok(self):
        return self.status == 0


    def __repr__(self):
        return 'Response(status=%d, descriptor=%d, cookie=%r, %d bytes)' % (
                self.status, self.descriptor, self.cookie, len(self.payload))


# end of class Response



def as_bytes(field):
    """ Fields are either text (names, operations, modes) or raw bytes
        (payloads, cookies). Text is sent as UTF-8.
    """

    if isinstance(field, str):
        return field.encode('utf-8')

    return bytes(field)



def pack_number(number, width=fields.NUMBER_WIDTH):
    """ Return *number* as zero-padded ASCII decimal of exactly *width*
        bytes.
    """

    number = int(number)
    if number < 0:
        raise FrameError('negative numbers cannot be framed: %d' % (number))

    packed = ('%0*d' % (width, number)).encode()
    if len(packed) != width:
        raise FrameError('%d does not fit in %d digits' % (number, width))

    return packed



def unpack_number(raw):
    """ Inverse of :func:`pack_number`.
    """

    if not raw.isdigit():
        raise FrameError('expected ASCII decimal digits, got %r' % (raw))

    return int(raw)



def pack_request(request_fields):
    """ Serialize a sequence of fields into one request frame.
    """

    parts = [pack_number(len(request_fields), fields.COUNT_WIDTH)]

    for field in request_fields:
        field = as_bytes(field)
        parts.append(pack_number(len(field)))
        parts.append(field)

    return b''.join(parts)



def read_number(stream, width=fields.NUMBER_WIDTH):
    return unpack_number(stream.read_exact(width))



def read_status(stream):
    """ Read the status code that starts every response.
    """

    return read_number(stream, fields.STATUS_WIDTH)



def read_response(stream):
    """ Read a complete value-bearing response. The whole response is
        consumed regardless of status, leaving the stream positioned at the
        start of the next response.
    """

    status = read_status(stream)
    descriptor = read_number(stream)
    cookie = stream.read_exact(fields.COOKIE_WIDTH)
    length = read_number(stream)
    payload = stream.read_exact(length)

    return Response(status, descriptor, cookie, payload)



def read_cursor_response(stream):
    """ Same as :func:`read_response`, with the cookie parsed into a
        :class:`Cookie` so it can be replayed on the next request.
    """

    status = read_status(stream)
    descriptor = read_number(stream)
    var_id = stream.read_exact(fields.VAR_ID_WIDTH)
    index = read_number(stream)
    length = read_number(stream)
    payload = stream.read_exact(length)

    return Response(status, descriptor, Cookie(var_id, index), payload)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
