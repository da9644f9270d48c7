""" Translation between Python values and the (descriptor, bytes) pairs
    stored on the server. Byte strings travel verbatim and are flagged as
    such; everything else goes through the injected
    :class:`nws.serializer.Serializer`.
"""

from ..errors import InvalidArgument


# Descriptor bits. DIRECT_STRING marks raw bytes that must never be decoded;
# the fingerprint identifies the language/encoding that produced a value.

DIRECT_STRING = 0x00000001
PYTHON_FP = 0x01000000

RAW_TYPES = (bytes, bytearray, memoryview)


class _Missing:
    """ Sentinel returned by :func:`ValueCodec.decode` for an empty payload.
    """

    def __bool__(self):
        return False

    def __repr__(self):
        return 'MISSING'


MISSING = _Missing()


def is_raw(descriptor):
    return bool(descriptor & DIRECT_STRING)



class ValueCodec:
    """ Decide, per value, whether bytes pass through verbatim or through
        the *serializer*. The *fingerprint* is or-ed into every descriptor
        this codec produces.
    """

    def __init__(self, serializer, fingerprint=PYTHON_FP):
        self.serializer = serializer
        self.fingerprint = fingerprint


    def encode(self, value):
        """ Return a (descriptor, bytes) tuple for *value*.
        """

        if value is None:
            raise InvalidArgument('None cannot be stored')

        if isinstance(value, RAW_TYPES):
            return self.fingerprint | DIRECT_STRING, bytes(value)

        return self.fingerprint, self.serializer.encode(value)


    def decode(self, descriptor, data, hint=None):
        """ Return the value represented by *descriptor* and *data*. Raw
            bytes are returned unchanged; an empty encoded payload returns
            :data:`MISSING`. The *hint*, if any, is handed to the serializer
            to check the decoded type.
        """

        if is_raw(descriptor):
            return data

        if len(data) == 0:
            return MISSING

        return self.serializer.decode(data, hint)


# end of class ValueCodec


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
