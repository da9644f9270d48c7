""" NWS wire protocol: constants, request/response framing, and the value
    codec. Nothing in this subpackage touches a socket; the transport
    layer moves the bytes produced and consumed here.
"""

from . import fields
from . import frame
from . import value

from .frame import Cookie, Response
from .value import MISSING, ValueCodec


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
