"""Transport layer: moves request and response bytes over TCP."""

from .tcp import Connection


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
