""" Cursor-based iteration over the values of a variable, and a small
    handle class binding a workspace to one variable name.
"""

from .errors import InvalidArgument, NoSuchElement
from .protocol import fields
from .protocol import value
from .protocol.frame import Cookie


FRESH = 'fresh'
PEEKED = 'peeked'
EXHAUSTED = 'exhausted'


class Cursor:
    """ Iterate over the values of the variable *name* in *workspace*, in the
        order the server keeps them. *op* is one of the cursor operations:

        ``ifind``, ``ifindTry``
            Leave the values in place. The Try variant ends the iteration
            after the last value; the other blocks for new values.

        ``ifetch``, ``ifetchTry``
            Remove each value as it is returned. Other clients fetching from
            the same variable compete for the same values.

        The position is kept as a server-issued :class:`nws.protocol.Cookie`,
        and one value is buffered between :func:`has_next` and :func:`next`.
        A cursor belongs to one thread at a time; independent cursors over
        the same variable do not affect one another.

        Only FIFO and SINGLE variables have a well-defined order. Cursors
        over LIFO or MULTI variables declared through the same
        :class:`nws.Workspace` are refused when created; for any other
        variable the order is whatever the server returns.
    """

    def __init__(self, workspace, name, op, hint=None):

        if op not in fields.CURSOR_OPS:
            raise InvalidArgument('not a cursor operation: ' + repr(op))

        self.workspace = workspace
        self.name = name
        self.op = op
        self.hint = hint

        self.cookie = Cookie()
        self.state = FRESH
        self._buffered = None


    def __repr__(self):
        return "Cursor %s '%s' [%r]" % (self.op, self.name, self.workspace)


    def __iter__(self):
        return self


    def __next__(self):
        if not self.has_next():
            raise StopIteration
        return self.next()


    @property
    def destructive(self):
        return self.op in fields.DESTRUCTIVE_OPS


    def has_next(self):
        """ Return True if a value is available. The first call after
            :func:`next` (or on a new cursor) asks the server for the next
            value and buffers it; further calls return True without any
            network traffic until :func:`next` consumes the buffered value.

            An exhausted cursor asks the server again from the same
            position, picking up any values stored in the meantime.
        """

        if self.state == PEEKED:
            return True

        response = self.workspace.iretrieve(self.name, self.op, self.cookie)

        empty = len(response.payload) == 0 and not value.is_raw(response.descriptor)

        if not response.ok or empty:
            self.state = EXHAUSTED
            self._buffered = None
            return False

        self.state = PEEKED
        self._buffered = response
        return True


    def next(self):
        """ Return the next value, advancing the cursor. Raises
            :class:`nws.errors.NoSuchElement` if there is none.
        """

        if not self.has_next():
            raise NoSuchElement("variable '%s' has no values" % (self.name))

        response = self._buffered
        self._buffered = None
        self.cookie = response.cookie
        self.state = FRESH

        codec = self.workspace.server.codec
        return codec.decode(response.descriptor, response.payload, self.hint)


    def reset(self):
        """ Return to the initial position, discarding any buffered value.
            A non-destructive cursor will replay the same values; a
            destructive cursor sees whatever has not been fetched yet.
        """

        self.cookie = Cookie()
        self.state = FRESH
        self._buffered = None


# end of class Cursor



class Variable:
    """ A handle on the variable *name* in *workspace*. All of the methods
        are shortcuts for the :class:`nws.Workspace` methods of the same
        name; *hint* is applied to every retrieval. Iterating over a
        :class:`Variable` starts a new ``ifindTry`` :class:`Cursor` each
        time, so every loop sees all of the current values.
    """

    def __init__(self, workspace, name, hint=None):
        self.workspace = workspace
        self.name = name
        self.hint = hint


    def __repr__(self):
        return "Variable '%s' [%r]" % (self.name, self.workspace)


    def __iter__(self):
        return self.workspace.ifind_try(self.name, self.hint)


    def declare(self, mode):
        self.workspace.declare(self.name, mode)


    def delete(self):
        self.workspace.delete_var(self.name)


    def store(self, value):
        self.workspace.store(self.name, value)


    def fetch(self):
        return self.workspace.fetch(self.name, self.hint)


    def fetch_try(self, missing=None):
        return self.workspace.fetch_try(self.name, missing, self.hint)


    def find(self):
        return self.workspace.find(self.name, self.hint)


    def find_try(self, missing=None):
        return self.workspace.find_try(self.name, missing, self.hint)


    def ifetch(self):
        return self.workspace.ifetch(self.name, self.hint)


    def ifetch_try(self):
        return self.workspace.ifetch_try(self.name, self.hint)


    def ifind(self):
        return self.workspace.ifind(self.name, self.hint)


    def ifind_try(self):
        return self.workspace.ifind_try(self.name, self.hint)


# end of class Variable


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
