""" The :class:`Workspace` is the primary interface for storing values into,
    and retrieving values from, the variables of one workspace.
"""

from .errors import DeclarationFailed, InvalidArgument, OperationError
from .protocol import fields
from .protocol import frame
from .protocol.value import MISSING
from .variable import Cursor, Variable


class Workspace:
    """ A named workspace on the server of a :class:`nws.Server` session.
        Instances are lightweight: any number of them may share a session,
        and none of them own it. Closing the session invalidates them all.

        Instances are normally obtained from :func:`nws.Server.open_workspace`
        or :func:`nws.Server.use_workspace`; constructing one directly
        assumes the workspace is already known to the server.

        The retrieval methods accept a *hint*, a type (or tuple of types)
        that the decoded value must be an instance of; a mismatch raises
        :class:`nws.errors.DeserializeError`. Byte strings are returned
        as-is and never checked.
    """

    def __init__(self, server, name):

        self.server = server
        self.name = name
        self._modes = dict()


    def __repr__(self):
        return "Workspace '%s' [%r]" % (self.name, self.server)


    def close(self):
        """ Close the underlying session, invalidating every workspace that
            shares it.
        """

        self.server.close()


    def declare(self, name, mode):
        """ Declare the variable *name* with *mode*, one of 'fifo', 'lifo',
            'multi', or 'single'. Declaring an existing variable with its
            current mode is harmless; a different mode is rejected by the
            server and the variable is left untouched.
        """

        if not isinstance(mode, str) or mode not in fields.MODES:
            raise InvalidArgument('unsupported mode: ' + repr(mode))

        status = self.server.status((fields.DECLARE_VAR, self.name, name, mode))
        if status != 0:
            raise DeclarationFailed("declaration of '%s' as %s failed" % (name, mode))

        self._modes[name] = mode


    def delete_var(self, name):
        """ Delete the variable *name* and all of its values.
        """

        status = self.server.status((fields.DELETE_VAR, self.name, name))
        if status != 0:
            raise OperationError("deletion of variable '%s' failed" % (name))

        self._modes.pop(name, None)


    def delete_workspace(self, name=None):
        """ Delete the workspace *name*, by default this one.
        """

        if name is None:
            name = self.name

        self.server.delete_workspace(name)


    def list_vars(self, ws_name=None):
        """ Return the server's listing of the variables in workspace
            *ws_name*, by default this one, verbatim.
        """

        if ws_name is None:
            ws_name = self.name

        response = self.server.retrieve((fields.LIST_VARS, ws_name))
        if not response.ok:
            raise OperationError("listing variables of '%s' failed" % (ws_name))

        return response.payload.decode('utf-8')


    def store(self, name, value):
        """ Store *value* into the variable *name*. Byte strings (bytes,
            bytearray, memoryview) are stored verbatim; anything else is
            encoded by the session's serializer. None cannot be stored.
        """

        if value is None:
            raise InvalidArgument('None cannot be stored')

        descriptor, data = self.server.codec.encode(value)
        request = (fields.STORE, self.name, name, frame.pack_number(descriptor), data)

        status = self.server.status(request)
        if status != 0:
            raise OperationError("store into '%s' failed" % (name))


    def _retrieve(self, name, op, missing, hint):

        response = self.server.retrieve((op, self.name, name))

        if not response.ok:
            raise OperationError("%s of '%s' failed" % (op, name))

        value = self.server.codec.decode(response.descriptor, response.payload, hint)

        if value is MISSING:
            return missing

        return value


    def fetch(self, name, hint=None):
        """ Remove and return a value of the variable *name*, blocking until
            one is available. There is no timeout; closing the session is
            the only way to abandon the wait.
        """

        return self._retrieve(name, fields.FETCH, None, hint)


    def fetch_try(self, name, missing=None, hint=None):
        """ Same as :func:`fetch`, but return *missing* rather than block
            if the variable has no value.
        """

        try:
            return self._retrieve(name, fields.FETCH_TRY, missing, hint)
        except OperationError:
            return missing


    def find(self, name, hint=None):
        """ Return a value of the variable *name* without removing it,
            blocking until one is available.
        """

        return self._retrieve(name, fields.FIND, None, hint)


    def find_try(self, name, missing=None, hint=None):
        """ Same as :func:`find`, but return *missing* rather than block
            if the variable has no value.
        """

        try:
            return self._retrieve(name, fields.FIND_TRY, missing, hint)
        except OperationError:
            return missing


    # --- cursors ---

    def iretrieve(self, name, op, cookie):
        """ Issue one cursor request for the variable *name*, starting from
            the position in *cookie*. Used by :class:`nws.Cursor`.
        """

        request = (op, self.name, name, cookie.var_id, frame.pack_number(cookie.index))
        return self.server.iretrieve(request)


    def _cursor(self, name, op, hint):

        # Only FIFO and SINGLE variables have a well-defined order. The mode
        # is only known here if it was declared through this instance.

        mode = self._modes.get(name)
        if mode is not None and mode not in fields.CURSOR_MODES:
            raise InvalidArgument("cursors are not supported for %s variable '%s'" % (mode, name))

        return Cursor(self, name, op, hint)


    def ifetch(self, name, hint=None):
        """ Return a :class:`nws.Cursor` that removes and returns the values
            of *name* in order, blocking for each one.
        """

        return self._cursor(name, fields.IFETCH, hint)


    def ifetch_try(self, name, hint=None):
        """ Same as :func:`ifetch`, but the iteration ends when the
            variable is empty.
        """

        return self._cursor(name, fields.IFETCH_TRY, hint)


    def ifind(self, name, hint=None):
        """ Return a :class:`nws.Cursor` over the values of *name* that does
            not remove them, blocking at the end for new values.
        """

        return self._cursor(name, fields.IFIND, hint)


    def ifind_try(self, name, hint=None):
        """ Same as :func:`ifind`, but the iteration ends after the last
            value currently stored.
        """

        return self._cursor(name, fields.IFIND_TRY, hint)


    def variable(self, name, hint=None):
        """ Return a :class:`nws.Variable` handle bound to *name*.
        """

        return Variable(self, name, hint)


# end of class Workspace


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
