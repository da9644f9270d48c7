""" Pluggable encodings for values that are not byte strings. A session
    holds exactly one :class:`Serializer`; pass a different one to
    :class:`nws.Server` to change how values are represented on the server.
"""

import pickle

from abc import ABC, abstractmethod

from . import json
from .errors import DeserializeError


class Serializer(ABC):
    """ Minimal contract for a value encoding.
    """

    @abstractmethod
    def encode(self, value):
        """ Return the bytes representing *value*.
        """

    @abstractmethod
    def decode(self, data, hint=None):
        """ Return the value represented by *data*. If *hint* is a type, or a
            tuple of types, the decoded value must be an instance of it.
        """

    def check(self, value, hint):
        """ Enforce the *hint*, if any, on a freshly decoded *value*.
        """

        if hint is None or isinstance(value, hint):
            return value

        raise DeserializeError('expected %s, decoded %s' % (_describe(hint), type(value).__name__))


# end of class Serializer



class PickleSerializer(Serializer):
    """ Python-native serialization. Any picklable value can be stored and
        retrieved intact, but only other Python clients can read it back.
        Unpickling executes code chosen by whoever stored the value; only
        use this with a server and peers you trust.
    """

    def __init__(self, protocol=pickle.HIGHEST_PROTOCOL):
        self.protocol = protocol


    def encode(self, value):
        return pickle.dumps(value, protocol=self.protocol)


    def decode(self, data, hint=None):
        try:
            value = pickle.loads(data)
        except Exception as e:
            raise DeserializeError('unable to unpickle value: ' + str(e)) from e

        return self.check(value, hint)


# end of class PickleSerializer



class JsonSerializer(Serializer):
    """ Portable JSON encoding, readable by clients in any language. Only
        JSON-compatible values survive the trip unchanged; tuples come back
        as lists, integer dictionary keys as strings.
    """

    def encode(self, value):
        return json.dumps(value)


    def decode(self, data, hint=None):
        try:
            value = json.loads(data)
        except json.errors as e:
            raise DeserializeError('unable to decode JSON value: ' + str(e)) from e

        return self.check(value, hint)


# end of class JsonSerializer



def _describe(hint):

    if isinstance(hint, tuple):
        return ' or '.join(kind.__name__ for kind in hint)

    return hint.__name__


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
