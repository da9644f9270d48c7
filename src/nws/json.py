''' Wrapper module to select the most performant available library to handle
    the equivalent of :func:`json.loads` and :func:`json.dumps`. Used by
    :class:`nws.serializer.JsonSerializer` for the portable payload encoding.
'''

# The business about conditionally importing the libraries is intended to
# avoid importing less efficient libraries if they are not available.

msgspec = None
orjson = None
json = None

try:
    import msgspec
except ImportError:
    pass

if msgspec is None:
    try:
        import orjson
    except ImportError:
        pass

if msgspec is None and orjson is None:
    import json


# The msgspec 'encode' operation returns bytes, as does orjson.dumps. Values
# stored in a workspace are always bytes, so all 'dumps' methods do the same.

def json_dumps(*args, **kwargs):
    return json.dumps(*args, **kwargs).encode()

if msgspec is not None:
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode
    errors = (msgspec.DecodeError, UnicodeDecodeError)
elif orjson is not None:
    dumps = orjson.dumps
    loads = orjson.loads
    errors = (orjson.JSONDecodeError,)
else:
    dumps = json_dumps
    loads = json.loads
    errors = (json.JSONDecodeError, UnicodeDecodeError)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
