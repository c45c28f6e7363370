''' Wrapper module to select the most performant available library to handle
    the equivalent of :func:`json.loads` and :func:`json.dumps` for Socket
    Mode frames and Web API responses.
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


# The msgspec 'encode' operation returns bytes, as does orjson.dumps. To
# maintain alignment all 'dumps' methods need to do so as well, and all of
# them must produce compact output; acknowledgments are compared verbatim
# on the far side.

def json_dumps(*args, **kwargs):
    kwargs.setdefault('separators', (',', ':'))
    return json.dumps(*args, **kwargs).encode()

if msgspec is not None:
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode
    DecodeError = msgspec.DecodeError
elif orjson is not None:
    dumps = orjson.dumps
    loads = orjson.loads
    DecodeError = orjson.JSONDecodeError
else:
    dumps = json_dumps
    loads = json.loads
    DecodeError = json.JSONDecodeError


def dumps_text(thing):
    """ Same as :func:`dumps`, but decoded to a string, suitable for a
        WebSocket text frame.
    """

    return dumps(thing).decode()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
