import nws
from nws import babelfish


def test_translate():

    assert babelfish.translate(42) == '42'
    assert babelfish.translate('') == '""'
    assert babelfish.translate(b'bytes') == 'bytes'
    assert babelfish.translate([1, 2]) == '[1, 2]'

    long = babelfish.translate('x' * 2000)
    assert long == 'x' * 1000 + '[WARNING: output truncated]'


def test_serve(session, workspace):

    workspace.store('food', 3.5)
    workspace.store('food', '')

    # A payload flagged as encoded that does not unpickle.

    descriptor = nws.protocol.frame.pack_number(nws.protocol.value.PYTHON_FP)
    session.status(('store', workspace.name, 'food', descriptor, b'garbage'))

    babelfish.serve(workspace, limit=3)

    assert workspace.fetch('doof') == b'3.5'
    assert workspace.fetch('doof') == b'""'
    assert workspace.fetch('doof').startswith(b'unable to unpickle')
    assert workspace.fetch_try('doof') is None


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
