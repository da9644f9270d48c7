"""Protocol constants.

Keep these in one place to avoid stringly-typed request handling.
"""

# Handshake tokens. The client announces support for the cookie protocol;
# a server that only speaks the older protocol answers with OLD_PROTOCOL.

HANDSHAKE = b'1112'
OLD_PROTOCOL = b'2222'

# Fixed widths of the ASCII decimal fields on the wire.

COUNT_WIDTH = 4
STATUS_WIDTH = 4
NUMBER_WIDTH = 20
VAR_ID_WIDTH = 20
COOKIE_WIDTH = VAR_ID_WIDTH + NUMBER_WIDTH

# Variable modes.

FIFO = 'fifo'
LIFO = 'lifo'
MULTI = 'multi'
SINGLE = 'single'

MODES = frozenset((FIFO, LIFO, MULTI, SINGLE))

# Cursors are only well-ordered for these modes.

CURSOR_MODES = frozenset((FIFO, SINGLE))

# Request operations.

DECLARE_VAR = 'declare var'
DELETE_VAR = 'delete var'
DELETE_WS = 'delete ws'
LIST_VARS = 'list vars'
LIST_WSS = 'list wss'
MKTEMP_WS = 'mktemp ws'
OPEN_WS = 'open ws'
USE_WS = 'use ws'
STORE = 'store'

FETCH = 'fetch'
FETCH_TRY = 'fetchTry'
FIND = 'find'
FIND_TRY = 'findTry'

IFETCH = 'ifetch'
IFETCH_TRY = 'ifetchTry'
IFIND = 'ifind'
IFIND_TRY = 'ifindTry'

CURSOR_OPS = frozenset((IFETCH, IFETCH_TRY, IFIND, IFIND_TRY))
DESTRUCTIVE_OPS = frozenset((FETCH, FETCH_TRY, IFETCH, IFETCH_TRY))

YES = 'yes'
NO = 'no'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
