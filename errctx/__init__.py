"""
The errctx library adds context, in the form of strings, to errors as they propagate back
through a long call chain.

A ContextError renders as::

    <third piece of context>: <second piece of context>: <first piece of context>: <root message>

The "first" context string added appears closest to the root error. When a ContextError is
created by ``with_ctx`` the wrapped error's message is the root message; when it's created by
``new`` the given text is.

Use ``root`` to get back at the original error, e.g. to check whether it was a timeout, no
matter how much context has been added.
"""

from .error import (  # noqa
    Contextual,
    ContextError,
    new,
    newf,
    root,
    with_ctx,
    with_ctxf,
)
from .context import ErrorContext, err_ctx  # noqa
from .helpers import set_trace  # noqa
