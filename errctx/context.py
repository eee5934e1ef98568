from .error import with_ctx
from .helpers import trace


def _decorate(exc, context):
    """
    Add context to an exception that's on its way out. Returns the exception that should be
    raised in its place, or None if the original should simply continue.
    """
    wrapped = with_ctx(exc, context)
    if wrapped is exc:
        return None
    trace("replacing {!r} with {!r}", exc, wrapped)
    return wrapped


class ErrorContext:
    """
    Add context to any exception escaping the block.

    >>> with ErrorContext('could not do ', 'Y'):
    ...   with ErrorContext('could not do X'):
    ...     raise ValueError('bad stuff happened')
    Traceback (most recent call last):
    errctx.error.ContextError: could not do Y: could not do X: bad stuff happened

    The innermost ErrorContext sees a plain ValueError and raises a ContextError in its place,
    chained so that ``__cause__`` is the ValueError. As the ContextError walks up the stack, outer
    ErrorContexts add their context to it in place and let it continue.

    The arguments are concatenated without separators to form a single context string.

    Only subclasses of Exception are decorated; KeyboardInterrupt, SystemExit and the like pass
    through untouched.
    """

    def __init__(self, *context):
        self.context = context

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if isinstance(exc_value, Exception):
            wrapped = _decorate(exc_value, "".join(self.context))
            if wrapped is not None:
                raise wrapped from exc_value


def err_ctx(context, func):
    """
    Execute a callable, adding context to exceptions it raises.

    ``err_ctx(context, func)`` has the same effect as:

        with ErrorContext(context):
            return func()
    """
    try:
        return func()
    except Exception as exc:
        wrapped = _decorate(exc, context)
        if wrapped is None:
            raise
        raise wrapped from exc
