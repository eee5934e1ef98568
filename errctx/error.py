from .helpers import JOIN_SEQUENCE, trace

import attr
from typing import Protocol, runtime_checkable


@runtime_checkable
class Contextual(Protocol):
    """
    Anything that carries context strings on top of a root error. ``with_ctx`` and ``root``
    check for this rather than for ``ContextError`` itself.
    """

    root: object

    def add_ctx(self, ctx):
        ...

    def add_ctxf(self, fmt, *args, **kwargs):
        ...


@attr.s(auto_exc=True, repr=False)
class ContextError(Exception):
    """
    An error with context strings layered on top of a root error. Rendering it gives::

        <third context>: <second context>: <first context>: <root message>

    Context is append-only and kept exactly as given; each string is trimmed only when the
    message is rendered. A context string that already ends with a colon doesn't get a
    second one.

    Instances are mutable and unsynchronized; don't add context to the same instance from
    multiple threads.
    """

    _root = attr.ib()
    _context = attr.ib(factory=list, converter=list)

    @property
    def root(self):
        "The error all the context is prepended to."
        return self._root

    @property
    def context(self):
        "A snapshot of the context strings, oldest first."
        return tuple(self._context)

    def add_ctx(self, ctx):
        self._context.append(ctx)

    def add_ctxf(self, fmt, *args, **kwargs):
        self.add_ctx(fmt.format(*args, **kwargs))

    def __str__(self):
        pieces = [ctx.strip() for ctx in reversed(self._context)]
        pieces.append(str(self._root))
        out = [pieces[0]]
        for last, piece in zip(pieces, pieces[1:]):
            if not last.endswith(JOIN_SEQUENCE):
                out.append(JOIN_SEQUENCE)
            out.append(" ")
            out.append(piece)
        return "".join(out)

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self.__str__())


def root(err):
    """
    Return the root error of ``err`` if it carries context, otherwise ``err`` itself.

    Only one level is unwrapped.
    """
    if isinstance(err, Contextual):
        return err.root
    return err


def with_ctx(err, ctx):
    """
    Add a context string to ``err``.

    If ``err`` already carries context, the string is added in place and ``err`` itself is
    returned; callers holding another reference will see the new context. Otherwise a new
    ContextError wrapping ``err`` is returned.
    """
    if isinstance(err, Contextual):
        trace("with_ctx({!r}): adding to {!r}", ctx, err)
        err.add_ctx(ctx)
        return err
    trace("with_ctx({!r}): wrapping {!r}", ctx, err)
    return ContextError(err, [ctx])


def with_ctxf(err, fmt, *args, **kwargs):
    "Like ``with_ctx``, with the context built by ``fmt.format(*args, **kwargs)``."
    return with_ctx(err, fmt.format(*args, **kwargs))


def new(text):
    "Construct a ContextError with no context and a root error with the given text."
    trace("new({!r})", text)
    return ContextError(Exception(text))


def newf(fmt, *args, **kwargs):
    return new(fmt.format(*args, **kwargs))
