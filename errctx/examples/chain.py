"""
Shows context being added as an error propagates through a call chain.

    $ python -m errctx.examples.chain
    could not do Y: could not do X: bad stuff happened
"""

from errctx import new, with_ctx


def do_x():
    # Try to do X, but it fails...
    raise new("could not do X: bad stuff happened")
    # This is essentially equivalent to:
    # raise Exception("could not do X: bad stuff happened")


def do_y():
    # Doing Y depends on doing X.
    try:
        do_x()
    except Exception as exc:
        raise with_ctx(exc, "could not do Y")


def main():
    try:
        do_y()
    except Exception as exc:
        print(exc)


if __name__ == "__main__":
    main()
