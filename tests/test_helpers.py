from errctx import helpers as hlp
import errctx

import logging


def test_set_trace():
    "Test that set_trace toggles the TRACE level on the library logger."

    try:
        hlp.set_trace()
        assert hlp.logger.level == hlp.TRACE

        hlp.set_trace(False)
        assert hlp.logger.level == logging.WARNING
    finally:
        hlp.logger.setLevel(logging.NOTSET)


def test_trace_formats(caplog):
    "Test that trace formats its arguments with str.format."

    caplog.set_level(hlp.TRACE, logger=hlp.logger.name)

    hlp.trace("{} and {!r}", "one", "two")

    (record,) = caplog.records
    assert record.levelno == hlp.TRACE
    assert record.getMessage() == "one and 'two'"


def test_trace_disabled(caplog):
    "Test that trace is silent unless TRACE is enabled."

    caplog.set_level(logging.WARNING, logger=hlp.logger.name)

    hlp.trace("{}", "ignored")
    errctx.with_ctx(ValueError("boom"), "loading")

    assert caplog.records == []


def test_with_ctx_traces(caplog):
    "Test that with_ctx traces whether it wraps or adds."

    caplog.set_level(hlp.TRACE, logger=hlp.logger.name)

    subj = errctx.with_ctx(ValueError("boom"), "loading")
    errctx.with_ctx(subj, "starting")

    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "with_ctx('loading'): wrapping ValueError('boom')",
        "with_ctx('starting'): adding to ContextError('loading: boom')",
    ]
