import logging

logger = logging.getLogger(__name__)
TRACE = 5
JOIN_SEQUENCE = ":"


def trace(fmt, *args, _logger=logger, _TRACE=TRACE):
    "Trace a log message. Avoids issues with applications setting `style`."
    if _logger.isEnabledFor(_TRACE):
        _logger.log(_TRACE, fmt.format(*args))


def set_trace(enabled=True):
    logger.level = TRACE if enabled else logging.WARNING
