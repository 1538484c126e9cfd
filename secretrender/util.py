"""Utility functions"""
import logging
import logging.handlers


def set_logger(debug=False, name='secretrender', logfile='stdout'):
    """Setup the logger"""
    logger_ = logging.getLogger(name)
    logger_.propagate = False

    if logfile == 'stdout':
        ch = logging.StreamHandler()
    else:
        ch = logging.handlers.RotatingFileHandler(logfile, mode='a+')

    if debug:
        ch.setLevel(logging.DEBUG)
        logger_.setLevel(logging.DEBUG)
    else:
        ch.setLevel(logging.INFO)
        logger_.setLevel(logging.INFO)

    formatter = logging.Formatter('[%(asctime)s][%(process)d] %(message)s')
    ch.setFormatter(formatter)

    # main() may run several times in one process (tests), don't stack
    for handler in list(logger_.handlers):
        logger_.removeHandler(handler)
        handler.close()
    logger_.addHandler(ch)
    return logger_
