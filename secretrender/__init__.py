import logging

logger = logging.getLogger('secretrender')
__version__ = '0.1'
