"""
The package logger. Messages go to stderr through a dedicated handler and are not propagated to the
root logger. Simulation requests log at DEBUG and fallback results at WARNING.
"""

import logging

logger = logging.getLogger("transfersim")
logger.propagate = False
logger.setLevel(logging.INFO)
logger.addHandler(logging.StreamHandler())
