"""
Package-global logger for clmath.

Messages are written to stderr through a dedicated handler and do not propagate to the root
logger. Raise the level to DEBUG to trace the candidate tick recomputation in
`get_tick_at_sqrt_ratio`.
"""

import logging

logger = logging.getLogger("clmath")
logger.propagate = False
logger.setLevel(logging.INFO)
logger.addHandler(logging.StreamHandler())
