# -*- coding: utf-8 -*-

"""Console logging shared by the command line tools."""

import logging

logger = logging.getLogger('shiftcipher')
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter('%(message)s'))
logger.addHandler(handler)
logger.setLevel(logging.INFO)


def set_debug(debug):
    """Show the per-character cipher trace when debug is set."""
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
