import logging

LOGGER = logging.getLogger("virtcube")
