import logging
import os

LOGGER = logging.getLogger(__name__)


class DemanglingConfig(object):

    # note to self: always change this in setup.py as well.
    VERSION = "0.3.0"
    CONFIG_FILE_PATH = str(os.path.abspath(__file__))
    PROJECT_ROOT = str(os.path.abspath(os.sep.join([CONFIG_FILE_PATH, "..", ".."])))

    ### logging
    LOG_LEVEL = logging.INFO
    LOG_FORMAT = "%(asctime)-15s: %(name)-32s - %(message)s"

    ### demangling
    # shorten well-known names, e.g. scala.Int -> Int, java.lang.String -> String
    COLLAPSE_KNOWN_NAMES = True
    # emit a trace line for every production entered
    DEBUG = False
    # callable receiving trace lines, falls back to LOGGER.debug if None
    TRACE_SINK = None
    # nesting of definitions, signatures and types we are willing to follow
    MAX_RECURSION_DEPTH = 256

    def __init__(self, collapse_known_names=None, debug=None, trace_sink=None, max_recursion_depth=None):
        if collapse_known_names is not None:
            self.COLLAPSE_KNOWN_NAMES = collapse_known_names
        if debug is not None:
            self.DEBUG = debug
        if trace_sink is not None:
            self.TRACE_SINK = trace_sink
        if max_recursion_depth is not None:
            self.MAX_RECURSION_DEPTH = max_recursion_depth

    def trace(self, production, rest):
        if not self.DEBUG:
            return
        if self.TRACE_SINK is not None:
            self.TRACE_SINK("{}: {}".format(production, rest))
        else:
            LOGGER.debug("%s: %s", production, rest)
