# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import logging
import logging.config
import os
import sys

DEFAULT_FORMAT =\
    "%(asctime)s %(levelname)s [%(module)s:%(lineno)d] %(message)s"

logging_initialized = False

def init(config_file=None):
    global logging_initialized

    if logging_initialized:
        return

    if not config_file:
        config_file = "logging.ini"
        if len(sys.argv) >= 3:
            if sys.argv[1] == "-l":
                config_file = sys.argv[2]

    if os.path.exists(config_file):
        logging.config.fileConfig(config_file)
    else:
        logging.basicConfig(level=logging.WARNING, format=DEFAULT_FORMAT)

    logging_initialized = True

if not logging_initialized:
    init()
