import logging
import os

import structlog

from binwrite.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['BINWRITE_CONFIG_YAML'] = os.environ.get('BINWRITE_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)

# keep debug/info events out of doctest output
structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
