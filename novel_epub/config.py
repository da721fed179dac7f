# Standard Package imports
import os
from dotenv import load_dotenv

load_dotenv()


#### WORKING DIRECTORY
# Every novel gets its own <title>/ folder in here, the epub lands next to it
WORKDIR = os.environ.get("NOVEL_WORKDIR", "novel")

#### HTTP
# 0 disables the timeout and leaves it to the transport
REQUEST_TIMEOUT = float(os.environ.get("NOVEL_REQUEST_TIMEOUT", "30")) or None

#### LOGGING
MAIN_LOGGER_NAME = os.environ.get("NOVEL_LOGGER_NAME", "novel_epub")
LOG_LEVEL = os.environ.get("NOVEL_LOG_LEVEL", "INFO").upper()

#### SOURCE SITE
SUPPORTED_SOURCE = os.environ.get("NOVEL_SUPPORTED_SOURCE", r"lightnovelworld\.com")
