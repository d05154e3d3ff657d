import logging
import os


format = "%(asctime)s %(levelname)s %(name)s %(message)s"

if bool(os.environ.get("URIPARTS_DEBUG")):  # pragma: no cover
    # Display every URI parsed or rejected in debug mode.
    level = logging.DEBUG
else:
    # Hide parser logs.
    level = logging.CRITICAL

logging.basicConfig(format=format, level=level)
