import atexit
import json
import logging
import logging.config
from pathlib import Path

# Configure logging
logger = logging.getLogger("EntityGenerator")

_active_listener = None


def setup_logger(verbose: bool = False):
    global _active_listener
    config_file = Path(__file__).parent / "logging_config.json"
    with open(config_file, encoding="utf-8") as f:
        config = json.load(f)
    if verbose:
        config["loggers"]["EntityGenerator"]["level"] = "DEBUG"
        config["handlers"]["console"]["level"] = "DEBUG"
    logging.config.dictConfig(config)
    queue_handler = logging.getHandlerByName("queue_handler")
    if queue_handler is not None and hasattr(queue_handler, "listener"):
        # Type checker doesn't understand hasattr, so we access listener safely
        listener = getattr(queue_handler, "listener", None)
        if listener is not None and listener is not _active_listener:
            # Reconfiguring replaces the queue handler; retire the old listener
            if _active_listener is not None:
                _active_listener.stop()
            listener.start()
            atexit.register(listener.stop)
            _active_listener = listener


if __name__ == "__main__":
    setup_logger(verbose=True)
    logger.debug("This is a debug message.")
    logger.info("This is an info message.")
    logger.warning("This is a warning message.")
    logger.error("This is an error message.")
