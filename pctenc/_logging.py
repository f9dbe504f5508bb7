import logging
import logging.handlers
import queue
from contextlib import contextmanager
from typing import Iterator


logger = logging.getLogger("pctenc")

FORMAT = "%(asctime)s %(levelname)s - %(message)s"


@contextmanager
def logging_to_stderr(debug: bool = False) -> Iterator[logging.handlers.QueueListener]:
    logging_queue = queue.Queue()
    queue_handler = logging.handlers.QueueHandler(logging_queue)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(FORMAT))

    listener = logging.handlers.QueueListener(logging_queue, handler)

    previous_level = logger.level
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.addHandler(queue_handler)
    listener.start()

    try:
        yield listener
    finally:
        listener.stop()
        logger.removeHandler(queue_handler)
        logger.setLevel(previous_level)
