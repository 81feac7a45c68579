import logging
import sys
from logging.handlers import QueueHandler, QueueListener
from queue import Queue
from pythonjsonlogger import jsonlogger
from tuiter_api.core.trace import get_trace_id
from tuiter_api.core.config import settings

LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s %(message)s "
    "%(trace_id)s %(service)s %(env)s"
)


class TraceContextFilter(logging.Filter):
    """Stamps trace_id/service/env on every record."""

    def __init__(self, service: str | None = None) -> None:
        super().__init__()
        self.service = service or settings.app_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = (getattr(record, "trace_id", None)
                           or get_trace_id() or "-")
        record.service = getattr(record, "service", None) or self.service
        record.env = getattr(record, "env", None) or settings.env
        return True


_listener: QueueListener | None = None


def setup_json_logging(service: str = "tuiter_reactions",
                       level: int = logging.INFO) -> None:
    """Route the root logger through a queue to a JSON stdout handler.

    The filter sits on the queue handler so the trace id is read in the
    request's context, before the record crosses to the listener thread.
    """
    global _listener
    if _listener is not None:
        return

    root = logging.getLogger()
    root.setLevel(level)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))

    q: Queue = Queue(-1)
    queue_handler = QueueHandler(q)
    queue_handler.addFilter(TraceContextFilter(service))

    _listener = QueueListener(q, stream_handler, respect_handler_level=True)
    _listener.start()

    root.handlers = [queue_handler]

    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True

    logging.getLogger(__name__).info(
        "logger_initialized",
        extra={"service": service})


def shutdown_logging() -> None:
    """Flush and stop the listener on application shutdown."""
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
