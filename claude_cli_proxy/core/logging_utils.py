import logging
import collections
from datetime import datetime

from .config import LOG_BUFFER_CAPACITY

LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s:%(module)s:%(lineno)d] - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class MemoryLogHandler(logging.Handler):
    """
    Keeps the most recent log records in memory so the admin endpoint can show them.
    """
    def __init__(self, capacity=1000):
        super().__init__()
        self.log_buffer = collections.deque(maxlen=capacity)
        self.setFormatter(logging.Formatter(
            '%(asctime)s - %(levelname)s - %(name)s - %(message)s',
            datefmt=LOG_DATE_FORMAT
        ))

    def emit(self, record):
        try:
            msg = self.format(record)
            self.log_buffer.append({
                "timestamp": datetime.fromtimestamp(record.created).isoformat(),
                "level": record.levelname,
                "name": record.name,
                "message": record.getMessage(),
                "formatted": msg
            })
        except Exception:
            self.handleError(record)

    def get_logs(self, limit=100):
        if limit <= 0:
            return []
        return list(self.log_buffer)[-limit:]

    def clear(self):
        self.log_buffer.clear()


def configure_logging(level_name: str) -> None:
    """Attach the console and memory handlers to the root logger once."""
    numeric_log_level = getattr(logging, level_name.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_log_level)

    if not any(getattr(h, "_claude_cli_proxy_console", False) for h in root_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        console_handler._claude_cli_proxy_console = True  # type: ignore[attr-defined]
        root_logger.addHandler(console_handler)

    if memory_log_handler not in root_logger.handlers:
        root_logger.addHandler(memory_log_handler)

    for lib_logger_name in ["httpx", "httpcore", "uvicorn.access", "watchfiles"]:
        logging.getLogger(lib_logger_name).setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)


memory_log_handler = MemoryLogHandler(capacity=LOG_BUFFER_CAPACITY)
