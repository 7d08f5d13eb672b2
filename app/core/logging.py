"""
Logging configuration for the Real Estate Manager API
"""
import logging
import sys
import time
import json
from pathlib import Path
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from app.core.config import settings


def _file_handler(path: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.FileHandler(path)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging():
    """Route every logger to stdout, plus app.log and error.log unless LOG_TO_FILE is off"""
    level = logging.DEBUG if settings.debug else logging.INFO
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Reconfiguring replaces handlers from earlier calls or from uvicorn
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    root_logger.addHandler(console_handler)

    if settings.log_to_file:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        root_logger.addHandler(_file_handler(log_dir / "app.log", logging.INFO, file_formatter))
        root_logger.addHandler(_file_handler(log_dir / "error.log", logging.ERROR, file_formatter))

    # Driver chatter stays out of the API log
    for name in ("motor", "pymongo", "uvicorn.access"):
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the specified name"""
    return logging.getLogger(name)


class RequestResponseLoggingMiddleware(BaseHTTPMiddleware):
    """One JSON log line per API call: method, path, status and timing"""

    def __init__(self, app, exclude_paths: list = None):
        super().__init__(app)
        self.exclude_paths = exclude_paths or ["/api/health", "/favicon.ico", settings.docs_url]
        self.logger = get_logger("http")

    async def dispatch(self, request: Request, call_next):
        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            return await call_next(request)

        started = time.perf_counter()
        entry = {"method": request.method, "path": request.url.path}

        try:
            response = await call_next(request)
        except Exception as e:
            entry.update(status_code=500, error=str(e), elapsed_ms=self._elapsed_ms(started))
            self.logger.error(f"API call failed: {json.dumps(entry)}")
            raise

        entry.update(status_code=response.status_code, elapsed_ms=self._elapsed_ms(started))
        if response.status_code >= 500:
            self.logger.error(f"API call: {json.dumps(entry)}")
        elif response.status_code >= 400:
            self.logger.warning(f"API call: {json.dumps(entry)}")
        else:
            self.logger.info(f"API call: {json.dumps(entry)}")
        return response

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        return round((time.perf_counter() - started) * 1000, 2)
