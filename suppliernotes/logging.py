import inspect
import logging
from pprint import pformat
from typing import Any

from pydantic import BaseModel


class PprintLogger:
    """A logger wrapper that adds pprint support to standard logging methods."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def _format_message(self, msg: Any, pprint: bool = True) -> str:
        """Format a message, optionally using pprint.

        If the message is a Pydantic model and pprint=True, uses model_dump_json()
        to show the model's internals, so an IngestionResult or NoteRecord can be
        logged directly. Otherwise uses pformat for complex objects and leaves
        plain strings alone so %-style arguments still work.
        """
        if not pprint or isinstance(msg, str):
            return str(msg)

        if isinstance(msg, BaseModel):
            return msg.model_dump_json(indent=2)

        return pformat(msg, width=120, depth=None)

    def debug(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        formatted_msg = self._format_message(msg, pprint=pprint)
        self._logger.debug(formatted_msg, *args, stacklevel=2, **kwargs)

    def info(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        formatted_msg = self._format_message(msg, pprint=pprint)
        self._logger.info(formatted_msg, *args, stacklevel=2, **kwargs)

    def warning(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        formatted_msg = self._format_message(msg, pprint=pprint)
        self._logger.warning(formatted_msg, *args, stacklevel=2, **kwargs)

    def error(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        formatted_msg = self._format_message(msg, pprint=pprint)
        self._logger.error(formatted_msg, *args, stacklevel=2, **kwargs)

    def exception(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        formatted_msg = self._format_message(msg, pprint=pprint)
        self._logger.exception(formatted_msg, *args, stacklevel=2, **kwargs)

    # Delegate other standard logger methods/attributes
    def __getattr__(self, name: str) -> Any:
        """Delegate any other attributes to the underlying logger."""
        return getattr(self._logger, name)


def get_logger(name: str) -> PprintLogger:
    """Wrap the named logger without touching its handlers (for library modules)."""
    return PprintLogger(logging.getLogger(name))


def setup_logging(name: str | None = None, level: int = logging.INFO) -> PprintLogger:
    """Set up logging and return a PprintLogger instance.

    Without a name the logger is named after the calling function, which is
    convenient for scripts. A stream handler is attached once per logger.
    """
    if name is None:
        frame = inspect.currentframe().f_back  # type: ignore[union-attr]
        name = frame.f_code.co_name  # type: ignore[union-attr]
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return PprintLogger(logger)
