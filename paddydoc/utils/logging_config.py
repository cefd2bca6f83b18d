import logging
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "[%(levelname)s] %(name)s - %(message)s"

# HTTP transport loggers of the OpenAI SDK; they log every request at INFO.
SDK_LOGGERS = ("openai", "httpx", "httpcore")


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    quiet_loggers: Iterable[str] = SDK_LOGGERS,
) -> None:
    """
    Configure logging for PaddyDoc runs.

    Parameters
    ----------
    level:
        Logging level name (e.g., "INFO", "DEBUG"). Unknown names fall back
        to INFO.
    log_file:
        Optional path to log output. When not provided, logs go to stderr.
    quiet_loggers:
        Third-party loggers held at WARNING unless ``level`` is DEBUG, so a
        vision call shows up as one PaddyDoc line instead of the SDK's
        request chatter.
    """

    logging_level = getattr(logging, level.upper(), logging.INFO)
    log_kwargs = {
        "level": logging_level,
        "format": LOG_FORMAT,
    }

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        log_kwargs["filename"] = log_file

    logging.basicConfig(**log_kwargs)

    sdk_level = logging.DEBUG if logging_level <= logging.DEBUG else logging.WARNING
    for name in quiet_loggers:
        logging.getLogger(name).setLevel(sdk_level)
