import contextlib
import sys
from pathlib import Path
from typing import Any

from kink import di
from loguru import logger

from stringkit.core.config import Configuration

# Sinks added by setup_logging, removed again on the next call.
_handler_ids: list[int] = []


def format_log_record(record: dict[str, Any]) -> str:
    """Custom formatter for loguru records."""
    extra = record.get('extra', {})

    fmt = (
        '<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | '
        '<level>{level: <8}</level> | '
        '<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>'
    )

    if 'event' in extra:
        fmt += ' | <yellow>[{extra[event]:<20}]</yellow>'

    fmt += ' | <level>{message}</level>'

    if extra:
        fmt += '\n<white>{extra}</white>'

    if record.get('exception'):
        fmt += '\n{exception}'

    return fmt + '\n'


def _add_sink(sink: Any, **options: Any) -> None:
    _handler_ids.append(
        logger.add(
            sink,
            format=format_log_record,  # type: ignore [arg-type]
            backtrace=True,
            diagnose=True,
            enqueue=True,
            **options,
        )
    )


# noinspection PyTypeChecker
def setup_logging() -> None:
    """Setup Loguru logging for stringkit with configuration.

    Sinks registered by the host application are left alone; only the sinks
    added by a previous call are replaced.
    """
    config = di[Configuration]
    log_config = config.log

    while _handler_ids:
        # already gone if the host called logger.remove()
        with contextlib.suppress(ValueError):
            logger.remove(_handler_ids.pop())

    logger.enable('stringkit')

    # dev logging
    if config.app_debug:
        _add_sink(
            sys.stderr,
            level='DEBUG' if config.app_environment == 'local' else log_config.level,
            colorize=True,
        )

    # file logging, relative paths resolve against the working directory
    if log_config.to_file:
        log_file_path = Path(log_config.file_path).resolve()
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        _add_sink(
            log_file_path,
            level=log_config.level,
            rotation='100 MB',
            retention='30 days',
            compression='gz',
        )

        _add_sink(
            log_file_path.with_name(f'{log_file_path.stem}.error.log'),
            level='ERROR',
            rotation='100 MB',
            retention='30 days',
            compression='gz',
        )


def get_logger(name: str | None = None) -> Any:
    """Get a Loguru logger instance."""
    return logger.bind(name=name) if name else logger
