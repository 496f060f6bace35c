from kink import di

from stringkit.core.config import Configuration, get_config
from stringkit.core.logging import get_logger, setup_logging


def wire_dependencies() -> None:
    _wire_core_dependencies()
    _wire_logging()


# noinspection PyArgumentList
def _wire_core_dependencies() -> None:
    """Wire core library dependencies."""
    di[Configuration] = get_config()


def _wire_logging() -> None:
    setup_logging()

    config = di[Configuration]
    get_logger(__name__).bind(event='wired').debug(
        '{} {} wired for {}',
        config.app_name,
        config.app_version,
        config.app_environment,
    )
