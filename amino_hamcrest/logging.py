import logging

from amino import Path, Logger
from amino.logging import amino_logger, amino_root_file_logging

from amino_hamcrest import options

hamcrest_log = log = amino_logger('amino_hamcrest')


def hamcrest_logger(name: str) -> Logger:
    return hamcrest_log.getChild(name)


def file_logging(logfile: str) -> None:
    amino_root_file_logging(logfile=Path(logfile), level=logging.DEBUG)
    log.debug(f'logging to {logfile}')


def envvar_file_logging() -> None:
    options.log_file.value % file_logging


__all__ = ('hamcrest_log', 'hamcrest_logger', 'envvar_file_logging')
