import logging

from rich.logging import RichHandler

from reqres_client.cli._output import err_console

# Request-level chatter from the HTTP stack; shown only with --verbose.
_HTTP_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, verbose: bool = False) -> None:
    """Send log records to the CLI's stderr console, replacing any earlier setup."""
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    handler = RichHandler(
        console=err_console,
        show_path=verbose,
        markup=False,
        rich_tracebacks=verbose,
        log_time_format="[%H:%M:%S]",
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)

    for name in _HTTP_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.WARNING)
