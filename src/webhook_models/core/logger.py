import logging
import sys

_PACKAGE_LOGGER = "webhook_models"


class _PackageFilter(logging.Filter):
    """Marks handlers installed by configure_root_logger so reconfiguration is idempotent."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _resolve_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def configure_root_logger(level: str = "INFO") -> None:
    """
    Configure root logger and the webhook_models logger.

    Logs go to stderr so command output on stdout stays machine-readable.
    Root logger stays at INFO to keep third-party libraries quiet.
    Only webhook_models namespace logs are set to the requested level.

    Args:
        level: Log level for webhook_models logs (DEBUG, INFO, WARNING, ERROR).

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    root = logging.getLogger()

    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _PackageFilter) for f in h.filters):
            logging.getLogger(_PACKAGE_LOGGER).setLevel(_resolve_level(level))
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_PackageFilter())
    root.addHandler(handler)
    root.setLevel(logging.INFO)

    logging.getLogger(_PACKAGE_LOGGER).setLevel(_resolve_level(level))


def get_logger(name: str = _PACKAGE_LOGGER) -> logging.Logger:
    """Get a module-specific logger under the webhook_models namespace.

    Unlike configure_root_logger this installs no handlers; library code should
    only log, while entry points (the CLI) decide where output goes.
    """
    return logging.getLogger(name)
