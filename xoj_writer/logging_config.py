from __future__ import annotations

"""Central logging configuration for xoj_writer.

Import and call :func:`setup_logging` at application start-up. The host
application (note-taking GUI, batch export script, autosave daemon) owns that
call; the save pipeline itself only creates module loggers and never
configures handlers, so embedding it leaves the host's logging untouched.
"""

import logging
import logging.config
import os

from xoj_writer.config import ConfigManager

__all__ = ["setup_logging"]

_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging() -> None:
    """Configure logging for the application using configuration from YAML files."""
    log_dir = os.environ.get("XOJ_WRITER_LOG_DIR", "logs")
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, "xoj_writer.log")

    try:
        logging_config = dict(ConfigManager().get_logging_config())

        if logging_config.get("version"):
            handlers = logging_config["handlers"] = dict(logging_config.get("handlers") or {})
            if "file" in handlers:
                handlers["file"] = dict(handlers["file"], filename=log_file)
            logging.config.dictConfig(logging_config)
            logging.getLogger(__name__).info("===== Logging initialised from config files =====")
        else:
            _setup_minimal_logging()
    except (ValueError, TypeError, AttributeError, ImportError) as exc:
        # dictConfig reports every configuration problem as one of these
        print(f"Error loading logging config: {exc}")
        _setup_minimal_logging()

    _apply_debug_overrides()


def _setup_minimal_logging() -> None:
    """Set up minimal console-only logging when config is unavailable."""
    minimal_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': _LOG_FORMAT,
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': 'INFO',
            },
        },
        'root': {
            'level': 'INFO',
            'handlers': ['console'],
        },
    }

    logging.config.dictConfig(minimal_config)
    logging.error("===== Logging initialised with minimal fallback (config error) =====")


def _apply_debug_overrides() -> None:
    """Apply environment-driven module-specific debug overrides.

    ``XOJ_WRITER_DEBUG_MODULES=comma,separated,logger,names`` -> DEBUG for listed loggers
    """
    extra_modules = os.environ.get('XOJ_WRITER_DEBUG_MODULES', '').strip()
    targets = [m.strip() for m in extra_modules.split(',') if m.strip()]
    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        has_debug_handler = any(h.level <= logging.DEBUG for h in logger.handlers)
        if not has_debug_handler:
            h = logging.StreamHandler()
            h.setLevel(logging.DEBUG)
            h.setFormatter(logging.Formatter(_LOG_FORMAT))
            logger.addHandler(h)
        logger.info("Debug override active for logger '%s'", name)
