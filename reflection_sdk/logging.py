import logging

PROCESS_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Process logger for orchestration, CLI and API modules.

    Attaches a stderr handler the first time a name is requested. Audit
    entries never pass through here; they go to core.infrastructure.audit.
    """
    logger = logging.getLogger(f"reflection.{name}")
    if not logger.handlers:
        stream = logging.StreamHandler()
        stream.setFormatter(logging.Formatter(PROCESS_LOG_FORMAT))
        logger.addHandler(stream)
        logger.setLevel(level)
    return logger
