import logging
import sys

LOG_FORMAT: str = "%(asctime)s %(levelname)s %(message)s"
LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"


def configure_logging(verbose: bool = False) -> None:
    """apply the basic config to the root logger, which all loggers in the logging module inherit

    `verbose` lowers the level to DEBUG, which shows grid construction and carving details
    """
    logging.basicConfig(
        stream=sys.stdout,
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        # scripts may be called repeatedly in one process, so replace any earlier handlers
        force=True,
    )
