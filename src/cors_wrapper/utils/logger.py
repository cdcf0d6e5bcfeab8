"""
Logging setup for the demo server and examples
"""

import sys
from pathlib import Path
from typing import Optional, Union
from loguru import logger


CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> <level>{level: <7}</level> "
    "<cyan>{name}</cyan> {message}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} {level: <7} {name} {message}"


def setup_logger(level: str = "INFO",
                 log_file: Optional[Union[str, Path]] = None,
                 serialize: bool = False) -> None:
    """
    Replace loguru's default sink

    Args:
        level: Minimum level for every sink
        log_file: Optional file sink, rotated at 10 MB
        serialize: Write JSON records instead of formatted lines
    """
    level = level.upper()
    logger.remove()

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level,
               colorize=not serialize, serialize=serialize)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(str(log_path), format=FILE_FORMAT, level=level,
                   serialize=serialize, rotation="10 MB")

    logger.debug(f"Logging configured: level={level} file={log_file or '-'}")
