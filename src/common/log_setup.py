"""
Logging bootstrap shared by the CLI and embedding hosts
"""

import logging
from pathlib import Path
from typing import Optional

from .config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure root logging
    
    Args:
        level: Logging level name, defaults to settings.log_level
        log_file: Optional log file path, defaults to settings.log_file
    """
    level_name = (level or settings.log_level).upper()
    handlers = [logging.StreamHandler()]
    
    log_file = log_file or settings.log_file
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )
