import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from simplecurl.coreutils.env import load_settings


def setup_logging(
    level: Optional[Union[int, str]] = None,
    log_dir: Optional[Union[str, Path]] = None,
):
    """Setup basic logging configuration, defaulting to SIMPLECURL_LOG_LEVEL"""
    if level is None:
        level = load_settings().log_level

    handlers = [logging.StreamHandler()]

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.FileHandler(
                log_dir / f"simplecurl_{datetime.now().strftime('%Y-%m-%d')}.log"
            )
        )

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=handlers,
    )
    return logging.getLogger("simplecurl")
