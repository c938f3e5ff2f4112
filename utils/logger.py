import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional


def setup_logging(logging_config: Dict[str, Any], log_dir: Optional[Path] = None) -> logging.Logger:
    """Apply a ``dictConfig`` mapping and return the root logger.

    The log directory is created first so the rotating file handler can open
    its file.
    """
    if log_dir is not None:
        Path(log_dir).mkdir(exist_ok=True, parents=True)
    logging.config.dictConfig(logging_config)
    return logging.getLogger()
