import logging
from datetime import datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level=logging.INFO, log_dir: str | Path = "logs"):
    """Setup basic logging configuration with a dated file and the console"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(
                log_dir / f"bidding_{datetime.now().strftime('%Y-%m-%d')}.log"
            ),
            logging.StreamHandler(),
        ],
    )
    return logging.getLogger(__name__)
