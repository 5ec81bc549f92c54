"""Logging and file helpers for the command line front end."""

import logging
from pathlib import Path
from typing import Optional

LOG = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def read_source(filepath: str) -> Optional[str]:
    """Return the UTF-8 text of *filepath*, or ``None`` after logging why not."""
    try:
        return Path(filepath).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        LOG.error("Cannot read '%s': %s", filepath, e)
        return None


def write_output(filepath: str, content: str) -> bool:
    path = Path(filepath)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
    except OSError as e:
        LOG.error("Cannot write '%s': %s", filepath, e)
        return False
    LOG.debug("Wrote %d characters to '%s'", len(content), filepath)
    return True
