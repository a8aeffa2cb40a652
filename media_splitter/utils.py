"""Utility functions for the media splitter worker"""

import subprocess
import logging
from datetime import datetime
from typing import List

logger = logging.getLogger(__name__)

def run_cmd(cmd: List[str], capture_output: bool = True,
            check: bool = True) -> subprocess.CompletedProcess:
    """Run a command and handle errors"""
    logger.debug("Running command: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            capture_output=capture_output,
            check=check,
            text=True
        )
        if result.stdout:
            logger.debug("Command stdout: %s", result.stdout)
        if result.stderr:
            logger.debug("Command stderr: %s", result.stderr)
        return result
    except subprocess.CalledProcessError as e:
        logger.error("Command failed: %s", " ".join(cmd))
        logger.error("Error output: %s", e.stderr)
        raise

def get_timestamp() -> str:
    """Get current timestamp in YYYYMMDD_HHMMSS format"""
    return datetime.now().strftime("%Y%m%d_%H%M%S")

def check_dependencies() -> bool:
    """Check for required dependencies"""
    from .config import FFPROBE_BIN
    required = [FFPROBE_BIN]

    for cmd in required:
        try:
            subprocess.run(['which', cmd],
                           capture_output=True,
                           check=True)
        except subprocess.CalledProcessError:
            logger.error("Required dependency not found: %s", cmd)
            return False

    return True
