"""Environment helpers (.env loading)"""
import os
import logging
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)


def _parse_line(line: str) -> Optional[Tuple[str, str]]:
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    if line.startswith("export "):
        line = line[len("export "):]
    if "=" not in line:
        return None
    key, val = line.split("=", 1)
    val = val.strip()
    if len(val) >= 2 and val[0] == val[-1] and val[0] in ("'", '"'):
        val = val[1:-1]
    return key.strip(), val


def load_env_file(filepath: str = ".env") -> Dict[str, str]:
    """Copy variables from `filepath` into os.environ without overriding existing ones.

    Returns the variables that were applied.
    """
    applied: Dict[str, str] = {}
    if not os.path.exists(filepath):
        logger.debug(".env file not found: %s", filepath)
        return applied
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                parsed = _parse_line(line)
                if parsed is None:
                    continue
                key, val = parsed
                if key not in os.environ:
                    os.environ[key] = val
                    applied[key] = val
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", filepath, e)
    logger.debug("Loaded %d variables from %s", len(applied), filepath)
    return applied
