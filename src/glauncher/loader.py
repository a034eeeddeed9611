"""Loading and writing program entry files.

Each regular file in the config directory is one TOML document holding a
single program. Bad files are skipped and reported, never fatal.
"""

import logging
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import tomli_w

from .models import Program

logger = logging.getLogger(__name__)


@dataclass
class LoadError:
    """A config file that could not be turned into a Program."""
    path: Path
    reason: str


@dataclass
class LoadResult:
    """Programs loaded from a directory, plus the files that were skipped."""
    programs: List[Program] = field(default_factory=list)
    errors: List[LoadError] = field(default_factory=list)


def ensure_config_dir(config_dir: Path) -> bool:
    """Create the config directory if it does not exist.

    Returns True when the directory is usable afterwards.
    """
    if config_dir.is_dir():
        return True
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not make config directory {config_dir}: {e}")
        return False
    logger.info(f"Created config directory {config_dir}")
    return True


def load_program(path: Path) -> Program:
    """Decode one config file.

    Raises:
        OSError: if the file cannot be read
        ValueError: if it is not valid UTF-8 TOML or lacks a required field
            (tomllib.TOMLDecodeError and UnicodeDecodeError are ValueErrors)
    """
    with open(path, "rb") as f:
        data = tomllib.load(f)
    return Program.from_dict(data, source=path)


def load_programs(config_dir: Path) -> LoadResult:
    """Load every program file in config_dir, in file-name order."""
    result = LoadResult()
    if not config_dir.is_dir():
        logger.warning(f"Config directory not found: {config_dir}")
        return result

    for path in sorted(config_dir.iterdir(), key=lambda p: p.name):
        if not path.is_file():
            continue
        try:
            program = load_program(path)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load config file {path.name} as it is invalid: {e}")
            result.errors.append(LoadError(path=path, reason=str(e)))
            continue
        logger.debug(f"Loaded program: {program.title}")
        result.programs.append(program)

    return result


def slugify(title: str) -> str:
    """File-name stem for a title: lowercase, dash separated."""
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return slug or "program"


def save_program(program: Program, config_dir: Path) -> Path:
    """Write program as a new TOML file in config_dir and return its path.

    Raises:
        FileExistsError: if a file for this title already exists
    """
    path = config_dir / f"{slugify(program.title)}.toml"
    with open(path, "xb") as f:
        tomli_w.dump(program.to_dict(), f)
    logger.info(f"Wrote program {program.title!r} to {path}")
    return path
