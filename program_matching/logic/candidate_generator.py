"""
Candidate Generator

Loads the bundled university catalog and flattens it into scorable
(university, department, program) candidates.
The catalog is read-only once loaded; nothing here mutates it.
"""

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterator, Optional, Union

from dotenv import load_dotenv

from .contracts import UniversityData, ProgramCandidate, CareerField
from .constants import CAREER_FIELDS

load_dotenv()

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_CATALOG_PATH = DATA_DIR / "universities.json"
DEFAULT_CAREER_PATH_CATALOG_PATH = DATA_DIR / "career_paths.json"


def load_catalog(path: Optional[Union[str, Path]] = None) -> UniversityData:
    """
    Read the university catalog from disk.

    Args:
        path: JSON file to read. Defaults to UNIVERSITY_CATALOG_PATH or the
            bundled universities.json.

    Returns:
        Validated UniversityData

    Raises:
        FileNotFoundError: if the file does not exist
        pydantic.ValidationError: if the JSON does not match the catalog schema
    """
    path = Path(path or os.getenv("UNIVERSITY_CATALOG_PATH") or DEFAULT_CATALOG_PATH)

    with open(path, encoding="utf-8") as f:
        raw = json.load(f)

    catalog = UniversityData.model_validate(raw)
    program_count = sum(1 for _ in generate_candidates(catalog))
    logger.info(
        f"📚 Loaded catalog from {path}: "
        f"{len(catalog.universities)} universities, {program_count} programs"
    )
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> UniversityData:
    """Process-wide catalog, loaded on first use."""
    return load_catalog()


def generate_candidates(catalog: UniversityData) -> Iterator[ProgramCandidate]:
    """
    Flatten the nested catalog into one candidate per program.

    Yields in nested array order. Each call walks the catalog again, so the
    sequence can be restarted by calling it again.
    """
    for university in catalog.universities:
        for department in university.departments:
            for program in department.programs:
                yield ProgramCandidate(
                    university=university,
                    department=department,
                    program=program,
                )


def load_career_path_catalog(
    path: Optional[Union[str, Path]] = None
) -> Dict[str, CareerField]:
    """
    Read the static per-field titles, descriptions and sample universities
    used by the career path synthesizer.

    Raises:
        ValueError: if a career field is missing from the file
    """
    path = Path(
        path or os.getenv("CAREER_PATH_CATALOG_PATH") or DEFAULT_CAREER_PATH_CATALOG_PATH
    )

    with open(path, encoding="utf-8") as f:
        raw = json.load(f)

    missing = [field for field in CAREER_FIELDS if field not in raw]
    if missing:
        raise ValueError(f"Career path catalog {path} is missing fields: {missing}")

    fields = {field: CareerField.model_validate(raw[field]) for field in CAREER_FIELDS}
    logger.info(f"📚 Loaded career path catalog from {path}: {len(fields)} fields")
    return fields


@lru_cache(maxsize=1)
def get_career_path_catalog() -> Dict[str, CareerField]:
    """Process-wide career path catalog, loaded on first use."""
    return load_career_path_catalog()
