from pathlib import Path

from ..core.models import BibliographicRecord
from ..utils.log import get_logger

log = get_logger(__name__)


def load_record(path: Path) -> BibliographicRecord:
    """Load one bibliographic record from a JSON file.

    Raises:
        ValueError: if the file is not JSON.
        pydantic.ValidationError: if the content does not describe a record.
    """
    log.info("loading_record", path=str(path), format=path.suffix)

    if path.suffix.lower() != ".json":
        log.error("unsupported_record_format", path=str(path), format=path.suffix)
        raise ValueError(f"Unsupported record format: {path.suffix}")

    record = BibliographicRecord.model_validate_json(path.read_text(encoding="utf-8"))
    log.debug(
        "record_loaded",
        path=str(path),
        article_id=record.article.id,
        journal=record.journal.path,
    )
    return record


def find_record_files(directory: Path) -> list[Path]:
    """Record files in a directory, sorted by name."""
    files = sorted(directory.glob("*.json"))
    log.info("record_files_found", directory=str(directory), count=len(files))
    return files
