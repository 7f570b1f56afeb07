"""
Generic import engine: find-or-create-or-merge over one JSON export file.

Every entity type plugs into the same algorithm through an ImportRules
value (identity lookup, constructor, merge fields). The engine owns
everything else: reading and validating the file, staging inserts and
merges, writing provenance rows, progress reporting and the single
batch commit per file.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Tuple, Type, Union
import json
import logging

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.exceptions import (
    CommitError,
    MalformedInputError,
    PersistenceError,
    RecordValidationError,
    SourceFileError,
)
from models.base import ImportStatus
from models.external_source_map import ExternalSourceMap

logger = logging.getLogger(__name__)

ProgressSink = Callable[[str], None]


@dataclass(frozen=True)
class ImportRules:
    """
    Mapping rules for one entity type.

    Attributes:
        entity_type: Tag written to ExternalSourceMap.entity_type
        model: ORM class of the entity
        schema: Pydantic model every record in the file must match
        file_name: Name of the export file inside the import folder
        find: Async lookup of an existing row by business key, or None
        construct: Async builder of a new (unsaved) row from a record;
            may look up or stub related rows
        merge_fields: Model attribute -> record attribute, overwritten when
            an existing row matches. Business-key fields never appear here.
    """

    entity_type: str
    model: type
    schema: Type[BaseModel]
    file_name: str
    find: Callable[[AsyncSession, Any], Awaitable[Optional[Any]]]
    construct: Callable[[AsyncSession, Any], Awaitable[Any]]
    merge_fields: Mapping[str, str] = field(default_factory=dict)

    @property
    def entity_name(self) -> str:
        """Name used in progress messages"""
        return self.model.__name__


def report_progress(progress: Optional[ProgressSink], message: str) -> None:
    """Send a status line to the progress sink; sink failures never reach the caller"""
    if progress is None:
        return
    try:
        progress(message)
    except Exception:
        logger.warning(f"Progress sink failed on message: {message}", exc_info=True)


def merge_record(rules: ImportRules, entity: Any, record: BaseModel) -> None:
    """Overwrite the rule's mutable fields on an existing row"""
    for attribute, record_field in rules.merge_fields.items():
        setattr(entity, attribute, getattr(record, record_field))


def build_source_map(
    rules: ImportRules,
    entity: Any,
    record: BaseModel,
    raw_record: Dict[str, Any],
    source_name: str
) -> ExternalSourceMap:
    """Provenance row linking a catalog row to the export record it came from"""
    return ExternalSourceMap(
        entity_type=rules.entity_type,
        entity_id=entity.id,
        source_name=source_name,
        source_id=record.source_id,
        raw_json=json.dumps(raw_record, ensure_ascii=False)
    )


def load_records(path: Path, rules: ImportRules) -> List[Tuple[BaseModel, Dict[str, Any]]]:
    """
    Read an export file and validate every record.

    Returns:
        (validated record, raw record) pairs in file order

    Raises:
        SourceFileError: The file cannot be read
        MalformedInputError: The file is not a JSON array
        RecordValidationError: A record does not match rules.schema
    """
    context = {"file_path": str(path), "entity_type": rules.entity_type}

    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedInputError(
            "Import file is not UTF-8 text",
            context=context,
            original_exception=e
        )
    except OSError as e:
        raise SourceFileError(
            "Unable to read import file",
            context=context,
            original_exception=e
        )

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInputError(
            "Import file is not valid JSON",
            context={**context, "line": e.lineno, "column": e.colno},
            original_exception=e
        )

    if not isinstance(payload, list):
        raise MalformedInputError(
            "Import file must contain a JSON array of records",
            context={**context, "found_type": type(payload).__name__}
        )

    records = []
    for index, raw_record in enumerate(payload):
        if not isinstance(raw_record, dict):
            raise RecordValidationError(
                "Record is not a JSON object",
                context={**context, "record_index": index}
            )
        try:
            record = rules.schema(**raw_record)
        except ValidationError as e:
            raise RecordValidationError(
                "Record does not match the expected shape",
                context={**context, "record_index": index, "errors": e.errors()},
                original_exception=e
            )
        records.append((record, raw_record))

    return records


async def import_file(
    db_session: AsyncSession,
    rules: ImportRules,
    file_path: Union[str, Path],
    progress: Optional[ProgressSink] = None,
    source_name: Optional[str] = None,
    progress_interval: Optional[int] = None
) -> Dict[str, Any]:
    """
    Import one export file into the catalog.

    Pipeline:
    1. Skip (successfully) if the file does not exist
    2. Parse and validate all records; any failure aborts the file
    3. Per record: find by business key, create or merge, add provenance
    4. Commit once for the whole file

    Args:
        db_session: Session owned by this import for the duration of the file
        rules: Mapping rules of the entity type
        file_path: Export file to read
        progress: Optional sink receiving human-readable status lines
        source_name: Provenance source name (defaults to settings)
        progress_interval: Records between progress ticks (defaults to settings)

    Returns:
        Dictionary with import statistics:
        - status: "success" or "skipped"
        - entity_type, file_path
        - records_processed, records_created, records_merged

    Raises:
        MalformedInputError: Unparseable file or record (nothing is staged)
        SourceFileError: The file exists but cannot be read
        PersistenceError: A lookup or flush failed; staged rows are rolled back
        CommitError: The batch commit failed; staged rows are rolled back
    """
    path = Path(file_path)
    source_name = source_name or settings.IMPORT_SOURCE_NAME
    interval = progress_interval or settings.IMPORT_PROGRESS_INTERVAL

    result = {
        "status": ImportStatus.SKIPPED.value,
        "entity_type": rules.entity_type,
        "file_path": str(path),
        "records_processed": 0,
        "records_created": 0,
        "records_merged": 0,
    }

    if not path.exists():
        logger.warning(f"Import file not found, skipping {rules.entity_name}: {path}")
        report_progress(progress, f"Skipping {path} (not found)")
        return result

    report_progress(progress, f"Loading {path}...")
    records = load_records(path, rules)
    logger.info(f"Read {len(records)} {rules.entity_name} records from {path}")

    processed = 0
    created = 0
    merged = 0

    try:
        for record, raw_record in records:
            processed += 1

            entity = await rules.find(db_session, record)

            if entity is None:
                entity = await rules.construct(db_session, record)
                db_session.add(entity)
                # Flush so the store assigns the id the provenance row points at
                await db_session.flush()
                created += 1
            else:
                merge_record(rules, entity, record)
                merged += 1

            db_session.add(build_source_map(rules, entity, record, raw_record, source_name))

            if processed % interval == 0:
                report_progress(progress, f"{processed} {rules.entity_name} processed...")

    except SQLAlchemyError as e:
        await db_session.rollback()
        raise PersistenceError(
            f"Failed to stage {rules.entity_name} records",
            context={
                "entity_type": rules.entity_type,
                "file_path": str(path),
                "record_index": processed - 1,
                "source_id": record.source_id,
            },
            original_exception=e
        )

    try:
        await db_session.commit()
    except SQLAlchemyError as e:
        logger.error(f"Commit failed for {rules.entity_name} import from {path}: {str(e)}")
        await db_session.rollback()
        raise CommitError(
            f"Failed to commit {rules.entity_name} import",
            context={
                "entity_type": rules.entity_type,
                "file_path": str(path),
                "records_staged": processed,
            },
            original_exception=e
        )

    logger.info(
        f"Imported {processed} {rules.entity_name} from {path} "
        f"(created: {created}, merged: {merged})"
    )
    report_progress(progress, f"Finished importing {rules.entity_name} ({processed} items)")

    result.update(
        status=ImportStatus.SUCCESS.value,
        records_processed=processed,
        records_created=created,
        records_merged=merged,
    )
    return result
