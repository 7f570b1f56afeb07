# ============================================================================
# File: importers/runner.py
# Description: Runs every import step against one export folder
# ============================================================================
"""
Import Runner - Orchestrates the per-entity import steps.

Steps run strictly one after another, each fully committed before the
next starts. Every step is recorded as an ImportRun row, inserted as
running before its file is read and completed when the step ends. A
missing file is a skipped step, never a failure. On the first failing
step the run stops and the error propagates, unless continue_on_error is
set, in which case the failure is recorded and the next step runs.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.exceptions import ImportException
from importers.engine import ImportRules, ProgressSink, import_file
from importers.grt import GRT_IMPORT_STEPS
from models.base import ImportStatus
from models.import_run import ImportRun

logger = logging.getLogger(__name__)


class ImportRunner:
    """
    Import orchestrator

    Responsibilities:
    - Run the import steps in their declared order
    - Derive each step's file from the folder and the rule's file name
    - Record one ImportRun per step
    - Apply the stop/continue policy on step failure
    """

    def __init__(
        self,
        db_session: AsyncSession,
        steps: Sequence[ImportRules] = GRT_IMPORT_STEPS,
        continue_on_error: Optional[bool] = None,
        source_name: Optional[str] = None
    ):
        self.db = db_session
        self.steps = tuple(steps)
        if continue_on_error is None:
            continue_on_error = settings.IMPORT_CONTINUE_ON_ERROR
        self.continue_on_error = continue_on_error
        self.source_name = source_name or settings.IMPORT_SOURCE_NAME

    async def run_all(
        self,
        folder: Union[str, Path],
        progress: Optional[ProgressSink] = None
    ) -> List[Dict[str, Any]]:
        """
        Import every step's file from a folder.

        Returns:
            One result dictionary per step that ran, in step order. Failed
            steps (continue mode only) have status "failed" and an "error".

        Raises:
            The first step failure, unless continue_on_error is set
        """
        folder = Path(folder)
        results = []

        logger.info(f"Starting {self.source_name} import from {folder} ({len(self.steps)} steps)")

        for rules in self.steps:
            try:
                result = await self.run_step(rules, folder, progress)
            except Exception as e:
                if not self.continue_on_error:
                    logger.error(f"Import aborted at {rules.entity_name}; remaining steps not run")
                    raise
                result = {
                    "status": ImportStatus.FAILED.value,
                    "entity_type": rules.entity_type,
                    "file_path": str(folder / rules.file_name),
                    "records_processed": 0,
                    "records_created": 0,
                    "records_merged": 0,
                    "error": self._error_message(e),
                }
            results.append(result)

        failed = sum(1 for r in results if r["status"] == ImportStatus.FAILED.value)
        logger.info(
            f"{self.source_name} import finished: {len(results)} steps, {failed} failed"
        )
        return results

    async def run_step(
        self,
        rules: ImportRules,
        folder: Union[str, Path],
        progress: Optional[ProgressSink] = None
    ) -> Dict[str, Any]:
        """Import a single step and record it as an ImportRun"""
        file_path = Path(folder) / rules.file_name
        run = await self._start_run(rules, file_path)

        try:
            result = await import_file(
                self.db,
                rules,
                file_path,
                progress=progress,
                source_name=self.source_name
            )
        except Exception as e:
            if isinstance(e, ImportException):
                logger.error(
                    f"{rules.entity_name} import failed: {e.message}",
                    extra={"error_context": e.to_dict()}
                )
            else:
                logger.exception(f"Unexpected error importing {rules.entity_name}")

            await self.db.rollback()
            await self._complete_run(
                run,
                status=ImportStatus.FAILED,
                error_message=self._error_message(e)
            )
            raise

        await self._complete_run(
            run,
            status=ImportStatus(result["status"]),
            result=result
        )
        return result

    async def _start_run(self, rules: ImportRules, file_path: Path) -> ImportRun:
        """Insert the step's ImportRun as running before the file is read"""
        run = ImportRun(
            entity_type=rules.entity_type,
            file_path=str(file_path),
            source_name=self.source_name,
            status=ImportStatus.RUNNING,
            started_at=datetime.utcnow()
        )
        self.db.add(run)
        await self.db.commit()
        return run

    async def _complete_run(
        self,
        run: ImportRun,
        status: ImportStatus,
        result: Optional[Dict[str, Any]] = None,
        error_message: Optional[str] = None
    ) -> ImportRun:
        result = result or {}
        # A rollback expires the run, so reload it before reading started_at
        await self.db.refresh(run)
        completed_at = datetime.utcnow()

        run.status = status
        run.completed_at = completed_at
        run.duration_seconds = (completed_at - run.started_at).total_seconds()
        run.records_processed = result.get("records_processed", 0)
        run.records_created = result.get("records_created", 0)
        run.records_merged = result.get("records_merged", 0)
        run.error_message = error_message

        await self.db.commit()
        return run

    @staticmethod
    def _error_message(error: Exception) -> str:
        if isinstance(error, ImportException):
            return error.message
        return str(error)
