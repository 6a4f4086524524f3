from datetime import date
from pathlib import Path
from typing import Optional

from capacity_extender.projection.capacity_projector import project_capacity
from capacity_extender.projection.roster_models import ProcessingResult
from capacity_extender.utils.config import ExtenderSettings, settings as default_settings
from capacity_extender.utils.file_utils import (
    ensure_csv_file,
    output_file_name,
    read_roster_text,
    write_text,
)
from capacity_extender.utils.logger import get_logger

logger = get_logger(__name__)


class CapacityExtenderApplication:
    """
    Application-layer orchestration for one roster projection:
    select file -> read -> project -> save modified_<name>.
    """

    def __init__(self, settings: Optional[ExtenderSettings] = None):
        self.settings = settings or default_settings

    def run(
        self,
        *,
        input_path: Path,
        target_date: date,
        output_root: Optional[Path] = None,
        skip_existing: Optional[bool] = None,
        strict_dates: Optional[bool] = None,
        dry_run: bool = False,
    ) -> ProcessingResult:

        if output_root is None:
            output_root = self.settings.output_dir
        if skip_existing is None:
            skip_existing = self.settings.skip_existing
        if strict_dates is None:
            strict_dates = self.settings.strict_dates

        # 1. File selection
        ensure_csv_file(input_path)
        raw_content = read_roster_text(input_path, encoding=self.settings.file_encoding)
        logger.info("Loaded roster %s (%d chars)", input_path, len(raw_content))

        # 2. Projection
        projection = project_capacity(
            raw_content,
            target_date,
            strict_dates=strict_dates,
            skip_existing=skip_existing,
        )

        # 3. Result surface (row count taken from the text, not the core counts)
        content = projection.processed_content
        result = ProcessingResult(
            content=content,
            row_count=len(content.split("\n")) - 1,
            new_entries_count=projection.added_count,
            file_name=output_file_name(input_path.name, self.settings.output_prefix),
            original_count=projection.original_count,
            entries=projection.entries,
            skipped=projection.skipped,
        )

        # 4. Save (optional)
        if dry_run:
            logger.info("Dry run: %s not written", result.file_name)
        else:
            result.output_path = write_text(content, Path(output_root) / result.file_name)

        return result
