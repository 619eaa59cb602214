"""Active-profile state record persistence."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from ..errors import CorruptStateError, FilesystemError
from ..models.schemas import StateRecord, utc_now
from .atomic import AtomicFileWriter


class StateStore:
    """Reads and updates the state record at a fixed location.

    ``read`` never creates the file; a missing record yields the default
    record in memory. ``update`` is the only mutator.
    """

    def __init__(
        self,
        state_file: Path,
        writer: Optional[AtomicFileWriter] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.state_file = Path(state_file)
        self.logger = logger or logging.getLogger(__name__)
        self.writer = writer or AtomicFileWriter(logger=self.logger)

    def read(self) -> StateRecord:
        """Return the persisted record, or the default when none exists.

        Raises:
            CorruptStateError: If the file exists but cannot be parsed
            FilesystemError: If the file exists but cannot be read
        """
        try:
            raw = self.state_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            self.logger.debug(f"No state file at {self.state_file}, using defaults")
            return StateRecord()
        except OSError as e:
            raise FilesystemError(f"Failed to read state file {self.state_file}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptStateError(
                f"State file {self.state_file} is not valid JSON: {e}"
            ) from e

        if not isinstance(data, dict):
            raise CorruptStateError(f"State file {self.state_file} must contain a JSON object")

        try:
            return StateRecord.model_validate(data)
        except ValidationError as e:
            raise CorruptStateError(f"State file {self.state_file} is invalid: {e}") from e

    def update(self, **changes: Any) -> StateRecord:
        """Merge ``changes`` into the current record and persist it.

        Args:
            **changes: Record fields by attribute or alias name,
                e.g. ``active_profile="work"``

        Returns:
            The record as written
        """
        current = self.read()
        data = current.model_dump(by_alias=True)
        data.update(StateRecord.model_validate(changes).model_dump(by_alias=True, exclude_unset=True))
        data["lastSyncedAt"] = utc_now()

        record = StateRecord.model_validate(data)
        self.writer.write(self.state_file, record.to_json_bytes())
        self.logger.debug(f"State updated: activeProfile={record.active_profile}")
        return record
