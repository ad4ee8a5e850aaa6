import json
import logging
from pathlib import Path
from typing import Union

import pydantic

from .config import AGENDA_FILE
from .errors import StorageError
from .models import AgendaDocument

logger = logging.getLogger(__name__)


class JsonStore:
    """The agenda document persisted as one pretty-printed JSON file.

    Every call goes to disk; nothing is cached between calls and there is no
    locking around load/modify/save.
    """

    def __init__(self, path: Union[str, Path] = AGENDA_FILE):
        self.path = Path(path)

    def load(self) -> AgendaDocument:
        """Read the document. A missing file is an empty agenda."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return AgendaDocument()
        except OSError as e:
            logger.exception("Failed to read agenda file %s", self.path)
            raise StorageError() from e

        try:
            return AgendaDocument.model_validate(json.loads(raw))
        except (ValueError, pydantic.ValidationError) as e:
            logger.error("Agenda file %s is not a valid document: %s", self.path, e)
            raise StorageError() from e

    def save(self, doc: AgendaDocument) -> bool:
        """Overwrite the file with `doc`. Reports failure as False instead of raising."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            payload = doc.model_dump(mode="json", by_alias=True)
            self.path.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except (OSError, TypeError, ValueError):
            logger.exception("Failed to write agenda file %s", self.path)
            return False
        return True

    @staticmethod
    def next_id(doc: AgendaDocument) -> int:
        if not doc.tasks:
            return 1
        return max(task.id for task in doc.tasks) + 1


def get_store() -> JsonStore:
    """Dependency handing each request a store bound to the configured file."""
    return JsonStore(AGENDA_FILE)
