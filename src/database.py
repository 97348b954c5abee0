"""
Flat-file record store.

The whole data set is one JSON document. Every mutation is a unit of work:
load the document, apply one change, save it back. Writes go through a
temporary file and ``os.replace`` so a crash never leaves a truncated file,
and a per-store lock serializes writers inside the process.
"""
import os
import json
import logging
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional, Union

from pydantic import ValidationError as SchemaError

from src.exceptions import PersistenceError
from src.models import Document

logger = logging.getLogger(__name__)


class RecordStore:
    """Owns the on-disk document."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._write_lock = threading.RLock()

    def __repr__(self):
        return f"<RecordStore(path={self.path})>"

    def ensure_initialized(self) -> bool:
        """
        Create the data file with an empty document if it does not exist.

        Returns:
            bool: True if a new file was written, False if one already existed

        Raises:
            PersistenceError: If the file could not be created
        """
        with self._write_lock:
            if self.path.exists():
                logger.debug("Data file already present at %s", self.path)
                return False
            self.save(Document())
            logger.info("Initialized empty data file at %s", self.path)
            return True

    def load(self) -> Document:
        """
        Read and parse the document.

        A missing file yields the empty document. Unreadable or corrupt
        files are reported, never replaced by an empty document.

        Raises:
            PersistenceError: If the file cannot be read or parsed
        """
        if not self.path.exists():
            logger.debug("Data file %s missing, using empty document", self.path)
            return Document()

        try:
            with open(self.path, 'r', encoding='utf-8') as fh:
                raw = json.load(fh)
        except OSError as e:
            logger.error("Error reading data file %s: %s", self.path, e)
            raise PersistenceError("Failed to read data file") from e
        except json.JSONDecodeError as e:
            logger.error("Data file %s is not valid JSON: %s", self.path, e)
            raise PersistenceError("Data file is corrupt") from e

        try:
            document = Document.model_validate(raw)
        except SchemaError as e:
            logger.error("Data file %s has an invalid layout: %s", self.path, e)
            raise PersistenceError("Data file is corrupt") from e

        logger.debug(
            "Loaded %d employees and %d payroll entries from %s",
            len(document.employees), len(document.payrolls), self.path
        )
        return document

    def save(self, document: Document) -> None:
        """
        Serialize the document and atomically replace the data file.

        Raises:
            PersistenceError: If the file could not be written
        """
        payload = json.dumps(document.to_json_dict(), indent=2)
        tmp_name: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix='.tmp', dir=str(self.path.parent)
            )
            with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            logger.error("Error writing data file %s: %s", self.path, e)
            raise PersistenceError("Failed to write data file") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.info(
            "Saved %d employees and %d payroll entries to %s",
            len(document.employees), len(document.payrolls), self.path
        )

    @contextmanager
    def transaction(self) -> Generator[Document, None, None]:
        """
        Unit of work around a single mutation.

        Example:
            with store.transaction() as document:
                document.employees.append(employee)

        The document is saved only if the block exits without an exception.
        Writers are serialized, so checks made inside the block (uniqueness,
        id assignment) cannot race with another writer in this process.
        """
        with self._write_lock:
            document = self.load()
            yield document
            self.save(document)

