import json
import logging
import os
import tempfile
from contextlib import contextmanager
from threading import Lock, RLock

from flask import current_app

from commentboard.errors import StorageFailure
from commentboard.models.dataset_model import empty_dataset, normalize_dataset


logger = logging.getLogger(__name__)

_stores = {}
_stores_lock = Lock()


class JsonStore:
    """Whole-document JSON persistence for users and comments.

    Every write replaces the file atomically. ``lock`` is the single-writer
    critical section shared by all mutations against this file.
    """

    def __init__(self, path):
        self.path = os.path.abspath(path)
        self.lock = RLock()

    def load(self):
        with self.lock:
            if not os.path.exists(self.path):
                dataset = empty_dataset()
                self.save(dataset)
                return dataset

            try:
                with open(self.path, "r", encoding="utf-8") as fh:
                    raw = json.load(fh)
            except (OSError, ValueError) as exc:
                logger.error("Failed to load dataset from %s", self.path, exc_info=True)
                raise StorageFailure() from exc

            if not isinstance(raw, dict):
                logger.error("Dataset at %s is not a JSON object", self.path)
                raise StorageFailure()

            return normalize_dataset(raw)

    def save(self, dataset):
        directory = os.path.dirname(self.path)
        with self.lock:
            tmp_path = None
            try:
                os.makedirs(directory, exist_ok=True)
                fd, tmp_path = tempfile.mkstemp(
                    dir=directory,
                    prefix=".commentboard-",
                    suffix=".tmp",
                )
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(dataset, fh, indent=2)
                os.replace(tmp_path, self.path)
                tmp_path = None
            except (OSError, TypeError, ValueError) as exc:
                logger.error("Failed to save dataset to %s", self.path, exc_info=True)
                raise StorageFailure() from exc
            finally:
                if tmp_path and os.path.exists(tmp_path):
                    os.remove(tmp_path)

    @contextmanager
    def transaction(self):
        """Load, hand the dataset to the caller, save if the block succeeds."""
        with self.lock:
            dataset = self.load()
            yield dataset
            self.save(dataset)


def get_store():
    path = os.path.abspath(current_app.config["DATA_FILE"])
    with _stores_lock:
        store = _stores.get(path)
        if store is None:
            store = JsonStore(path)
            _stores[path] = store
        return store
