import json
import os
import tempfile
import threading
from contextlib import contextmanager
from copy import deepcopy
from typing import Dict, List, Optional

from chalicelib.constants import keys_structure
from chalicelib.constants.db_structure import DOCUMENT_SEEDS
from chalicelib.utils.logger import logger, log_exception

_STORE = None


class DocumentStore:
    """
    Whole-document storage of collections (lists of json records).
    Every read returns a fresh copy, every write replaces the whole collection
    """

    def __init__(self):
        self._locks: Dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def load_all(self, collection: str) -> List[Dict]:
        """
        Should be re-implemented in each child class
        :return:
        records of the collection, empty list if they can't be read
        """
        raise NotImplementedError

    def save_all(self, collection: str, records: List[Dict]) -> bool:
        """
        Should be re-implemented in each child class
        :return:
        True if the collection was written
        """
        raise NotImplementedError

    @contextmanager
    def locked(self, collection: str):
        """
        Holds the collection lock for a read-modify-write sequence
        """
        with self._locks_guard:
            lock = self._locks.setdefault(collection, threading.RLock())
        with lock:
            yield self


class JsonFileStore(DocumentStore):

    def __init__(self, data_dir: str, seeds: Optional[Dict[str, List[Dict]]] = None):
        DocumentStore.__init__(self)
        self.data_dir = data_dir
        self.seeds = DOCUMENT_SEEDS if seeds is None else seeds
        os.makedirs(self.data_dir, exist_ok=True)

    def _get_path(self, collection: str) -> str:
        return os.path.join(self.data_dir, keys_structure.document_name.format(collection=collection))

    def _init_document(self, collection: str) -> None:
        path = self._get_path(collection)
        if os.path.exists(path):
            return
        logger.info(f"_init_document ::: {path=} not found, writing initial content")
        if not self._write(path, self.seeds.get(collection, [])):
            logger.error(f"_init_document ::: failed to initialize {path=}")

    def load_all(self, collection: str) -> List[Dict]:
        path = self._get_path(collection)
        try:
            self._init_document(collection)
            with open(path, 'r', encoding='utf-8') as f:
                records = json.load(f)
        except (OSError, ValueError) as e:
            log_exception(e, status_code=500, msg=f'load_all ::: error reading {path}')
            return []
        if not isinstance(records, list):
            logger.error(f"load_all ::: {path=} does not contain a json array")
            return []
        return records

    def save_all(self, collection: str, records: List[Dict]) -> bool:
        path = self._get_path(collection)
        written = self._write(path, records)
        if written:
            logger.info(f"save_all ::: {collection=} saved, {len(records)} records")
        return written

    @staticmethod
    def _write(path: str, records: List[Dict]) -> bool:
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=os.path.dirname(path), prefix='.', suffix='.tmp')
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(records, f, indent=2)
            os.replace(tmp_path, path)
            return True
        except (OSError, TypeError, ValueError) as e:
            log_exception(e, status_code=500, msg=f'_write ::: error writing {path}')
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            return False


def get_store() -> DocumentStore:
    global _STORE
    if _STORE is None:
        data_dir = os.environ.get('DATA_DIR') or os.path.join(os.getcwd(), 'data')
        logger.info(f"get_store ::: using json documents in {data_dir=}")
        _STORE = JsonFileStore(data_dir)
    return _STORE


def set_store(store: Optional[DocumentStore]) -> None:
    """
    Replace the process-wide store, None resets it to the configured default
    """
    global _STORE
    _STORE = store


def load_all(collection: str, store=get_store) -> List[Dict]:
    return deepcopy(store().load_all(collection))


def save_all(collection: str, records: List[Dict], store=get_store) -> bool:
    return store().save_all(collection, records)


def locked(collection: str, store=get_store):
    return store().locked(collection)
