from copy import deepcopy
from typing import Dict, List, Optional

from chalicelib.constants.db_structure import DOCUMENT_SEEDS
from chalicelib.utils.db import DocumentStore


class InMemoryStore(DocumentStore):
    """
    Store keeping collections in a dict, seeded the same way as the json documents.
    Set fail_writes to make every save_all report a failure
    """

    def __init__(self, seeds: Optional[Dict[str, List[Dict]]] = None):
        DocumentStore.__init__(self)
        self.seeds = DOCUMENT_SEEDS if seeds is None else seeds
        self.documents: Dict[str, List[Dict]] = {}
        self.fail_writes = False
        self.writes = 0

    def load_all(self, collection: str) -> List[Dict]:
        if collection not in self.documents:
            self.documents[collection] = deepcopy(self.seeds.get(collection, []))
        return deepcopy(self.documents[collection])

    def save_all(self, collection: str, records: List[Dict]) -> bool:
        if self.fail_writes:
            return False
        self.documents[collection] = deepcopy(records)
        self.writes += 1
        return True
