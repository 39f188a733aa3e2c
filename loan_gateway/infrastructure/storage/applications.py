"""Non-durable store of submitted applications, lost on restart"""

import secrets
import threading
from collections import OrderedDict

from loan_gateway.config import settings
from loan_gateway.domain.models import ApplicantRecord

KEY_BYTES = 4


class InMemoryApplicationStore:
    """
    Keeps recent applicant records in process memory under random hex keys.

    Holds at most max_records; the oldest record is evicted first.
    """

    def __init__(self, max_records: int | None = None):
        self.max_records = max_records if max_records is not None else settings.application_store_max_records
        self._records: "OrderedDict[str, ApplicantRecord]" = OrderedDict()
        self._lock = threading.Lock()

    def save(self, record: ApplicantRecord) -> str:
        """Store a record under a fresh random key and return the key"""
        with self._lock:
            key = secrets.token_hex(KEY_BYTES)
            while key in self._records:
                key = secrets.token_hex(KEY_BYTES)
            self._records[key] = record
            while len(self._records) > self.max_records:
                self._records.popitem(last=False)
        return key

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: str) -> bool:
        return key in self._records


application_store = InMemoryApplicationStore()
