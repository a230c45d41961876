# Append-only audit log: one JSON record per event, written to audit/audit.jsonl

import json
import os
import time
import uuid
from datetime import datetime, timezone


def audit_path() -> str:
    # Directory can be overridden (tests, CI) via env var; read on every call
    audit_dir = os.environ.get("PRSM_AUDIT_DIR", "audit")
    os.makedirs(audit_dir, exist_ok=True)
    return os.path.join(audit_dir, "audit.jsonl")


def audit_log(event: str, **payload):
    """
    Write a single audit record (run/changelog_update/etc.).
    Returns the record dict so callers can reuse it in responses/tests.
    """
    record = {
        "id": str(uuid.uuid4()),
        "event": event,
        "ts": time.time(),
        "iso": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        **payload,
    }
    with open(audit_path(), "a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False, default=str) + "\n")
    return record
