"""Process lifecycle hooks for the store connection.

The store connection is process-wide: it is opened once when a worker
process starts and kept for the process lifetime (``CONN_MAX_AGE=None``).
There is no explicit teardown; the connection goes away with the process.
"""

from __future__ import annotations

import structlog
from django.db import DEFAULT_DB_ALIAS, connections

logger = structlog.get_logger(__name__)


def establish_store_connection(alias: str = DEFAULT_DB_ALIAS, **_signal_kwargs) -> None:
    """Open the store connection for ``alias`` and log on success.

    Connected to Celery's ``worker_process_init`` signal; failures propagate
    so a worker that cannot reach the store never starts consuming.
    """
    conn = connections[alias]
    conn.ensure_connection()
    logger.info(
        "store.connected",
        alias=alias,
        vendor=conn.vendor,
        message="Connected to the database",
    )
