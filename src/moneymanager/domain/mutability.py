"""Edit-window policy for ledger entries."""

from datetime import datetime, timedelta

EDIT_WINDOW = timedelta(hours=12)


def is_editable(created_at: datetime, now: datetime) -> bool:
    """Return True while ``now`` is within the edit window of ``created_at``.

    The boundary is inclusive: an entry created exactly 12 hours ago can
    still be changed.
    """
    return now - created_at <= EDIT_WINDOW
