"""Infrastructure exceptions shared by every repository."""

from __future__ import annotations


class PersistenceError(Exception):
    """The storage engine rejected a staged write or a read.

    Raised by repository ``commit()`` implementations, chained to the
    original driver/ORM error.  Never handled by the service layer.
    """
