from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class AdminGate:
    """Checks the admin password before mutating or exporting.

    There is no lockout or attempt throttling; a wrong password is simply
    ``False``. The secret is hashed once here and never kept in clear.
    """

    def __init__(self, secret: str):
        if not isinstance(secret, str) or not secret:
            raise ValidationError("Admin password must not be empty")
        self._secret_hash = generate_password_hash(secret)

    def verify(self, submitted) -> bool:
        if not isinstance(submitted, str) or not submitted:
            return False

        ok = check_password_hash(self._secret_hash, submitted)
        if not ok:
            logger.warning("Rejected admin password attempt")
        return ok
