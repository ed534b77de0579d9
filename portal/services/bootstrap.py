"""
Default administrator seed
"""

import logging

logger = logging.getLogger(__name__)


def ensure_default_admin(accounts, email, name, password):
    """Create the reserved administrator account if it does not exist.

    Returns the created account, or None when it was already present.
    """
    if accounts.find_by_identity(email) is not None:
        return None

    account = accounts.create_admin(name, email, password)
    logger.warning('Default administrator created: %s. Change its password.', email)
    return account
