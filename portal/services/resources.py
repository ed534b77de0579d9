"""
Resource Stores

One store class serves every title/body/active-flag table (events,
materials). Rows are never deleted, only deactivated.
"""

import logging

from portal.errors import NotFound, ValidationFailed
from portal.extensions import db

logger = logging.getLogger(__name__)


class ResourceStore:
    """CRUD-lite store for a single resource model.

    Args:
        model: SQLAlchemy model with an `id` and boolean `active` column
        label: Human readable name used in messages ("Event")
        required: Fields that must be present and non-empty
        optional: Fields that default to an empty string
        order_by: Column name used to sort the active-only listing
    """

    def __init__(self, model, label, required, optional=(), order_by=None):
        self.model = model
        self.label = label
        self.required = tuple(required)
        self.optional = tuple(optional)
        self.order_by = order_by

    def list(self, active_only=False):
        query = self.model.query
        if active_only:
            query = query.filter_by(active=True)
            if self.order_by:
                query = query.order_by(getattr(self.model, self.order_by), self.model.id)
                return query.all()
        return query.order_by(self.model.id).all()

    def create(self, fields):
        fields = fields or {}
        values = {}
        missing = []
        for name in self.required:
            value = fields.get(name)
            value = value.strip() if isinstance(value, str) else ''
            if not value:
                missing.append(name)
            values[name] = value
        if missing:
            raise ValidationFailed(
                '{} requires: {}'.format(self.label, ', '.join(self.required)))

        for name in self.optional:
            value = fields.get(name)
            values[name] = value.strip() if isinstance(value, str) else ''

        row = self.model(active=True, **values)
        db.session.add(row)
        db.session.commit()
        logger.info('Created %s id=%s', self.label.lower(), row.id)
        return row

    def set_active(self, resource_id, active):
        row = db.session.get(self.model, resource_id)
        if row is None:
            raise NotFound(f'{self.label} not found')
        if row.active != active:
            row.active = active
            db.session.commit()
            logger.debug('%s id=%s set active=%s', self.label, resource_id, active)
        return row
