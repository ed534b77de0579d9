"""
Event and Material Models
"""

from portal.extensions import db


class Event(db.Model):
    """Scheduled event shown to members while active"""
    __tablename__ = 'events'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False, default='')
    # Opaque but comparable, e.g. ISO dates
    date = db.Column(db.String(40), nullable=False, index=True)
    active = db.Column(db.Boolean, nullable=False, default=True)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'date': self.date,
            'active': self.active,
        }

    def to_member_dict(self):
        return {
            'title': self.title,
            'description': self.description,
            'date': self.date,
        }

    def __repr__(self):
        return f'<Event {self.title} on {self.date}>'


class Material(db.Model):
    """Learning material link"""
    __tablename__ = 'materials'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    link = db.Column(db.String(500), nullable=False)
    active = db.Column(db.Boolean, nullable=False, default=True)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'link': self.link,
            'active': self.active,
        }

    def to_member_dict(self):
        return {
            'title': self.title,
            'link': self.link,
        }

    def __repr__(self):
        return f'<Material {self.title}>'
