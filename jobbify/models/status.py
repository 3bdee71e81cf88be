from jobbify.extensions import db


class Status(db.Model):
    __tablename__ = 'statuses'

    """
    Status lookup - labels for the integer status codes used by a module
    (e.g. module='lead' for client statuses).
    """

    id = db.Column(db.Integer, primary_key=True)
    module = db.Column(db.String(50), nullable=False, index=True)
    value = db.Column(db.Integer, nullable=False)
    label = db.Column(db.String(255), nullable=False)

    __table_args__ = (
        db.UniqueConstraint('module', 'value', name='uq_status_module_value'),
    )
