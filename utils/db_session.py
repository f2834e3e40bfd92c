from contextlib import contextmanager
from models import db


def disconnect():
    """Release the scoped session and close every pooled connection."""
    db.session.remove()
    db.engine.dispose()

@contextmanager
def maintenance_session(app):
    """
    App context plus ORM session for one-off maintenance scripts.

    The session is rolled back when the body raises, and disconnect() runs
    whether the body succeeds or fails. Exceptions propagate to the caller.
    """
    with app.app_context():
        try:
            yield db.session
        except Exception:
            db.session.rollback()
            raise
        finally:
            disconnect()
