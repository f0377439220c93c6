import time

from flask import current_app

from ..extensions import db


def ping_database(retries=None, delay=None):
    """Run ``SELECT 1``, retrying with a fixed delay.

    Returns ``(ok, error_message)``.
    """
    if retries is None:
        retries = int(current_app.config.get('DB_MAX_RETRIES', 0))
    if delay is None:
        delay = float(current_app.config.get('DB_RETRY_DELAY', 0))

    attempt = 0
    while True:
        try:
            db.session.execute(db.text("SELECT 1"))
            return True, None
        except Exception as e:
            db.session.rollback()
            if attempt >= retries:
                current_app.logger.exception('Database connection failed after %d attempt(s)', attempt + 1)
                return False, str(e)
            attempt += 1
            current_app.logger.warning('Database ping failed, retrying (%d/%d) in %ss', attempt, retries, delay)
            time.sleep(delay)
