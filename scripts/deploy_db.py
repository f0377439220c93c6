#!/usr/bin/env python3
"""Apply all pending database migrations.

Run from project root before starting the web process:
  python scripts/deploy_db.py
"""
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flask_migrate import upgrade

from vendor_eval import create_app


def main():
    app = create_app()
    with app.app_context():
        app.logger.info('Starting database deployment...')
        try:
            upgrade()
        except Exception:
            app.logger.exception('Error during database deployment')
            return 1
        app.logger.info('Database deployment completed successfully')
    return 0


if __name__ == '__main__':
    sys.exit(main())
