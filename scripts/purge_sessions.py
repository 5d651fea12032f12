"""
Delete expired server-side sessions. Safe to run from cron.
"""
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from eventforge import create_app  # noqa: E402
from eventforge.storage import get_storage  # noqa: E402

app = create_app()

with app.app_context():
    removed = get_storage().sessions.purge_expired()
    print(f'Removed {removed} expired sessions')
