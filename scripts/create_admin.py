"""
Create an admin account from the command line.

    python scripts/create_admin.py USERNAME PASSWORD
"""
import argparse
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from eventforge import create_app  # noqa: E402
from eventforge.auth.service import create_account  # noqa: E402
from eventforge.storage.errors import ConflictError  # noqa: E402


def main(argv=None):
    parser = argparse.ArgumentParser(description='Create an EventForge admin user')
    parser.add_argument('username')
    parser.add_argument('password')
    args = parser.parse_args(argv)

    if len(args.username.strip()) < 3 or len(args.password) < 6:
        parser.error('username needs 3+ characters and password 6+')

    app = create_app()
    with app.app_context():
        try:
            user = create_account(args.username.strip(), args.password)
        except ConflictError:
            print(f'User "{args.username}" already exists')
            return 1
    print(f'Created admin user "{user["username"]}" (id={user["id"]})')
    return 0


if __name__ == '__main__':
    sys.exit(main())
