"""Command-line helper that seeds a dashboard administrator."""

import argparse
import getpass

from art_gallery.app_logging import configure_logging
from art_gallery.containers import build_container


def main(argv: list[str] | None = None) -> int:
    """Create an admin account unless the username is taken."""
    parser = argparse.ArgumentParser(description="Create a gallery administrator.")
    parser.add_argument("username")
    parser.add_argument("--email", default=None)
    parser.add_argument("--password", default=None, help="Prompted for when omitted.")
    args = parser.parse_args(argv)

    configure_logging()
    password = args.password or getpass.getpass("Password: ")
    container = build_container()
    admin, created = container.admin_service.ensure_admin(
        args.username, password, args.email
    )
    if created:
        print(f"Admin created: {admin.username}")
    else:
        print(f"Admin already exists: {admin.username}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
