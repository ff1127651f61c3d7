"""Print a salted hash for a password, for pasting into SQL inserts.

Usage: python scripts/hash_password.py [password]
"""

from __future__ import annotations

import sys

from werkzeug.security import generate_password_hash


def main() -> None:
    password = sys.argv[1] if len(sys.argv) > 1 else "password123"
    print()
    print("Password:", password)
    print("Hash:", generate_password_hash(password))
    print()
    print("Copy the hash above to use in SQL queries.")


if __name__ == "__main__":
    main()
