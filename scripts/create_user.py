"""
Name: User Provisioning Script

Responsibilities:
  - Create a user from the command line through CreateUserUseCase
  - Print the generated password once (it is never stored in clear)
  - Open/close the DB pool when running against PostgreSQL

Usage:
  DATABASE_URL=... python scripts/create_user.py --name Ada --surname Lovelace \\
      --email ada@example.com [--phone +5491155550000]
"""

from __future__ import annotations

import argparse
import os
import sys
import uuid

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from pydantic import ValidationError  # noqa: E402

from user_api.application.usecases import CreateUserInput  # noqa: E402
from user_api.container import get_create_user_use_case  # noqa: E402
from user_api.context import clear_context, set_request_context  # noqa: E402
from user_api.crosscutting.config import get_settings  # noqa: E402
from user_api.infrastructure.db.pool import close_pool, init_pool  # noqa: E402
from user_api.interfaces.api.http.schemas.users import UserReq  # noqa: E402
from user_api.interfaces.api.http.validation import translate_errors  # noqa: E402


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    argv = list(sys.argv[1:] if argv is None else argv)
    if argv and argv[0] == "--":
        argv = argv[1:]
    parser = argparse.ArgumentParser(
        description="Create a user with a generated password."
    )
    parser.add_argument("--name", required=True, help="First name")
    parser.add_argument("--surname", required=True, help="Last name")
    parser.add_argument("--email", required=True, help="Email (will be normalized)")
    parser.add_argument("--phone", default=None, help="Optional phone number")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    uses_db = not settings.is_test_env()

    # R: mismas reglas que POST /v1/users (longitudes, email, phone).
    try:
        req = UserReq(
            name=args.name, surname=args.surname, email=args.email, phone=args.phone
        )
    except ValidationError as exc:
        for err in translate_errors(exc.errors(), settings.default_locale):
            print(f"Invalid {err['field']}: {err['msg']}", file=sys.stderr)
        return 1

    set_request_context(request_id=f"cli-{uuid.uuid4()}", method="CLI", path="create_user")
    if uses_db:
        init_pool(
            database_url=settings.database_url,
            min_size=1,
            max_size=max(1, settings.db_pool_min_size),
        )

    try:
        result = get_create_user_use_case().execute(
            CreateUserInput(
                name=req.name,
                surname=req.surname,
                email=req.email,
                phone=req.phone,
            )
        )
    finally:
        if uses_db:
            close_pool()
        clear_context()

    if result.error is not None:
        print(f"Error ({result.error.code.value}): {result.error.message}", file=sys.stderr)
        return 1

    print(f"Created user: id={result.user.id} email={result.user.email}")
    print(f"Generated password (shown once): {result.generated_password}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
