from __future__ import annotations

import sys

from mdinput.app import run_app


def main() -> int:
    """Module entrypoint for `python -m mdinput.main` or `python -m mdinput` (via __main__)."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
