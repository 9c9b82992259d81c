"""Allow python -m agnostic_storage to run the CLI."""
from __future__ import annotations

from agnostic_storage.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
