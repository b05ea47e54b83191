"""Allow running as ``python -m semver_action``."""

from __future__ import annotations

from semver_action.cli import main

if __name__ == "__main__":
    main()
