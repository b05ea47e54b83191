"""GitHub Actions runner integration."""

from __future__ import annotations

from semver_action.action.outputs import ReleaseOutputs, set_output, write_outputs

__all__ = ["ReleaseOutputs", "set_output", "write_outputs"]
