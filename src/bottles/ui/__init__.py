"""
UI-facing helpers.

These functions are pure (no filesystem, no network) so the same copy is
used by the rendered page, the sing-along controller and the CLI.
"""
