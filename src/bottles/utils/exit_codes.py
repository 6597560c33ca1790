"""Exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success
  1   Sing-along ended early (a verse element was missing)
  2   Error — usage error, bad verse number, unwritable output
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    INCOMPLETE = 1
    ERROR = 2
