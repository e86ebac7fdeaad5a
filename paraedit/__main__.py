"""paraedit CLI entry point.

Allows running via `python -m paraedit` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys

from .editor import Editor
from .errors import InputReadFailure


def main() -> None:
    editor = Editor()
    try:
        editor.run()
    except KeyboardInterrupt:
        # Ctrl-C at a prompt ends the session like 'exit'
        print()
    except InputReadFailure as e:
        print(f"paraedit: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
