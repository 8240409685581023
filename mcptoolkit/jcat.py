"""Concatenate files into a JSON array of strings."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable, Sequence

_HTML_ESCAPES = str.maketrans(
    {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026", "\u2028": "\\u2028", "\u2029": "\\u2029"}
)


def concatenate(paths: Iterable[str]) -> str:
    """Return a compact JSON array of the files' contents, or ``null`` for no paths."""
    contents = []
    for path in paths:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            contents.append(handle.read())
    return json.dumps(contents or None, ensure_ascii=False, separators=(",", ":")).translate(_HTML_ESCAPES)


def main(argv: Sequence[str] | None = None) -> int:
    """Write the JSON array of the named files to standard output."""
    try:
        output = concatenate(sys.argv[1:] if argv is None else argv)
    except OSError as exc:
        print(f"Error: {exc}", end="", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())