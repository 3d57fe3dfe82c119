"""
Capture of warnings for display.

Warnings raised while loading or compiling a form (module mismatches,
ignored field names, ...) can be collected into plain records and shown
to the user alongside the rendered page.

Each record is a dict:
    name:   Human-readable kind of problem ("User-generated warning", ...)
    string: The warning message
    file:   Source file that raised it, HTML-escaped
    line:   Line number in that file
"""

import html
import warnings
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Type

_CATEGORY_NAMES = {
    UserWarning: "User-generated warning",
    DeprecationWarning: "Deprecation warning",
    PendingDeprecationWarning: "Pending deprecation warning",
    SyntaxWarning: "Compile-time warning",
    RuntimeWarning: "Runtime warning",
    FutureWarning: "Future warning",
    ImportWarning: "Import warning",
    UnicodeWarning: "Unicode warning",
    BytesWarning: "Bytes warning",
    ResourceWarning: "Resource warning",
}


def category_name(category: Type[Warning]) -> str:
    for cls in getattr(category, "__mro__", ()):
        if cls in _CATEGORY_NAMES:
            return _CATEGORY_NAMES[cls]
    return "Unknown error code"


class ErrorLog:
    """
    Collects warnings as display-ready records.

    Example:
        log = ErrorLog()
        with log.capture():
            form = load_and_compile("Profile", "bulkadd", "doBulkAdd")
        for entry in log.entries:
            ...
    """

    def __init__(self):
        self.entries: List[Dict[str, Any]] = []

    def record(self, message, category, filename, lineno, file=None, line=None) -> None:
        """Store one warning. Signature matches warnings.showwarning."""
        self.entries.append({
            "name": category_name(category),
            "string": str(message),
            "file": html.escape(str(filename), quote=False),
            "line": lineno,
        })

    @contextmanager
    def capture(self) -> Iterator["ErrorLog"]:
        """Route every warning raised inside the block into this log."""
        with warnings.catch_warnings():
            warnings.simplefilter("always")
            warnings.showwarning = self.record
            yield self

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)
