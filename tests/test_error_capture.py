"""
Tests for capturing warnings into display records.
"""

import warnings

from formdef.compiler import compile_form
from formdef.error_capture import ErrorLog, category_name
from formdef.loader import parse_form_string


def test_captures_loader_warning():
    log = ErrorLog()
    with log.capture():
        parse_form_string('{"name": "f", "module": "Other", "fields": {}}', "Profile")

    assert len(log) == 1
    entry = log.entries[0]
    assert entry["name"] == "User-generated warning"
    assert "declares module 'Other'" in entry["string"]
    assert isinstance(entry["line"], int)


def test_captures_compiler_warning():
    log = ErrorLog()
    doc = parse_form_string('{"name": "f", "fields": {"a": {"name": "b", "type": "text"}}}', "M")
    with log.capture():
        compile_form(doc, "act")
    assert [e["string"] for e in log.entries] == ["Ignoring name 'b' declared inside field a"]


def test_file_is_html_escaped():
    log = ErrorLog()
    log.record("oops", UserWarning, "/srv/<app>/form.py", 12)
    assert log.entries[0]["file"] == "/srv/&lt;app&gt;/form.py"
    assert log.entries[0]["line"] == 12


def test_unknown_category():
    class CustomWarning(Warning):
        pass

    assert category_name(CustomWarning) == "Unknown error code"
    assert category_name(DeprecationWarning) == "Deprecation warning"


def test_subclass_uses_nearest_category():
    class FormWarning(UserWarning):
        pass

    assert category_name(FormWarning) == "User-generated warning"
    assert category_name(Warning) == "Unknown error code"


def test_capture_restores_handler():
    original = warnings.showwarning
    log = ErrorLog()
    with log.capture():
        warnings.warn("inside", RuntimeWarning)
    assert warnings.showwarning is original
    assert log.entries[0]["name"] == "Runtime warning"

    log.clear()
    assert len(log) == 0
