import io

from minish.line_source import iter_script_lines


def test_blank_lines_are_dropped_and_lines_trimmed():
    handle = io.BytesIO(b"\n   \n  echo hi  \r\n\t\nhelp\n")
    assert list(iter_script_lines(handle)) == ["echo hi", "help"]


def test_undecodable_line_is_reported_and_skipped():
    handle = io.BytesIO(b"echo one\n\xff\xfe bad\necho two\n")
    stderr = io.StringIO()
    lines = list(iter_script_lines(handle, stderr=stderr))
    assert lines == ["echo one", "echo two"]
    assert stderr.getvalue().startswith("Error at line 2:")


def test_lines_are_produced_lazily():
    handle = io.BytesIO(b"a\nb\n")
    lines = iter_script_lines(handle)
    assert next(lines) == "a"
    assert handle.tell() < len(b"a\nb\n")
