import pytest

from cliptails.host import DocumentContext, MemoryHost, Selection, status_text
from cliptails.utils import extract_filename, leading_whitespace, resolve_line_separator


@pytest.mark.parametrize(
    "path, platform, expected",
    [
        ("/home/user/src/main.py", "linux", "main.py"),
        ("main.py", "linux", "main.py"),
        ("C:\\src\\main.py", "linux", "C:\\src\\main.py"),
        ("C:\\src\\main.py", "win32", "main.py"),
        ("C:/src/main.py", "win32", "main.py"),
    ],
)
def test_extract_filename(path, platform, expected):
    assert extract_filename(path, platform) == expected


def test_leading_whitespace():
    assert leading_whitespace("\t  x = 1") == "\t  "
    assert leading_whitespace("x") == ""


def test_resolve_line_separator():
    assert resolve_line_separator("") == "\n"
    assert resolve_line_separator("\r\n") == "\r\n"


def test_status_text():
    assert status_text(0) is None
    assert status_text(1) == "1 clip"
    assert status_text(12) == "12 clips"


def test_document_context_views():
    document = DocumentContext(
        language_id="python",
        eol="",
        file_path="/a/b/c.py",
        line_text="    return x",
        selection=Selection.caret(3, 12),
    )
    assert document.file_name == "c.py"
    assert document.line_separator == "\n"
    assert document.indentation == "    "
    assert document.text_before_cursor == "    return x"
    assert document.at_end_of_line is True


def test_selection_start_and_end():
    selection = Selection.caret(2, 5).model_copy(
        update={"anchor": Selection.caret(4, 0).anchor}
    )
    assert selection.start.key == (2, 5)
    assert selection.end.key == (4, 0)
    assert not selection.is_empty


def test_memory_host_crlf_buffer():
    host = MemoryHost(text="one\r\ntwo\r\nthree", eol="\r\n")
    host.select(5, 8)
    assert host.selected_text() == "two"
    assert host.selection.active.key == (1, 3)
    assert host.active_document().line_text == "two"
