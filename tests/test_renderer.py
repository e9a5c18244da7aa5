from cliptails.models import ClipEntry
from cliptails.renderer import entry_detail, entry_label, render_replacement
from cliptails.transcoder import to_csv, wrap_token


def make_entry(lines, source_file="main.py", created_at=1) -> ClipEntry:
    return ClipEntry(
        created_at=created_at,
        language_id="python",
        lines=lines,
        source_file=source_file,
    )


# region Render


def test_multi_line_render_gets_trailing_separator():
    assert render_replacement(make_entry(["x", "y"]), "", "\n") == "x\ny\n"


def test_single_line_render_has_no_trailing_separator():
    assert render_replacement(make_entry(["x = 1"]), "    ", "\n") == "x = 1"


def test_render_indents_continuation_lines():
    entry = make_entry(["if x:", "    y()"])
    assert render_replacement(entry, "  ", "\r\n") == "if x:\r\n      y()\r\n"


def test_label_and_detail():
    entry = make_entry(["    def f():", "        pass"], source_file="util.py")
    assert entry_label(entry) == "def f():..."
    assert entry_detail(entry) == "... 2 lines, from 'util.py'"


def test_label_and_detail_single_line():
    entry = make_entry(["x = 1"], source_file="")
    assert entry_label(entry) == "x = 1"
    assert entry_detail(entry) == "... 1 line, from ''"


# endregion
# region CSV


def test_csv_wraps_every_line():
    entries = [make_entry(["a", "b"]), make_entry(["c"], created_at=2)]
    assert to_csv(entries, '"') == '"a", "b", "c"'


def test_csv_without_wrap():
    assert to_csv([make_entry(["a", "b"])]) == "a, b"


def test_csv_escapes_wrap_character():
    assert wrap_token('say "hi"', '"') == '"say \\"hi\\""'


def test_csv_escapes_only_first_character_of_wrap():
    assert wrap_token("a'b<c", "'<") == "'<a\\'b<c'<"


def test_csv_of_nothing_is_none():
    assert to_csv([]) is None
    assert to_csv([make_entry([""])]) is None


# endregion
