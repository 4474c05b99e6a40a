import io

from passerine.aspen.status import AspenError, Kind, Status


class _Terminal(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_single_line_is_right_aligned():
    out = io.StringIO()
    Status.warn().log("hello", out)
    assert out.getvalue() == "     Warning hello\n"


def test_tag_column_width_is_constant():
    for status in (Status.info(), Status.success(), Status.warn(), Status.fatal()):
        out = io.StringIO()
        status.log("msg", out)
        text = out.getvalue()
        assert text[:12].strip() == status.label
        assert text[12:] == " msg\n"


def test_multiline_message():
    out = io.StringIO()
    Status.fatal().log("first\nsecond", out)
    assert out.getvalue() == "\nFatal first\nsecond\n\n"


def test_constructors_pick_kinds():
    assert Status.info().kind is Kind.INFO
    assert Status.success().kind is Kind.SUCCESS
    assert Status.warn().kind is Kind.WARN
    assert Status.fatal().label == "Fatal"


def test_colour_on_terminal():
    out = _Terminal()
    Status.fatal().log("boom", out)
    text = out.getvalue()
    assert "\x1b[1;31mFatal\x1b[0m" in text
    assert text.endswith(" boom\n")


def test_no_colour_off_terminal():
    out = io.StringIO()
    Status.success().log("ok", out)
    assert "\x1b" not in out.getvalue()


def test_defaults_to_stderr(capsys):
    Status.info().log("to stderr")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.endswith("Info to stderr\n")


def test_aspen_error_carries_message():
    error = AspenError("went wrong")
    assert str(error) == "went wrong"
    out = io.StringIO()
    Status.fatal().log(str(error), out)
    assert out.getvalue() == "       Fatal went wrong\n"