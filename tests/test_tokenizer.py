import pytest

from deskmenu.errors import TokenizeError
from deskmenu.tokenizer import split_command


@pytest.mark.parametrize(
    "text, expected",
    [
        ("echo hi", ["echo", "hi"]),
        ("  spaced   out  ", ["spaced", "out"]),
        ("sh -c 'echo $HOME'", ["sh", "-c", "echo $HOME"]),
        ('app "two words" x', ["app", "two words", "x"]),
        (r"app one\ arg", ["app", "one arg"]),
        ("app *.txt ~", ["app", "*.txt", "~"]),
        ("app #not-a-comment", ["app", "#not-a-comment"]),
        ('app ""', ["app", ""]),
    ],
)
def test_split(text, expected):
    assert split_command(text) == expected


@pytest.mark.parametrize("text", ["app 'open", 'app "open', "app \\", "", "   "])
def test_split_errors(text):
    with pytest.raises(TokenizeError):
        split_command(text)
