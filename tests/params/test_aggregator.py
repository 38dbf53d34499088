#!filepath: tests/params/test_aggregator.py
import pytest

from activity.l10n.translator import Translator
from activity.params.aggregator import ArrayAggregator


@pytest.fixture
def aggregator(renderer) -> ArrayAggregator:
    return ArrayAggregator(renderer)


def test_empty_list_is_empty_string(aggregator):
    assert aggregator.join([], "file", True, True) == ""
    assert aggregator.join([], "", False, False) == ""


def test_two_files_stripped(aggregator, en):
    out = aggregator.join(["A/B.txt", "C/D.txt"], "file", True, False)

    assert out == en.t("%s and %s", ["B.txt", "D.txt"])
    assert out == "B.txt and D.txt"


def test_two_files_stripped_german(aggregator, de):
    aggregator.set_l10n(de)

    out = aggregator.join(["A/B.txt", "C/D.txt"], "file", True, False)

    assert out == de.t("%s and %s", ["B.txt", "D.txt"])
    assert out == "B.txt und D.txt"


def test_untyped_items_are_not_reduced(aggregator, en, de):
    assert aggregator.join(["A/B.txt", "C/D.txt"], "", True, False) == en.t("%s and %s", ["A/B.txt", "C/D.txt"])

    aggregator.set_l10n(de)
    assert aggregator.join(["A/B.txt", "C/D.txt"], "", True, False) == "A/B.txt und C/D.txt"


def test_files_without_strip_path_keep_normalized_path(aggregator):
    assert aggregator.join(["/A/B.txt", "C/D.txt/"], "file", False, False) == "A/B.txt and C/D.txt"


def test_single_item(aggregator):
    assert aggregator.join(["/A/B.txt"], "file", True, False) == "B.txt"


def test_up_to_four_items_use_separator_then_and(aggregator):
    out = aggregator.join(["a", "b", "c", "d"], "", False, False)
    assert out == "a, b, c and d"


def test_five_or_more_items_are_truncated(aggregator):
    out = aggregator.join(["a", "b", "c", "d", "e"], "", False, False)
    assert out == "a, b, c and 2 more"


def test_truncation_plural_forms(aggregator, de):
    aggregator.set_l10n(de)

    assert aggregator.join(["a", "b", "c", "d", "e", "f"], "", False, False) == "a, b, c und 3 weitere"

    aggregator.set_l10n(Translator("xx", {"%s and %n more": ["%s + %n other", "%s + %n others"]}))
    # 至少截掉 2 个，只会用到复数形式
    assert aggregator.join(list("abcde"), "", False, False) == "a, b, c + 2 others"


def test_highlight_only_changes_items(aggregator):
    out = aggregator.join(["/A/B.txt", "/C/D.txt"], "file", True, True)

    assert out == (
        '<a class="filename tooltip" href="/index.php/apps/files?dir=%2FA&scrollto=B.txt" title="in A">B.txt</a>'
        " and "
        '<a class="filename tooltip" href="/index.php/apps/files?dir=%2FC&scrollto=D.txt" title="in C">D.txt</a>'
    )


def test_highlight_plain_items(aggregator):
    assert aggregator.join(["x", "<y>"], "", False, True) == "<strong>x</strong> and <strong>&lt;y&gt;</strong>"


def test_plain_items_are_escaped_like_files(aggregator):
    assert aggregator.join(["<a>", "b & c"], "", False, False) == "&lt;a&gt; and b &amp; c"
    assert aggregator.join(["/x/<a>", "/y/b & c"], "file", True, False) == "&lt;a&gt; and b &amp; c"
