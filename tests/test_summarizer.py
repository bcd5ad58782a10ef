import pytest

from web_tournament.summarizer import focus_terms, focused_summary


def test_focus_terms_lowercase_whitespace_tokens():
    assert focus_terms("  Best  LAPTOPS\t2024 ") == ["best", "laptops", "2024"]


def test_keeps_first_paragraph_when_nothing_matches():
    assert focused_summary("alpha\nbeta", "zzz") == "alpha"


def test_keeps_matching_paragraphs_in_order():
    text = "intro line\nlaptop review\nweather today\nbattery and Laptop"

    summary = focused_summary(text, "Laptop")

    assert summary == "intro line\n\nlaptop review\n\nbattery and Laptop"


def test_matching_is_case_insensitive_substring():
    summary = focused_summary("Header\nBattery life is long\nOther", "BATTERY")

    assert summary == "Header\n\nBattery life is long"


def test_empty_lines_are_dropped():
    assert focused_summary("a\n\n\nb", "b") == "a\n\nb"


def test_empty_focus_keeps_only_first_paragraph():
    assert focused_summary("one\ntwo", "") == "one"


def test_empty_text_gives_empty_summary():
    assert focused_summary("", "anything") == ""


def test_summary_is_cut_to_max_length():
    text = "\n".join(["laptop " * 100] * 10)

    summary = focused_summary(text, "laptop", max_length=2000)

    assert len(summary) == 2000


@pytest.mark.parametrize("max_length", [1, 10, 99, 500])
def test_summary_never_exceeds_max_length(max_length):
    text = "\n".join(f"paragraph {i} about laptops and batteries" for i in range(50))

    summary = focused_summary(text, "laptops", max_length=max_length)

    assert summary
    assert len(summary) <= max_length


def test_single_long_paragraph_is_truncated():
    summary = focused_summary("x" * 5000, "nothing", max_length=300)

    assert summary == "x" * 300
