import pytest

from fpvsetup.model.aspect import COMMON_ASPECT_RATIOS, find_common_aspect_ratio, parse_aspect_ratio
from fpvsetup.model.errors import InvalidInputError


def test_catalogue_order_and_values():
    pairs = [pair for _, pair in COMMON_ASPECT_RATIOS]

    assert pairs[0] == (16.0, 9.0)
    assert (21.0, 9.0) in pairs
    for ratio, (n, d) in COMMON_ASPECT_RATIOS:
        assert ratio == pytest.approx(n / d)


@pytest.mark.parametrize(
    "ratio, expected",
    [
        (1.78, (16.0, 9.0)),
        (1.6, (16.0, 10.0)),
        (2.33, (21.0, 9.0)),
        (1.9, (17.0, 9.0)),
        (3.5, (32.0, 9.0)),
        (1.02, (1.0, 1.0)),
    ],
)
def test_find_common_aspect_ratio(ratio, expected):
    assert find_common_aspect_ratio(ratio, 0.1) == expected


def test_first_match_wins():
    # 1.3 is within 0.1 of both 4:3 and 5:4; 4:3 comes first
    assert find_common_aspect_ratio(1.3, 0.1) == (4.0, 3.0)


def test_no_match():
    assert find_common_aspect_ratio(10.0, 0.1) is None
    assert find_common_aspect_ratio(1.7, 0.01) is None


@pytest.mark.parametrize(
    "text, expected",
    [("16:9", 16 / 9), ("21/9", 21 / 9), (" 4 : 3 ", 4 / 3), ("1.5", 1.5)],
)
def test_parse_aspect_ratio(text, expected):
    assert parse_aspect_ratio(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "wide", "16:", ":9", "16:0", "-4:3", "0"])
def test_parse_aspect_ratio_rejects(text):
    with pytest.raises(InvalidInputError):
        parse_aspect_ratio(text)
