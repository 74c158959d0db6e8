import pytest

from algobox.patterns import (
    double_indent_triangle,
    fixed_patterns,
    floyd_triangle,
    half_diamond,
    hollow_left_triangle,
    hollow_number_pyramid,
    hollow_right_triangle,
    hollow_square,
    hourglass_gap,
    inverted_triangle,
    left_arrow,
    left_triangle,
    mirrored_digit_pyramid,
    number_pyramid,
    power_triangle,
    repeated_digit_triangle,
    right_aligned_triangle,
    right_arrow,
    right_diamond,
    solid_diamond,
    solid_pyramid,
    star_pyramid,
)


def test_fixed_pattern_names_in_order():
    assert list(fixed_patterns()) == [f"Question {i}" for i in range(1, 11)]


def test_question_1_shrinks_right_aligned():
    rows = fixed_patterns()["Question 1"]
    assert [row.count("*") for row in rows] == [5, 4, 3, 2, 1]
    assert all(len(row) == 5 and row.endswith("*") for row in rows)


def test_question_4_and_5_are_vertically_symmetric():
    patterns = fixed_patterns()
    for name in ("Question 4", "Question 5"):
        rows = patterns[name]
        assert rows == rows[::-1]
    assert all(len(row) == 7 for row in patterns["Question 5"])


def test_question_8_rows_read_the_same_both_ways():
    rows = fixed_patterns()["Question 8"]
    assert len(rows) == 10
    for row in rows:
        cells = row.split()
        assert cells == cells[::-1]
    assert rows[-1].split()[9] == "0"


def test_question_10_stops_after_first_row():
    rows = fixed_patterns()["Question 10"]
    assert rows[0].split() == ["10", "00", "00", "00", "00", "00"]
    assert rows[1] == ""


def test_inverted_triangle_rows():
    rows = inverted_triangle(6)
    for i, row in enumerate(rows):
        assert len(row) == 6
        assert row == " " * i + "*" * (6 - i)


def test_double_indent_triangle_indent_grows_by_two():
    rows = double_indent_triangle(5)
    indents = [len(row) - len(row.lstrip()) for row in rows]
    assert indents == [0, 2, 4, 6, 8]
    assert [row.count("*") for row in rows] == [5, 4, 3, 2, 1]


def test_star_pyramid_matches_source_drawing():
    assert [row.strip() for row in star_pyramid(4)] == ["*", "* *", "* * *", "* * * *"]


def test_right_diamond_symmetric_with_full_middle():
    rows = right_diamond(5)
    assert len(rows) == 9
    assert rows == rows[::-1]
    assert rows[4] == "*" * 5


def test_hourglass_gap_matches_source_drawing():
    rows = [row.rstrip() for row in hourglass_gap(8)]
    assert rows == [
        "**** ***",
        "***   **",
        "**     *",
        "*",
        "",
        "*      *",
        "**    **",
        "***  ***",
        "********",
    ]


def test_number_pyramid_matches_source_drawing():
    rows = number_pyramid(5)
    assert [row.strip() for row in rows] == ["1", "123", "12345", "1234567", "123456789"]
    assert all(len(row) == 5 - 1 + 2 * (i + 1) - 1 - i for i, row in enumerate(rows))


def test_hollow_number_pyramid_last_row_from_source():
    rows = hollow_number_pyramid(8)
    assert rows[-1] == "800000000000008"
    assert rows[0] == " " * 7 + "1"


def test_mirrored_digit_pyramid_matches_source_drawing():
    rows = [row.strip() for row in mirrored_digit_pyramid(8)]
    assert rows == [
        "8",
        "787",
        "67876",
        "5678765",
        "456787654",
        "34567876543",
        "2345678765432",
        "123456787654321",
    ]


def test_hollow_left_triangle_matches_source_drawing():
    assert hollow_left_triangle(8) == [
        "*",
        "**",
        "* *",
        "*  *",
        "*   *",
        "*    *",
        "*     *",
        "********",
    ]


def test_hollow_right_triangle_is_left_one_shifted():
    left = hollow_left_triangle(7)
    right = hollow_right_triangle(7)
    assert [row.lstrip() for row in right] == [row.lstrip() for row in left]
    assert all(len(row) == 7 for row in right)


def test_arrows_match_source_drawing():
    assert right_arrow(5) == ["  *  ", "   * ", "*****", "   * ", "  *  "]
    assert left_arrow(5) == ["  *  ", " *   ", "*****", " *   ", "  *  "]


def test_arrows_mirror_each_other():
    assert [row[::-1] for row in right_arrow(7)] == left_arrow(7)


def test_right_aligned_triangle_star_counts():
    rows = right_aligned_triangle(4)
    assert len(rows) == 5
    assert all(len(row) == 5 for row in rows)
    assert [row.count("*") for row in rows] == [0, 1, 2, 3, 4]
    assert rows[0].strip() == ""


def test_repeated_digit_triangle_matches_source_drawing():
    assert repeated_digit_triangle(6) == ["1", "22", "333", "4444", "55555", "666666"]


def test_solid_pyramid_matches_source_drawing():
    assert [row.strip() for row in solid_pyramid(6)] == [
        "*",
        "***",
        "*****",
        "*******",
        "*********",
        "***********",
    ]


def test_floyd_triangle_matches_source_drawing():
    assert [row.split() for row in floyd_triangle(6)] == [
        ["1"],
        ["2", "3"],
        ["4", "5", "6"],
        ["7", "8", "9", "10"],
        ["11", "12", "13", "14", "15"],
        ["16", "17", "18", "19", "20", "21"],
    ]


def test_half_diamond_matches_source_drawing():
    assert half_diamond(3) == ["*", "**", "***", "**", "*"]


def test_solid_diamond_symmetric_with_widest_middle():
    rows = solid_diamond(4)
    assert rows == rows[::-1]
    assert rows[3] == "*" * 7
    assert rows[:4] == solid_pyramid(4)


def test_hollow_square_border():
    rows = hollow_square(6)
    assert rows[0] == rows[-1] == "*" * 6
    for row in rows[1:-1]:
        assert row[0] == row[-1] == "*"
        assert row[1:-1].strip() == ""


def test_left_triangle_matches_source_drawing():
    assert left_triangle(5) == ["*", "**", "***", "****", "*****"]


@pytest.mark.parametrize("n", [-3, -1])
def test_negative_size_gives_no_rows(n):
    assert solid_pyramid(n) == []
    assert floyd_triangle(n) == []