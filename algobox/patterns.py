"""Text patterns of stars and digits, returned as lists of lines."""

from __future__ import annotations

from typing import Dict, List


def _question_1() -> List[str]:
    return [" " * (5 - i) + "*" * i for i in range(5, 0, -1)]


def _question_2() -> List[str]:
    return ["  " * (5 - i) + "*" * i for i in range(5, 0, -1)]


def _question_3() -> List[str]:
    return [
        "  " * (6 - i) + "".join("  " if k % 2 else "* " for k in range(2 * i + 1))
        for i in range(5)
    ]


def _question_4() -> List[str]:
    rising = [" " * (4 - i) + "*" * (i + 1) for i in range(5)]
    falling = [" " * (5 - i) + "*" * i for i in range(4, 0, -1)]
    return rising + falling


def _question_5() -> List[str]:
    opening = ["*" * (3 - i) + " " * (2 * i + 1) + "*" * (3 - i) for i in range(4)]
    closing = ["*" * (3 - i) + " " * (2 * i + 1) + "*" * (3 - i) for i in range(2, -1, -1)]
    return opening + closing


def _question_6() -> List[str]:
    return [
        "  " * (6 - i) + "".join(f" {j}" for j in range(1, 2 * i))
        for i in range(1, 6)
    ]


def _question_7() -> List[str]:
    rows = []
    for i in range(5):
        cells = "".join(
            f"{i + 1} " if k in (0, 2 * i) else "0 " for k in range(2 * i + 1)
        )
        rows.append("  " * (4 - i) + cells)
    return rows


def _question_8() -> List[str]:
    rows = []
    for i in range(10, 0, -1):
        rising = "".join("0 " if k == 10 else f"{k} " for k in range(i, 11))
        falling = "".join(f"{k} " for k in range(9, i - 1, -1))
        rows.append("  " * (i - 1) + rising + falling)
    return rows


def _question_9() -> List[str]:
    return [
        "".join("* " if j in (i, 0) or i == 4 else "  " for j in range(i, -1, -1))
        for i in range(5)
    ]


def _question_10() -> List[str]:
    # The row loop ends after its first pass, so only row 0 is produced,
    # followed by the blank line that closes it.
    rows: List[str] = []
    for i in range(1):
        value = 1
        cells = []
        for k in range(6):
            cells.append(f"  {value}{i}")
            value = int(value * (i - k) / (k + 1))
        rows.extend(["".join(cells), ""])
    return rows


def fixed_patterns() -> Dict[str, List[str]]:
    """The ten fixed exercise patterns, keyed ``Question 1`` to ``Question 10``."""
    builders = (
        _question_1,
        _question_2,
        _question_3,
        _question_4,
        _question_5,
        _question_6,
        _question_7,
        _question_8,
        _question_9,
        _question_10,
    )
    return {f"Question {number}": build() for number, build in enumerate(builders, 1)}


def power_triangle(n: int) -> List[str]:
    """Row ``i`` lists 2**(i+j) for j below i, each shown as a ``%g`` float."""
    return [
        "".join(f"{2.0 ** (i + j):g}  " for j in range(i))
        for i in range(1, n + 1)
    ]


def inverted_triangle(n: int) -> List[str]:
    """Rows of shrinking stars, each shifted one column further right."""
    return [" " * (i - 1) + "*" * (n - i + 1) for i in range(1, n + 1)]


def double_indent_triangle(n: int) -> List[str]:
    """Rows of shrinking stars, each shifted two columns further right."""
    return [" " * (2 * i) + "*" * (n - i) for i in range(n)]


def star_pyramid(n: int) -> List[str]:
    """Pyramid of space-separated stars."""
    return [
        " " * (n - i) + "".join(" " if j % 2 == 0 else "*" for j in range(1, 2 * i))
        for i in range(1, n + 1)
    ]


def right_diamond(n: int) -> List[str]:
    """Right-aligned triangle growing to ``n`` stars, then shrinking back."""
    rising = [" " * (n - i) + "*" * i for i in range(1, n + 1)]
    falling = [" " * i + "*" * (n - i) for i in range(1, n)]
    return rising + falling


def hourglass_gap(n: int) -> List[str]:
    """A block of stars with a diamond-shaped gap opening in the middle."""
    half = n // 2
    top = [
        "".join(" " if half - i <= j <= half + i else "*" for j in range(n))
        for i in range(half + 1)
    ]
    bottom = [
        "".join("*" if j <= i or j >= n - i - 1 else " " for j in range(n))
        for i in range(half)
    ]
    return top + bottom


def number_pyramid(n: int) -> List[str]:
    """Centred rows counting from 1 up to ``2*i - 1``."""
    return [
        " " * (n - i) + "".join(str(j) for j in range(1, 2 * i))
        for i in range(1, n + 1)
    ]


def hollow_number_pyramid(n: int) -> List[str]:
    """Centred rows with the row number at both ends and zeros between."""
    rows = []
    for i in range(1, n + 1):
        width = 2 * i - 1
        cells = "".join(str(i) if j in (1, width) else "0" for j in range(1, width + 1))
        rows.append(" " * (n - i) + cells)
    return rows


def mirrored_digit_pyramid(n: int) -> List[str]:
    """Rows rising to ``n`` and falling back, digits taken modulo ten on the rise."""
    rows = []
    for i in range(1, n + 1):
        rising = "".join(str(j % 10) if j > n - i else " " for j in range(1, n + 1))
        falling = "".join(str(n - j) for j in range(1, i))
        rows.append(rising + falling)
    return rows


def _hollow_row(i: int, n: int) -> str:
    return "".join("*" if j in (1, i) or i == n else " " for j in range(1, i + 1))


def hollow_left_triangle(n: int) -> List[str]:
    """Outline of a left-aligned right triangle."""
    return [_hollow_row(i, n) for i in range(1, n + 1)]


def hollow_right_triangle(n: int) -> List[str]:
    """Outline of a right-aligned right triangle."""
    return [" " * (n - i) + _hollow_row(i, n) for i in range(1, n + 1)]


def right_arrow(n: int) -> List[str]:
    """Arrow pointing right in an ``n`` by ``n`` square; ``n`` is meant to be odd."""
    half = n // 2
    tip = half * 3
    return [
        "".join(
            "*" if i == half or j - i == half or i + j == tip else " "
            for j in range(n)
        )
        for i in range(n)
    ]


def left_arrow(n: int) -> List[str]:
    """Arrow pointing left in an ``n`` by ``n`` square; ``n`` is meant to be odd."""
    half = n // 2
    return [
        "".join(
            "*" if i == half or i - j == half or i + j == half else " "
            for j in range(n)
        )
        for i in range(n)
    ]


def right_aligned_triangle(n: int) -> List[str]:
    """``n + 1`` rows of width ``n + 1``; row ``i`` ends in ``i`` stars."""
    return [
        "".join(" " if j <= n - i else "*" for j in range(n + 1))
        for i in range(n + 1)
    ]


def repeated_digit_triangle(n: int) -> List[str]:
    """Row ``i`` repeats the number ``i`` exactly ``i`` times."""
    return [str(i) * i for i in range(1, n + 1)]


def solid_pyramid(n: int) -> List[str]:
    """Centred pyramid of solid star rows."""
    return [" " * (n - i) + "*" * (2 * i - 1) for i in range(1, n + 1)]


def floyd_triangle(n: int) -> List[str]:
    """Consecutive numbers from 1, one more on each row, each followed by a space."""
    rows = []
    counter = 1
    for i in range(n):
        rows.append("".join(f"{counter + j} " for j in range(i + 1)))
        counter += i + 1
    return rows


def half_diamond(n: int) -> List[str]:
    """Left-aligned star rows growing to ``n`` and shrinking back."""
    return ["*" * i for i in range(1, n + 1)] + ["*" * i for i in range(n - 1, 0, -1)]


def solid_diamond(n: int) -> List[str]:
    """Solid pyramid followed by its mirror image."""
    top = solid_pyramid(n)
    bottom = [" " * (n - i) + "*" * (2 * i - 1) for i in range(n - 1, 0, -1)]
    return top + bottom


def hollow_square(n: int) -> List[str]:
    """Outline of an ``n`` by ``n`` square."""
    return [
        "".join("*" if i in (1, n) or j in (1, n) else " " for j in range(1, n + 1))
        for i in range(1, n + 1)
    ]


def left_triangle(n: int) -> List[str]:
    """Left-aligned triangle of ``n`` star rows."""
    return ["*" * (i + 1) for i in range(n)]