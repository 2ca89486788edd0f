from math import gcd


def _level_differences(levels: list[int], unique_levels: list[int]) -> list[int]:
    differences = []
    prev_level = 0
    for level in levels:
        if level != prev_level:
            differences.append(abs(level - prev_level))
        prev_level = level
    # Absolute levels keep the top-level width even with a single transition
    differences.extend(unique_levels)
    return differences


def find_indentation_unit(levels: list[int]) -> int | None:
    """
    Finds the indentation unit from a sequence of indentation levels.

    The unit is the greatest common divisor of every change between
    consecutive levels and of every distinct non-zero level. A result of 1
    is returned as is: it is either genuine 1-space indentation or a mix of
    widths that only share 1 as a divisor.

    Args:
        levels: Leading-space counts of the content lines, in document order.

    Returns:
        The number of spaces per nesting level, or None when the levels carry
        no indentation signal.
    """
    if not levels:
        return None

    unique_levels = sorted({level for level in levels if level > 0})
    if not unique_levels:
        # Every content line sits at column 0
        return None

    differences = _level_differences(levels, unique_levels)
    if not differences:
        return None

    result = differences[0]
    for diff in differences[1:]:
        result = gcd(result, diff)
        if result == 1:
            break

    if result == 0:
        return None
    return result
