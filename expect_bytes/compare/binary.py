"""Binary comparison helpers: first-divergence lookup and windowed hex rendering."""

BYTE_WINDOW_HALF_SIZE = 4

EXPECTED_HIGHLIGHT = "\x1b[32m"
ACTUAL_HIGHLIGHT = "\x1b[31m"
RESET = "\x1b[0m"

_ASCII_WHITESPACE = b"\t\n\x0c\r"


def first_diff_index(expected, actual):
    """Returns the first index where `expected` and `actual` differ.

    When one sequence is a prefix of the other, the length of the shorter one is
    returned. Equal sequences give None.
    """
    max_len = min(len(expected), len(actual))
    for index in range(max_len):
        if expected[index] != actual[index]:
            return index
    if len(expected) != len(actual):
        return max_len
    return None


def window_bounds(length, diff_idx):
    start = max(0, diff_idx - BYTE_WINDOW_HALF_SIZE)
    end = min(length - 1, diff_idx + BYTE_WINDOW_HALF_SIZE)
    return start, end


def display_char(byte):
    if byte == 0:
        return "⋄"
    if 0x21 <= byte <= 0x7E:
        return chr(byte)
    if byte == 0x20:
        return " "
    if byte in _ASCII_WHITESPACE:
        return "_"
    if byte < 0x80:
        return "•"
    return "×"


def character_panel(data):
    return "".join(display_char(byte) for byte in data)


def render_window(data, diff_idx, is_expected):
    """Formats the bytes around `diff_idx` as hex codes followed by a character panel.

    The byte at `diff_idx` is highlighted green on the expected side and red on the
    actual side. If the data ends before `diff_idx`, nothing is highlighted.
    """
    start, end = window_bounds(len(data), diff_idx)
    window = bytes(data[start:end + 1])
    highlight = EXPECTED_HIGHLIGHT if is_expected else ACTUAL_HIGHLIGHT

    codes = []
    for offset, byte in enumerate(window):
        code = "{:02x}".format(byte)
        if start + offset == diff_idx:
            code = highlight + code + RESET
        codes.append(code)
    return "{} {}".format(" ".join(codes), character_panel(window))


def marker_offset(diff_idx):
    return "   " * min(diff_idx, BYTE_WINDOW_HALF_SIZE)
