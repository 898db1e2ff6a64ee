from packer.formatting import format_selection


def test_empty_selection_is_dash():
    assert format_selection(()) == "-"


def test_single_index():
    assert format_selection((4,)) == "4"


def test_indices_comma_separated_ascending():
    assert format_selection((2, 7)) == "2,7"
    assert format_selection((9, 8)) == "8,9"
