# test_window.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from filepick.errors import ConfigurationError
from filepick.display.animations.window import Role, WindowView


ITEMS = [f"item{i}" for i in range(10)]


class TestWindowView:
    """Slicing and row roles."""

    def test_indexes(self):
        view = WindowView.at(ITEMS, 2, 5)
        assert view.first_index == 2
        assert view.middle_index == 4
        assert view.last_index == 6
        assert view.items == ("item2", "item3", "item4", "item5", "item6")

    def test_roles(self):
        view = WindowView.at(ITEMS, 0, 4)
        assert list(view.rows()) == [
            ("item0", Role.PLAIN),
            ("item1", Role.PLAIN),
            ("item2", Role.MIDDLE),
            ("item3", Role.LAST),
        ]

    def test_single_row_is_middle(self):
        view = WindowView.at(ITEMS, 3, 1)
        assert list(view.rows()) == [("item3", Role.MIDDLE)]

    def test_two_rows(self):
        view = WindowView.at(ITEMS, 3, 2)
        assert [role for _, role in view.rows()] == [Role.PLAIN, Role.MIDDLE]

    def test_last_window(self):
        view = WindowView.at(ITEMS, 7, 3)
        assert view.middle == "item8"
        assert view.last_index == 9

    @pytest.mark.parametrize("offset,height", [(-1, 3), (8, 3), (0, 11), (0, 0)])
    def test_out_of_bounds(self, offset, height):
        with pytest.raises(ConfigurationError):
            WindowView.at(ITEMS, offset, height)
