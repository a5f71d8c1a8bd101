"""
Tests for SelectionModel masking and bounds.
"""
from spritegrid.models.selection import BoundingBox, MaskConstraint, SelectionModel


class TestMembership:

    def test_starts_empty(self):
        sel = SelectionModel(4)
        assert sel.is_empty()
        assert len(sel) == 0

    def test_add_is_unique(self):
        sel = SelectionModel(4)
        sel.add(3)
        sel.add(3)
        sel.add_many([3, 5])
        assert sel.indices == frozenset({3, 5})

    def test_replace_and_clear(self):
        sel = SelectionModel(4, [1, 2])
        sel.replace([7])
        assert list(sel) == [7]
        sel.clear()
        assert sel.is_empty()

    def test_iteration_is_sorted(self):
        assert list(SelectionModel(4, [9, 2, 5])) == [2, 5, 9]


class TestMasking:

    def test_no_selection_means_no_constraint(self):
        assert SelectionModel(4).constraint_for(0) is MaskConstraint.NONE

    def test_constraint_from_start_cell(self):
        sel = SelectionModel(4, [0, 1])
        assert sel.constraint_for(0) is MaskConstraint.INSIDE
        assert sel.constraint_for(5) is MaskConstraint.OUTSIDE

    def test_allows(self):
        sel = SelectionModel(4, [0, 1])
        assert sel.allows(1, MaskConstraint.INSIDE)
        assert not sel.allows(2, MaskConstraint.INSIDE)
        assert sel.allows(2, MaskConstraint.OUTSIDE)
        assert not sel.allows(0, MaskConstraint.OUTSIDE)
        assert sel.allows(0, MaskConstraint.NONE)


class TestBoundingBox:

    def test_empty_has_no_box(self):
        assert SelectionModel(4).bounding_box() is None

    def test_box_from_membership(self):
        box = SelectionModel(4, [5, 10]).bounding_box()
        assert box == BoundingBox(1, 2, 1, 2)
        assert box.width == 2
        assert box.height == 2

    def test_box_follows_changes(self):
        sel = SelectionModel(4, [0])
        sel.add(15)
        assert sel.bounding_box() == BoundingBox(0, 3, 0, 3)
