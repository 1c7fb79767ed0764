from __future__ import annotations

import unittest


class AssociatorTests(unittest.TestCase):
    def test_flat_sequences_nest_to_the_right(self) -> None:
        from nock import Cell, assoc

        self.assertEqual(assoc([1, 2]), Cell(1, 2))
        self.assertEqual(assoc([1, 2, 3]), Cell(1, Cell(2, 3)))
        self.assertEqual(assoc((1, 2, 3, 4)), Cell(1, Cell(2, Cell(3, 4))))

    def test_nested_groups_associate_in_any_position(self) -> None:
        from nock import Cell, assoc

        self.assertEqual(assoc([[1, 2], 3]), Cell(Cell(1, 2), 3))
        self.assertEqual(
            assoc([[132, 19], [10, [37, [4, 0, 3]]]]),
            Cell(Cell(132, 19), Cell(10, Cell(37, Cell(4, Cell(0, 3))))),
        )
        self.assertEqual(assoc([7, [4, 0, 1], [4, 0, 1]]), Cell(7, Cell(Cell(4, Cell(0, 1)), Cell(4, Cell(0, 1)))))

    def test_single_elements(self) -> None:
        from nock import Cell, assoc

        self.assertEqual(assoc([5]), 5)
        self.assertEqual(assoc([[1, 2]]), Cell(1, 2))
        self.assertEqual(assoc(9), 9)
        cell = Cell(1, 2)
        self.assertIs(assoc(cell), cell)
        self.assertEqual(assoc([cell, 3]), Cell(cell, 3))

    def test_empty_sequence_is_returned_unchanged(self) -> None:
        from nock import assoc

        empty: list[object] = []
        self.assertIs(assoc(empty), empty)
        self.assertEqual(assoc(()), ())

    def test_long_sequences_do_not_recurse(self) -> None:
        from nock import assoc, noun_info, resolve

        items = list(range(50000))
        noun = assoc(items)
        self.assertEqual(noun_info(noun).cells, 49999)
        self.assertEqual(resolve(2, noun), 0)
        self.assertEqual(resolve(2**50000 - 1, noun), 49999)

    def test_rejects_non_nouns(self) -> None:
        from nock import InvalidNounError, assoc

        for items in ([1, -1], [1, []], ["a", 1], [1, [2, 3.0]], None):
            with self.subTest(items=items):
                with self.assertRaises(InvalidNounError):
                    assoc(items)


if __name__ == "__main__":
    unittest.main()
