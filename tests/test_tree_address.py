from __future__ import annotations

import unittest


class TreeAddressTests(unittest.TestCase):
    def _tree(self):
        from nock import assoc

        # [[4 5] [6 14 15]]: each leaf is its own address.
        return assoc([[4, 5], [6, 14, 15]])

    def test_root_head_and_tail(self) -> None:
        from nock import Cell, resolve

        for noun in (0, 17, Cell(1, 2), Cell(Cell(1, 2), Cell(3, 4))):
            with self.subTest(noun=noun):
                self.assertEqual(resolve(1, noun), noun)

        self.assertEqual(resolve(2, Cell(8, 9)), 8)
        self.assertEqual(resolve(3, Cell(8, 9)), 9)

    def test_addresses_follow_head_tail_bits(self) -> None:
        from nock import Cell, resolve

        tree = self._tree()
        cases = {
            2: Cell(4, 5),
            3: Cell(6, Cell(14, 15)),
            4: 4,
            5: 5,
            6: 6,
            7: Cell(14, 15),
            14: 14,
            15: 15,
        }
        for address, want in cases.items():
            with self.subTest(address=address):
                self.assertEqual(resolve(address, tree), want)

    def test_zero_address_is_invalid(self) -> None:
        from nock import Cell, InvalidAddressError, resolve

        for noun in (0, 1, Cell(0, 0), self._tree()):
            with self.subTest(noun=noun):
                with self.assertRaises(InvalidAddressError) as ctx:
                    resolve(0, noun)
                self.assertEqual(ctx.exception.address, 0)

    def test_non_atom_addresses_are_invalid(self) -> None:
        from nock import Cell, InvalidAddressError, MissingChildError, resolve

        for address in (Cell(1, 1), -2):
            with self.subTest(address=address):
                with self.assertRaises(InvalidAddressError) as ctx:
                    resolve(address, self._tree())
                self.assertNotIsInstance(ctx.exception, MissingChildError)

    def test_missing_child_reports_axis(self) -> None:
        from nock import InvalidAddressError, MissingChildError, resolve

        with self.assertRaises(MissingChildError) as ctx:
            resolve(2, 7)
        self.assertEqual((ctx.exception.address, ctx.exception.axis, ctx.exception.atom), (2, 1, 7))
        self.assertIsInstance(ctx.exception, InvalidAddressError)

        with self.assertRaises(MissingChildError) as ctx:
            resolve(9, self._tree())
        self.assertEqual((ctx.exception.address, ctx.exception.axis, ctx.exception.atom), (9, 4, 4))

    def test_missing_child_beyond_decimal_limit(self) -> None:
        from nock import MissingChildError, resolve

        huge = 2**20000
        with self.assertRaises(MissingChildError) as ctx:
            resolve(huge, 5)
        self.assertEqual((ctx.exception.address, ctx.exception.axis, ctx.exception.atom), (huge, 1, 5))
        self.assertLess(len(str(ctx.exception)), 1000)

        with self.assertRaises(MissingChildError) as ctx:
            resolve(2, huge)
        self.assertEqual(ctx.exception.atom, huge)

    def test_negative_address_beyond_decimal_limit(self) -> None:
        from nock import InvalidAddressError, resolve

        with self.assertRaises(InvalidAddressError) as ctx:
            resolve(-(2**20000), 5)
        self.assertTrue(str(ctx.exception).startswith("invalid tree address -0x1"))

    def test_large_addresses_walk_deep_trees(self) -> None:
        from nock import Cell, resolve

        tree = 0
        for depth in range(1, 301):
            tree = Cell(tree, depth)
        self.assertEqual(resolve(2**300, tree), 0)
        self.assertEqual(resolve(2**300 + 1, tree), 1)
        self.assertEqual(resolve(3, tree), 300)


if __name__ == "__main__":
    unittest.main()
