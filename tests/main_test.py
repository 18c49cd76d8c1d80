"""Test cases for the command line entry point."""
import io
import unittest
from unittest import mock

from sudoku_gen import main as main_module
from tests.sudoku_test import SAMPLE, SOLVED


class TestMain(unittest.TestCase):
    @mock.patch("sudoku_gen.main.generate_puzzle", return_value=(SAMPLE, SOLVED))
    def test_prints_label_and_rows(self, generate_mock):
        with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            main_module.main()
        generate_mock.assert_called_once_with(40)

        lines = stdout.getvalue().splitlines()
        self.assertEqual(lines[0], "Generated Sudoku Puzzle:")
        self.assertEqual(len(lines), 10)
        for line, row in zip(lines[1:], SAMPLE):
            self.assertEqual([int(token) for token in line.split(" ")], row)

    @mock.patch("sudoku_gen.main.generate_puzzle", side_effect=RuntimeError("boom"))
    def test_failure_is_logged_and_raised(self, generate_mock):
        with self.assertLogs("sudoku_gen.main", level="ERROR") as logs:
            with self.assertRaises(RuntimeError):
                main_module.main()
        self.assertIn("Error generating puzzle", logs.output[0])


if __name__ == "__main__":
    unittest.main()
