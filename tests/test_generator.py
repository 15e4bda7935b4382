import dataclasses
import json
import unittest
from unittest.mock import MagicMock

from daily_crossword.core.constants import EMPTY_CELL, Direction
from daily_crossword.core.exceptions import ConfigurationError, ValidationError
from daily_crossword.engine.generator import (
    CrosswordConfig,
    CrosswordGenerator,
    generate_crossword,
)
from daily_crossword.engine.validator import ValidationResult
from daily_crossword.utils.pretty import format_clues, format_grid, pretty_print_puzzle


class CrosswordGeneratorTests(unittest.TestCase):
    def test_scenario_a_numbers_and_clues(self) -> None:
        result = generate_crossword(["SUN", "MOON", "STARS"], seed=11)
        entries = list(result.words)
        self.assertLessEqual(len(entries), 3)
        self.assertIn("STARS", [p.word for p in result.words.across])
        for entry in entries:
            self.assertGreater(entry.number, 0)
            self.assertTrue(entry.clue)

    def test_scenario_b_custom_clue_wins(self) -> None:
        result = generate_crossword(["SUN"], custom_clues={"SUN": "Daystar"})
        self.assertEqual(len(result.words.across), 1)
        self.assertEqual(result.words.across[0].clue, "Daystar")
        self.assertEqual(result.words.across[0].number, 1)

    def test_scenario_c_fallback_clue(self) -> None:
        result = generate_crossword(["zebras"])
        self.assertEqual(result.words.across[0].word, "ZEBRAS")
        self.assertEqual(result.words.across[0].clue, "A word meaning zebras")

    def test_scenario_e_empty_input(self) -> None:
        result = generate_crossword([])
        self.assertEqual(result.words.across, ())
        self.assertEqual(result.words.down, ())
        self.assertEqual(result.size, 12)
        self.assertTrue(all(cell == EMPTY_CELL for row in result.grid for cell in row))
        self.assertTrue(all(cell.is_empty for row in result.display_grid() for cell in row))

    def test_deterministic_phase_repeats(self) -> None:
        first = generate_crossword(["STARS", "SUN", "SEA"], seed=1)
        second = generate_crossword(["STARS", "SUN", "SEA"], seed=2)
        self.assertEqual(first.grid, second.grid)
        self.assertEqual(first.words, second.words)
        self.assertEqual([p.number for p in first.words.down], [1, 2])

    def test_invalid_config_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            CrosswordConfig(grid_size=2)
        with self.assertRaises(ConfigurationError):
            CrosswordConfig(max_words=-1)

    def test_validation_failure_raises(self) -> None:
        validator = MagicMock()
        validator.validate.return_value = ValidationResult(ok=False, messages=["broken"])
        generator = CrosswordGenerator(CrosswordConfig(seed=1), validator=validator)
        with self.assertRaises(ValidationError):
            generator.generate(["STARS"])

    def test_validation_can_be_disabled(self) -> None:
        validator = MagicMock()
        config = CrosswordConfig(seed=1, validate_output=False)
        result = CrosswordGenerator(config, validator=validator).generate(["STARS"])
        validator.validate.assert_not_called()
        self.assertEqual(len(result.words), 1)

    def test_to_jsonable_is_serializable(self) -> None:
        result = generate_crossword(["STARS", "SUN"], seed=4)
        payload = result.to_jsonable()
        json.dumps(payload)
        self.assertEqual(payload["size"], 12)
        self.assertEqual(payload["seed"], 4)
        self.assertEqual(payload["words"]["across"][0]["word"], "STARS")
        self.assertEqual(payload["words"]["down"][0]["direction"], Direction.DOWN.value)
        self.assertEqual(payload["words"]["down"][0]["number"], 2)
        self.assertEqual(payload["grid"][6][3], "S")
        self.assertEqual(payload["display"][6][3], {"letter": "S", "number": 1, "isEmpty": False})

    def test_result_is_immutable(self) -> None:
        result = generate_crossword(["STARS", "SUN"], seed=4)
        self.assertIsInstance(result.words.across, tuple)
        self.assertIsInstance(result.words.down, tuple)
        self.assertIsInstance(result.validation_messages, tuple)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            result.size = 8
        with self.assertRaises(dataclasses.FrozenInstanceError):
            result.words.across = ()


class PrettyPrintTests(unittest.TestCase):
    def setUp(self) -> None:
        self.result = generate_crossword(["STARS", "SUN"], seed=4)

    def test_format_grid_marks_empty_cells(self) -> None:
        lines = format_grid(self.result.grid).splitlines()
        self.assertEqual(len(lines), 14)
        self.assertIn(" S  T  A  R  S", lines[8])
        self.assertTrue(lines[2].startswith(" 0 |  ."))

    def test_format_clues_lists_both_directions(self) -> None:
        text = format_clues(self.result.words)
        self.assertIn("Across\n  1. Lights in the night sky (5)", text)
        self.assertIn("Down\n  2. A word meaning sun (3)", text)

    def test_pretty_print_writes_summary(self) -> None:
        stream = MagicMock()
        pretty_print_puzzle(self.result, stream=stream)
        self.assertTrue(stream.write.called)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
