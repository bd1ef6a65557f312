#!/usr/bin/env python3
"""
Passphrase Generator - CLI Tests
Argument parsing, configuration, prompts and logging.
"""

import io
import logging
import math
import string

import pytest

from .dictionary import load_builtin
from .exceptions import ConfigurationError, InvalidDiceSpec, InvalidTarget
from .logger import close_logging, get_logger, get_user_friendly_message, setup_logging
from .main import create_argument_parser, create_config_from_args, main, run
from .models import GeneratorConfig
from .prompts import DiceRollPrompt


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    close_logging()


# ============================================================================
# Configuration
# ============================================================================

class TestConfig:

    def test_defaults(self):
        args = create_argument_parser().parse_args([])
        config = create_config_from_args(args)

        assert config.bits == 72.0
        assert config.length is None
        assert config.dictionary == "eff"
        assert config.count == 1
        assert config.dice_sides is None
        assert config.log_level == "WARNING"

    def test_short_aliases(self):
        args = create_argument_parser().parse_args(
            ["-c", "3", "-w", "hex", "-l", "8", "-s", ":", "-v"]
        )
        config = create_config_from_args(args)

        assert config.count == 3
        assert config.dictionary == "hex"
        assert config.length == 8
        assert config.separator == ":"
        assert config.log_level == "DEBUG"

    def test_quiet_logs_errors_only(self):
        args = create_argument_parser().parse_args(["-q"])

        assert create_config_from_args(args).log_level == "ERROR"

    def test_length_overrides_bits(self):
        assert GeneratorConfig(bits=300.0, length=2).target().length == 2

    @pytest.mark.parametrize(
        "config",
        [
            GeneratorConfig(count=0),
            GeneratorConfig(length=0),
            GeneratorConfig(length=70000),
            GeneratorConfig(bits=0.0),
            GeneratorConfig(bits=float("nan")),
        ],
    )
    def test_invalid_values(self, config):
        with pytest.raises(ConfigurationError):
            config.validate()

    def test_invalid_dice(self):
        with pytest.raises(InvalidDiceSpec):
            GeneratorConfig(dice_sides=1).validate()


# ============================================================================
# Dice prompt
# ============================================================================

class TestDiceRollPrompt:

    def test_reasks_until_valid(self):
        answers = iter(["six\n", "9\n", "0\n", " 3 \n"])
        output = io.StringIO()

        prompt = DiceRollPrompt(input_func=lambda: next(answers), output=output)

        assert prompt(6) == 3
        assert output.getvalue().count("Enter a dice roll, 1-6: ") == 4
        assert "Parse error" in output.getvalue()
        assert "9 out of range 1-6" in output.getvalue()
        assert "0 out of range 1-6" in output.getvalue()

    def test_end_of_input_aborts(self):
        def closed():
            raise EOFError

        with pytest.raises(KeyboardInterrupt):
            DiceRollPrompt(input_func=closed, output=io.StringIO())(6)

    def test_reads_stdin_and_prompts_on_stderr(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("x\n4\n"))

        assert DiceRollPrompt()(6) == 4

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.count("Enter a dice roll, 1-6: ") == 2
        assert "Parse error" in captured.err


# ============================================================================
# Logging
# ============================================================================

class TestLogging:

    def test_log_file_receives_records(self, tmp_path):
        log_path = tmp_path / "logs" / "passgen.log"
        setup_logging("DEBUG", str(log_path), stream=io.StringIO())

        get_logger("passgen.test").info("hello log")
        close_logging()

        content = log_path.read_text(encoding="utf-8")
        assert "INFO" in content
        assert "passgen.test" in content
        assert "hello log" in content

    def test_level_filters_console(self):
        stream = io.StringIO()
        setup_logging("ERROR", stream=stream)

        get_logger(__name__).warning("hidden")
        get_logger(__name__).error("shown")

        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_child_names(self):
        assert get_logger().name == "passgen"
        assert get_logger("passgen.dictionary").name == "passgen.dictionary"
        assert get_logger("other").name == "passgen.other"
        assert isinstance(get_logger("x"), logging.Logger)

    def test_user_friendly_message(self):
        message = get_user_friendly_message(InvalidTarget("bits target must be positive"))

        assert "--bits" in message
        assert "bits target must be positive" in message

    def test_unknown_error_message(self):
        assert "Unexpected error" in get_user_friendly_message(RuntimeError("boom"))


# ============================================================================
# main()
# ============================================================================

class TestMain:

    def test_character_dictionary_has_no_separator(self, capsys):
        assert main(["--dictionary", "hex", "--length", "16"]) == 0

        line = capsys.readouterr().out.strip()
        assert len(line) == 16
        assert set(line) <= set("0123456789abcdef")

    def test_default_word_passphrase(self, capsys):
        assert main([]) == 0

        words = capsys.readouterr().out.strip().split(" ")
        # 72 bits at about 12.9 bits per EFF long list word
        assert len(words) == 6
        assert set(words) <= set(load_builtin("eff").units)

    def test_number_and_separator(self, capsys):
        assert main(["-n", "4", "-l", "3", "-s", "-"]) == 0

        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 4
        assert all(len(line.split("-")) == 3 for line in lines)

    def test_external_file(self, tmp_path, capsys):
        path = tmp_path / "words.txt"
        path.write_text("\n".join(["red", "green", "blue", "cyan"]), encoding="utf-8")

        assert main(["--file", str(path), "--length", "5"]) == 0

        words = capsys.readouterr().out.strip().split(" ")
        assert len(words) == 5
        assert set(words) <= {"red", "green", "blue", "cyan"}

    def test_verbose_report_goes_to_stderr(self, capsys):
        assert main(["--verbose", "--dictionary", "pin", "--length", "6"]) == 0

        captured = capsys.readouterr()
        assert len(captured.out.strip()) == 6
        assert "10^6 = 1000000" in captured.err
        assert "Attack time estimate" in captured.err

    def test_verbose_report_for_very_long_passphrase(self, capsys):
        assert main(["--length", "1500", "--verbose"]) == 0

        captured = capsys.readouterr()
        assert len(captured.out.split()) == 1500

        line = next(text for text in captured.err.splitlines() if "Combinations" in text)
        digits = line.split(" = ")[1]
        assert digits.isdigit()
        assert len(digits) == math.floor(1500 * math.log10(7776)) + 1
        assert int(digits[-12:]) == pow(7776, 1500, 10 ** 12)

    def test_huge_bits_target_is_rejected(self, capsys):
        assert main(["--bits", "1e15"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "65535 unit limit" in captured.err

    def test_list_dictionaries(self, capsys):
        assert main(["-D"]) == 0

        out = capsys.readouterr().out
        assert "eff: 7776 entries" in out
        assert "bip39: 2048 entries" in out
        assert "koremutake: 128 entries" in out

    def test_dice_mode_reads_rolls(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("1\n1\n1\n2\n"))

        assert main(["--dice", "6", "--dictionary", "pin", "--length", "2"]) == 0

        captured = capsys.readouterr()
        # prompts stay off stdout so the output can be redirected
        assert captured.out == "01\n"
        assert captured.err.count("Enter a dice roll, 1-6: ") == 4

    def test_dice_mode_interrupted(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))

        assert main(["--dice", "6", "--dictionary", "pin", "--length", "2"]) == 130

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Aborted" in captured.err

    @pytest.mark.parametrize(
        "argv",
        [
            ["--number", "0"],
            ["--length", "0"],
            ["--bits", "-1"],
            ["--dice", "145"],
            ["--dice", "1"],
        ],
    )
    def test_invalid_options_exit_1(self, argv, capsys):
        assert main(argv) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error:" in captured.err

    def test_missing_file_exits_1(self, tmp_path, capsys):
        assert main(["--file", str(tmp_path / "nope.txt")]) == 1

        assert "Could not read the word list" in capsys.readouterr().err

    def test_run_with_injected_rolls(self):
        rolls = iter([3, 3])
        config = GeneratorConfig(dictionary="alpha", length=2, dice_sides=26)

        assert run(config, read_roll=lambda sides: next(rolls)) == ["cc"]

    def test_printable_uses_printable_characters(self, capsys):
        assert main(["-d", "printable", "-l", "40"]) == 0

        line = capsys.readouterr().out.rstrip("\n")
        allowed = set(string.ascii_letters + string.digits + string.punctuation)
        assert len(line) == 40
        assert set(line) <= allowed
