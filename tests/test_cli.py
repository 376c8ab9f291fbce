"""Tests for tagcloud CLI, parser validators and configuration."""

import argparse
from pathlib import Path

import pytest

from tagcloud import cli
from tagcloud.analysis.word_frequency import load_frequency
from tagcloud.commands import Command, GenerateCommand
from tagcloud.config import CloudConfig, default_output_path
from tagcloud.constants import CLOUDS_DIR, DEFAULT_SELECTION_SIZE, FONT_MAX, FONT_MIN
from tagcloud.errors import InvalidFontRange, InvalidSelectionSize, TagCloudIOError
from tagcloud.parser import font_size, positive_int, selection_size, setup_parser


@pytest.fixture
def story(tmp_path: Path) -> Path:
    path = tmp_path / "story.txt"
    path.write_text("the cat sat.\nThe CAT ran!\n", encoding="utf-8")
    return path


class TestArgumentTypes:
    """Tests for argparse types built on the domain parsers."""

    def test_selection_size(self):
        """Test accepting zero and positive sizes."""
        assert selection_size("0") == 0
        assert selection_size(" 12 ") == 12

    @pytest.mark.parametrize(
        ("value", "message"),
        [("abc", "정수를 입력해야 합니다: 'abc'"), ("-1", "단어 수는 0 이상이어야 합니다: -1")],
    )
    def test_selection_size_rejects(self, value, message):
        """Test that selection_size keeps the InvalidSelectionSize message."""
        with pytest.raises(argparse.ArgumentTypeError) as exc_info:
            selection_size(value)
        assert str(exc_info.value) == message
        assert isinstance(exc_info.value.__cause__, InvalidSelectionSize)

    def test_font_size(self):
        """Test accepting non-negative font sizes."""
        assert font_size("0") == 0
        assert font_size("78") == 78

    @pytest.mark.parametrize(
        ("value", "message"),
        [("big", "글꼴 크기는 정수여야 합니다: 'big'"), ("-5", "글꼴 크기는 0 이상이어야 합니다: -5")],
    )
    def test_font_size_rejects(self, value, message):
        """Test that font_size keeps the InvalidFontRange message."""
        with pytest.raises(argparse.ArgumentTypeError) as exc_info:
            font_size(value)
        assert str(exc_info.value) == message
        assert isinstance(exc_info.value.__cause__, InvalidFontRange)

    def test_positive_int_rejects_zero(self):
        """Test that positive_int requires at least one."""
        assert positive_int("3") == 3
        with pytest.raises(argparse.ArgumentTypeError):
            positive_int("0")
        with pytest.raises(argparse.ArgumentTypeError):
            positive_int("many")


class TestCommandContract:
    """Tests for the Command base class."""

    def test_registered_commands(self):
        """Test that every registered command has a factory and a subparser."""
        parser = setup_parser(cli.CONSOLE, cli.COMMANDS)
        for cmd_cls in cli.COMMANDS:
            assert issubclass(cmd_cls, Command)
        assert parser.parse_args(["generate", "a.txt"]).command == "generate"
        assert parser.parse_args(["analyze", "a.txt"]).command == "analyze"
        assert set(cli._COMMAND_REGISTRY) == {"generate", "analyze"}

    def test_from_args_is_required(self):
        """Test that a command without from_args cannot be instantiated."""

        class Incomplete(Command):
            @staticmethod
            def configure_parser(subparsers):
                pass

            def execute(self):
                return {}

            def get_name(self):
                return "incomplete"

        with pytest.raises(TypeError):
            Incomplete()


class TestCloudConfig:
    """Tests for CloudConfig."""

    def test_defaults(self):
        """Test default values and title fallback."""
        config = CloudConfig(Path("docs/story.txt"), Path("out.html"))
        assert config.selection_size == DEFAULT_SELECTION_SIZE
        assert (config.font_min, config.font_max) == (FONT_MIN, FONT_MAX)
        assert config.document_title == "story.txt"

    def test_explicit_title(self):
        """Test that an explicit title wins over the file name."""
        config = CloudConfig(Path("story.txt"), Path("out.html"), title="My Story")
        assert config.document_title == "My Story"

    def test_validate(self):
        """Test that invalid values raise configuration errors."""
        with pytest.raises(InvalidSelectionSize):
            CloudConfig(Path("a"), Path("b"), selection_size=-2).validate()
        with pytest.raises(InvalidFontRange):
            CloudConfig(Path("a"), Path("b"), font_min=40, font_max=20).validate()

    def test_default_output_path(self):
        """Test the output path derived from the input name."""
        assert default_output_path(Path("texts/moby.txt")) == CLOUDS_DIR / "moby.html"

    def test_from_namespace(self):
        """Test building a config from parsed arguments."""
        args = argparse.Namespace(
            input="in.txt", output=None, size=5, font_min=10, font_max=30, encoding="latin-1", title=None
        )
        config = CloudConfig.from_namespace(args)
        assert config.input_path == Path("in.txt")
        assert config.output_path == CLOUDS_DIR / "in.html"
        assert config.selection_size == 5
        assert config.encoding == "latin-1"


class TestGenerateCommand:
    """Tests for GenerateCommand."""

    def test_execute(self, story: Path, tmp_path: Path):
        """Test generating a cloud file directly through the command."""
        output = tmp_path / "cloud.html"
        command = GenerateCommand(cli.CONSOLE, CloudConfig(story, output, selection_size=3), show_progress=False)
        result = command.execute()

        assert result["output_path"] == output
        assert result["words"] == 3
        assert (result["min_count"], result["max_count"]) == (1, 2)
        html = output.read_text(encoding="utf-8")
        assert html.index(">cat<") < html.index(">ran<") < html.index(">the<")
        assert ">sat<" not in html

    def test_from_args_requires_input(self):
        """Test that a missing input without --interactive is rejected."""
        args = argparse.Namespace(input=None, interactive=False)
        with pytest.raises(ValueError):
            GenerateCommand.from_args(cli.CONSOLE, args)

    def test_interactive_prompts(self, story: Path, tmp_path: Path, monkeypatch):
        """Test that missing values are prompted for."""
        answers = iter([str(story), str(tmp_path / "prompted.html"), "2"])
        monkeypatch.setattr("tagcloud.commands.generate_command.Prompt.ask", lambda *a, **k: next(answers))
        args = argparse.Namespace(
            input=None,
            output=None,
            size=None,
            font_min=FONT_MIN,
            font_max=FONT_MAX,
            encoding="utf-8",
            title=None,
            interactive=True,
            no_progress=True,
        )
        command = GenerateCommand.from_args(cli.CONSOLE, args)
        assert command.config.input_path == story
        assert command.config.output_path == tmp_path / "prompted.html"
        assert command.config.selection_size == 2

    def test_interactive_invalid_size(self, story: Path, monkeypatch):
        """Test that an unparseable prompted size raises InvalidSelectionSize."""
        answers = iter([str(story), "out.html", "lots"])
        monkeypatch.setattr("tagcloud.commands.generate_command.Prompt.ask", lambda *a, **k: next(answers))
        args = argparse.Namespace(input=None, output=None, size=None, interactive=True)
        with pytest.raises(InvalidSelectionSize):
            GenerateCommand.from_args(cli.CONSOLE, args)


class TestMain:
    """End-to-end tests for cli.main."""

    def test_generate(self, story: Path, tmp_path: Path):
        """Test the generate command end to end."""
        output = tmp_path / "out" / "cloud.html"
        code = cli.main(
            ["--no-log-file", "generate", str(story), "-o", str(output), "-n", "3", "--no-progress"]
        )
        assert code == 0
        html = output.read_text(encoding="utf-8")
        assert "<h2>Top 3 words in story.txt</h2>" in html
        assert 'class="f48" title="count: 2">cat</span>' in html

    def test_generate_with_title_and_fonts(self, story: Path, tmp_path: Path):
        """Test custom title and font range flags."""
        output = tmp_path / "cloud.html"
        code = cli.main(
            [
                "--no-log-file", "generate", str(story), "-o", str(output), "-n", "3",
                "--font-min", "10", "--font-max", "20", "--title", "Tale", "--no-progress",
            ]
        )
        assert code == 0
        html = output.read_text(encoding="utf-8")
        assert "<title>Tale</title>" in html
        assert 'class="f20"' in html

    def test_generate_zero_words(self, story: Path, tmp_path: Path):
        """Test that N = 0 writes an empty but valid cloud."""
        output = tmp_path / "empty.html"
        assert cli.main(["--no-log-file", "generate", str(story), "-o", str(output), "-n", "0", "--no-progress"]) == 0
        html = output.read_text(encoding="utf-8")
        assert "<span" not in html
        assert "</html>" in html

    @pytest.mark.parametrize(
        ("value", "message"),
        [("abc", "정수를 입력해야 합니다"), ("-1", "단어 수는 0 이상이어야 합니다")],
    )
    def test_invalid_size_is_usage_error(self, story: Path, capsys, value, message):
        """Test that a bad -n exits with code 2 and shows the selection size message."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--no-log-file", "generate", str(story), "-n", value])
        assert exc_info.value.code == 2
        out = capsys.readouterr().out
        assert "인자 오류" in out
        assert message in out

    def test_negative_font_size_is_usage_error(self, story: Path, capsys):
        """Test that a negative --font-min exits with code 2 and shows the font size message."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--no-log-file", "generate", str(story), "--font-min", "-4"])
        assert exc_info.value.code == 2
        assert "글꼴 크기는 0 이상이어야 합니다" in capsys.readouterr().out

    def test_unknown_encoding_is_io_error(self, story: Path, tmp_path: Path, capsys):
        """Test that --encoding with an unknown codec returns exit code 1."""
        code = cli.main(
            [
                "--no-log-file", "generate", str(story), "-o", str(tmp_path / "x.html"),
                "--encoding", "no-such-codec", "--no-progress",
            ]
        )
        assert code == 1
        assert "TagCloudIOError" in capsys.readouterr().out
        assert not (tmp_path / "x.html").exists()

    def test_missing_input_file(self, tmp_path: Path, capsys):
        """Test that an unreadable source returns exit code 1."""
        code = cli.main(
            ["--no-log-file", "generate", str(tmp_path / "missing.txt"), "-o", str(tmp_path / "x.html"), "--no-progress"]
        )
        assert code == 1
        assert "TagCloudIOError" in capsys.readouterr().out

    def test_inverted_font_range(self, story: Path, tmp_path: Path):
        """Test that font_min > font_max fails with exit code 1."""
        code = cli.main(
            [
                "--no-log-file", "generate", str(story), "-o", str(tmp_path / "x.html"),
                "--font-min", "50", "--font-max", "20", "--no-progress",
            ]
        )
        assert code == 1
        assert not (tmp_path / "x.html").exists()

    def test_analyze(self, story: Path, tmp_path: Path):
        """Test the analyze command writes the frequency table."""
        output = tmp_path / "freq.parquet"
        code = cli.main(
            ["--no-log-file", "analyze", str(story), "--output-frequency", str(output), "--top", "2", "--no-progress"]
        )
        assert code == 0
        assert load_frequency(output) == {"the": 2, "cat": 2, "sat": 1, "ran": 1}

    def test_no_command_is_usage_error(self):
        """Test that omitting the subcommand exits with code 2."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--no-log-file"])
        assert exc_info.value.code == 2


class TestErrorCategories:
    """Tests for error categorization."""

    def test_specific_categories(self):
        """Test that tagcloud errors map to their own categories."""
        assert cli.categorize_error(InvalidSelectionSize("x"))[0] == "단어 수 오류"
        assert cli.categorize_error(InvalidFontRange("x"))[0] == "글꼴 범위 오류"
        assert cli.categorize_error(TagCloudIOError("x"))[0] == "입출력 오류"

    def test_subclass_falls_back_to_parent(self):
        """Test that subclasses use the nearest registered ancestor."""
        assert cli.categorize_error(UnicodeError("x"))[0] == "입력값 오류"

    def test_unknown_error(self):
        """Test that unrelated exceptions have no category."""
        assert cli.categorize_error(RuntimeError("boom")) is None

    def test_format_time(self):
        """Test elapsed time formatting."""
        assert cli.format_time(0.5) == "500ms"
        assert cli.format_time(3.14159) == "3.14초"
        assert cli.format_time(150) == "2분 30.0초"
