import os
import subprocess
import sys

import pytest

from trimmer.errors import (
    ExecutionError,
    ProbeError,
    TrimError,
    UsageError,
    ValidationError,
)
from trimmer.printer import OutputPrinter
from trimmer.utils import (
    DEFAULT_SUFFIX,
    FFMPEG_ENV_VAR,
    FFPROBE_ENV_VAR,
    format_seconds,
    get_ffmpeg_name,
    get_ffprobe_name,
    parse_seconds,
    resolve_output_path,
    split_extension,
)

ROOT: str = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


# Helpers


def touch(path: str) -> None:
    with open(path, "wb"):
        pass


class TestResolveOutputPath:
    """Tests for collision-free output path derivation."""

    def test_free_name_gets_plain_suffix(self, tmp_path) -> None:
        input_path: str = str(tmp_path / "clip.mp4")
        assert resolve_output_path(input_path, "_trim") == str(tmp_path / "clip_trim.mp4")

    def test_existing_name_gets_index_one(self, tmp_path) -> None:
        input_path: str = str(tmp_path / "clip.mp4")
        touch(str(tmp_path / "clip_trim.mp4"))
        assert resolve_output_path(input_path, "_trim") == str(tmp_path / "clip_trim1.mp4")

    def test_index_increments_until_free(self, tmp_path) -> None:
        input_path: str = str(tmp_path / "clip.mp4")
        for name in ("clip_trim.mp4", "clip_trim1.mp4", "clip_trim2.mp4"):
            touch(str(tmp_path / name))
        assert resolve_output_path(input_path, "_trim") == str(tmp_path / "clip_trim3.mp4")

    def test_gap_in_sequence_is_reused(self, tmp_path) -> None:
        input_path: str = str(tmp_path / "clip.mp4")
        touch(str(tmp_path / "clip_trim.mp4"))
        touch(str(tmp_path / "clip_trim2.mp4"))
        assert resolve_output_path(input_path, "_trim") == str(tmp_path / "clip_trim1.mp4")

    def test_directory_counts_as_taken(self, tmp_path) -> None:
        os.mkdir(str(tmp_path / "clip_trim.mp4"))
        result: str = resolve_output_path(str(tmp_path / "clip.mp4"), "_trim")
        assert result == str(tmp_path / "clip_trim1.mp4")

    def test_idempotent_without_file_creation(self, tmp_path) -> None:
        input_path: str = str(tmp_path / "clip.mp4")
        touch(str(tmp_path / "clip_trim.mp4"))
        first: str = resolve_output_path(input_path, "_trim")
        second: str = resolve_output_path(input_path, "_trim")
        assert first == second
        assert not os.path.exists(first)

    def test_does_not_create_file(self, tmp_path) -> None:
        result: str = resolve_output_path(str(tmp_path / "clip.mp4"))
        assert not os.path.exists(result)

    def test_no_extension(self, tmp_path) -> None:
        result: str = resolve_output_path(str(tmp_path / "recording"), "_trim")
        assert result == str(tmp_path / "recording_trim")

    def test_only_last_extension_is_split(self, tmp_path) -> None:
        result: str = resolve_output_path(str(tmp_path / "show.part1.mkv"), "_trim")
        assert result == str(tmp_path / "show.part1_trim.mkv")

    def test_dotfile_name_is_all_extension(self, tmp_path) -> None:
        result: str = resolve_output_path(str(tmp_path / ".mp4"), "_trim")
        assert result == str(tmp_path / "_trim.mp4")

    def test_dotfile_collision_keeps_extension(self, tmp_path) -> None:
        touch(str(tmp_path / "_trim.mp4"))
        result: str = resolve_output_path(str(tmp_path / ".mp4"), "_trim")
        assert result == str(tmp_path / "_trim1.mp4")

    def test_bare_filename_stays_relative(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert resolve_output_path("clip.mp4", "_trim") == "clip_trim.mp4"

    def test_default_suffix_is_trim(self, tmp_path) -> None:
        assert DEFAULT_SUFFIX == "_trim"
        result: str = resolve_output_path(str(tmp_path / "a.wav"))
        assert result == str(tmp_path / "a_trim.wav")


class TestSplitExtension:
    """Tests for splitting a file name at its last dot."""

    @pytest.mark.parametrize(
        "base, expected",
        [
            ("clip.mp4", ("clip", ".mp4")),
            (".mp4", ("", ".mp4")),
            ("recording", ("recording", "")),
            ("show.part1.mkv", ("show.part1", ".mkv")),
            ("trailing.", ("trailing", ".")),
        ],
    )
    def test_split(self, base: str, expected) -> None:
        assert split_extension(base) == expected


class TestFormatSeconds:
    """Tests for fixed-point time formatting."""

    def test_integer_value(self) -> None:
        assert format_seconds(90) == "90.000000"

    def test_fraction_rounded_to_six_digits(self) -> None:
        assert format_seconds(1.23456789) == "1.234568"

    def test_zero(self) -> None:
        assert format_seconds(0.0) == "0.000000"

    def test_float_arithmetic_result(self) -> None:
        assert format_seconds(100.0 - 5.0 - 10.0) == "85.000000"


class TestParseSeconds:
    """Tests for command-line number parsing."""

    def test_integer_string(self) -> None:
        assert parse_seconds("10", "seconds") == 10.0

    def test_decimal_string(self) -> None:
        assert parse_seconds("2.5", "seconds") == 2.5

    def test_negative_parses(self) -> None:
        # Range checks belong to the trim modes
        assert parse_seconds("-3", "seconds") == -3.0

    def test_garbage_raises_usage_error(self) -> None:
        with pytest.raises(UsageError, match="Invalid seconds"):
            parse_seconds("ten", "seconds")

    def test_error_names_the_argument(self) -> None:
        with pytest.raises(UsageError, match="Invalid start_cut"):
            parse_seconds("1:30", "start_cut")

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
    def test_non_finite_rejected(self, raw: str) -> None:
        with pytest.raises(UsageError):
            parse_seconds(raw, "seconds")


class TestToolDiscovery:
    """Tests for locating the ffmpeg / ffprobe executables."""

    def test_ffmpeg_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv(FFMPEG_ENV_VAR, "/opt/ffmpeg/bin/ffmpeg")
        assert get_ffmpeg_name() == "/opt/ffmpeg/bin/ffmpeg"

    def test_ffprobe_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv(FFPROBE_ENV_VAR, "/opt/ffmpeg/bin/ffprobe")
        assert get_ffprobe_name() == "/opt/ffmpeg/bin/ffprobe"

    def test_falls_back_to_bare_name(self, monkeypatch) -> None:
        monkeypatch.delenv(FFMPEG_ENV_VAR, raising=False)
        monkeypatch.delenv(FFPROBE_ENV_VAR, raising=False)
        monkeypatch.setattr("trimmer.utils.which", lambda program: None)
        assert get_ffmpeg_name() == "ffmpeg"
        assert get_ffprobe_name() == "ffprobe"

    def test_uses_path_lookup(self, monkeypatch) -> None:
        monkeypatch.delenv(FFMPEG_ENV_VAR, raising=False)
        monkeypatch.setattr("trimmer.utils.which", lambda program: f"/usr/bin/{program}")
        assert get_ffmpeg_name() == "/usr/bin/ffmpeg"

    def test_import_is_silent_without_ffmpeg(self, tmp_path) -> None:
        env = dict(os.environ, PATH=str(tmp_path))
        completed = subprocess.run(
            [sys.executable, "-W", "always::RuntimeWarning", "-c", "import trimmer.utils"],
            cwd=ROOT,
            env=env,
            capture_output=True,
            text=True,
        )
        assert completed.returncode == 0
        assert "RuntimeWarning" not in completed.stderr


class TestErrors:
    """Tests for the error hierarchy."""

    @pytest.mark.parametrize("cls", [UsageError, ValidationError, ProbeError, ExecutionError])
    def test_all_kinds_are_trim_errors(self, cls) -> None:
        assert issubclass(cls, TrimError)

    def test_validation_error_is_value_error(self) -> None:
        assert issubclass(ValidationError, ValueError)

    def test_hint_is_kept(self) -> None:
        exc: TrimError = ProbeError("no duration", hint="check the file")
        assert str(exc) == "no duration"
        assert exc.hint == "check the file"

    def test_execution_error_carries_returncode(self) -> None:
        exc: ExecutionError = ExecutionError("boom", returncode=3)
        assert exc.returncode == 3

    def test_usage_error_carries_usage(self) -> None:
        exc: UsageError = UsageError("missing input", usage="usage: ezff ...")
        assert exc.usage == "usage: ezff ..."


class TestOutputPrinter:
    """Tests for OutputPrinter."""

    def test_success_prints_to_stdout(self, capsys) -> None:
        printer: OutputPrinter = OutputPrinter(no_color=True)
        printer.success("clip_trim.mp4", details={"Mode": "Trim end", "Time": "0.4s"})
        captured = capsys.readouterr()
        assert "clip_trim.mp4" in captured.out
        assert "Mode" in captured.out
        assert "Trim end" in captured.out

    def test_error_prints_to_stderr(self, capsys) -> None:
        printer: OutputPrinter = OutputPrinter(no_color=True)
        printer.error("Duration too short.", hint="Cut less.")
        captured = capsys.readouterr()
        assert "Duration too short." in captured.err
        assert "Cut less." in captured.err
        assert captured.out == ""

    def test_warning_prints_to_stderr_with_hint(self, capsys) -> None:
        printer: OutputPrinter = OutputPrinter(no_color=True)
        printer.warning("ffmpeg not installed.", hint="Install FFmpeg.")
        captured = capsys.readouterr()
        assert "ffmpeg not installed." in captured.err
        assert "Install FFmpeg." in captured.err
        assert captured.out == ""

    def test_info_prints_message(self, capsys) -> None:
        printer: OutputPrinter = OutputPrinter(no_color=True)
        printer.info("Probing duration.")
        captured = capsys.readouterr()
        assert "Probing duration." in captured.out

    def test_usage_goes_to_stderr_even_when_quiet(self, capsys) -> None:
        printer: OutputPrinter = OutputPrinter(quiet=True)
        printer.usage("Usage: ezff <command> [args]\n")
        captured = capsys.readouterr()
        assert captured.err == "Usage: ezff <command> [args]\n"

    def test_command_is_shell_quoted_on_stdout(self, capsys) -> None:
        printer: OutputPrinter = OutputPrinter()
        printer.command(["ffmpeg", "-i", "my clip.mp4", "out.mp4"])
        captured = capsys.readouterr()
        assert captured.out == "ffmpeg -i 'my clip.mp4' out.mp4\n"
        assert captured.err == ""

    def test_command_is_not_silenced_or_coloured(self, capsys, monkeypatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        printer: OutputPrinter = OutputPrinter(quiet=True, no_color=False)
        printer.command(["ffmpeg", "-version"])
        captured = capsys.readouterr()
        assert captured.out == "ffmpeg -version\n"

    def test_quiet_suppresses_success(self, capsys) -> None:
        printer: OutputPrinter = OutputPrinter(quiet=True)
        printer.success("out.mp4", details={"Mode": "Trim"})
        captured = capsys.readouterr()
        assert captured.out == ""

    def test_quiet_suppresses_warning(self, capsys) -> None:
        printer: OutputPrinter = OutputPrinter(quiet=True)
        printer.warning("Some warning.")
        captured = capsys.readouterr()
        assert captured.err == ""

    def test_quiet_suppresses_info(self, capsys) -> None:
        printer: OutputPrinter = OutputPrinter(quiet=True)
        printer.info("Some info.")
        captured = capsys.readouterr()
        assert captured.out == ""

    def test_quiet_does_not_suppress_error(self, capsys) -> None:
        """Errors must always reach the user, even in quiet mode."""
        printer: OutputPrinter = OutputPrinter(quiet=True, no_color=True)
        printer.error("Critical failure.")
        captured = capsys.readouterr()
        assert "Critical failure." in captured.err

    def test_no_color_disables_ansi(self, capsys) -> None:
        printer: OutputPrinter = OutputPrinter(no_color=True)
        printer.success("test.mp4")
        captured = capsys.readouterr()
        assert "\033[" not in captured.out

    def test_color_enabled_includes_ansi(self, capsys, monkeypatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        printer: OutputPrinter = OutputPrinter(no_color=False)
        printer.success("test.mp4")
        captured = capsys.readouterr()
        assert "\033[" in captured.out

    def test_no_color_env_variable(self, monkeypatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        printer: OutputPrinter = OutputPrinter()
        assert printer.no_color is True

    def test_colorize_returns_ansi_when_color_enabled(self, monkeypatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        printer: OutputPrinter = OutputPrinter(no_color=False)
        assert printer._colorize("hello", "32") == "\033[32mhello\033[0m"

    def test_success_detail_column_alignment(self, capsys) -> None:
        printer: OutputPrinter = OutputPrinter(no_color=True)
        printer.success("out.mp4", details={"Mode": "Trim", "Time": "1.0s"})
        captured = capsys.readouterr()
        assert "Mode      " in captured.out
        assert "Time      " in captured.out
