from pathlib import Path

from loguru import logger

from youcast.interfaces.commands import CommandRunner
from youcast.utils.config import config
from youcast.utils.exceptions import ProbeError


def build_probe_command(audio_file: Path) -> list[str]:
    """Build the ffprobe command that prints the first audio stream's duration in seconds."""
    return [
        config.probe_executable,
        "-v",
        "quiet",
        "-of",
        "default=nokey=1:noprint_wrappers=1",
        "-select_streams",
        "a:0",
        "-show_entries",
        "stream=duration",
        str(audio_file),
    ]


def probe_duration(audio_file: Path, runner: CommandRunner) -> float:
    """Get the duration of an audio file in seconds.

    Raises:
        ProbeError: If ffprobe cannot run, fails, or prints something other than a duration.
    """
    command = build_probe_command(audio_file)

    try:
        result = runner.run(command)
    except OSError as e:
        raise ProbeError(f"Unable to run {command[0]}: {e}") from e

    if not result.ok:
        logger.error(result.stderr.strip())
        raise ProbeError(f"{command[0]} exited with status {result.returncode} for {audio_file}")

    first_line = next(iter(result.stdout.splitlines()), "").strip()

    try:
        return float(first_line)
    except ValueError as e:
        raise ProbeError(f"Unexpected {command[0]} output for {audio_file}: {first_line!r}") from e
