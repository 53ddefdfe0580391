"""
woofwoof/cli.py — Command-line entry point for woofwoof.

Collects text from arguments or standard input, runs it through the codec
and prints the result. All codec failures exit with status 1.

    woofwoof [-m MODE] [text ...]
    woofwoof encode [text ...]
    woofwoof decode [dog-speech ...]
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import BinaryIO, Literal, Optional, Sequence, TextIO

from pydantic import BaseModel, ConfigDict, SkipValidation, ValidationError, field_validator

from woofwoof import __version__
from woofwoof.codec import WoofCodecError, decode, encode
from woofwoof.core.config import load_config
from woofwoof.core.constants import Mode
from woofwoof.core.logger import configure_logger, set_stderr_level

_SUBCOMMANDS: dict[str, Mode] = {
    "encode": Mode.ENCODE,
    "decode": Mode.DECODE,
}


# ──────────────────────────────────────────────────────────────
# Request model
# ──────────────────────────────────────────────────────────────

class CodecRequest(BaseModel):
    """
    One validated transcoding request.

    ``mode`` accepts any alias understood by :meth:`Mode.parse`. ``text`` is
    passed through untouched so the codec itself decides what counts as
    valid input.
    """

    model_config = ConfigDict(frozen=True)

    mode: Mode
    text: SkipValidation[str]
    source: Literal["args", "stdin"] = "args"

    @field_validator("mode", mode="before")
    @classmethod
    def resolve_mode(cls, v: object) -> Mode:
        """
        Resolve mode names and aliases (``enc``/``dec``) case-insensitively.

        Raises:
            ValueError: If the mode is unknown.
        """
        return Mode.parse(v)  # type: ignore[arg-type]


def run(request: CodecRequest) -> str:
    """Dispatch *request* to the encoder or decoder and return the result."""
    if request.mode is Mode.ENCODE:
        return encode(request.text)
    return decode(request.text)


# ──────────────────────────────────────────────────────────────
# Input collection
# ──────────────────────────────────────────────────────────────

def read_stream(stream: BinaryIO | TextIO) -> str:
    """
    Read all of *stream*, re-joining its lines with ``\\n``.

    Binary streams are decoded as UTF-8 with ``surrogateescape``, so invalid
    bytes survive as lone surrogates and the encoder rejects them with a
    proper error. CRLF terminators become LF and the final line terminator
    is dropped.
    """
    data = stream.read()
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="surrogateescape")
    lines = data.split("\n")
    if lines[-1] == "":
        lines.pop()
    return "\n".join(line[:-1] if line.endswith("\r") else line for line in lines)


def _split_command(words: list[str]) -> tuple[Optional[Mode], list[str]]:
    """Peel a leading ``encode``/``decode`` subcommand off the positional words."""
    if words and words[0] in _SUBCOMMANDS:
        return _SUBCOMMANDS[words[0]], words[1:]
    return None, words


def _validation_message(exc: ValidationError) -> str:
    """Return the first human-readable reason from a pydantic error."""
    first = exc.errors()[0]
    cause = first.get("ctx", {}).get("error")
    return str(cause) if cause is not None else first["msg"]


# ──────────────────────────────────────────────────────────────
# Argument parsing
# ──────────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="woofwoof",
        description="Encode/decode text as dog speech",
        epilog=(
            "subcommands: 'woofwoof encode [text ...]' and "
            "'woofwoof decode [dog-speech ...]'. With no text, standard input is read."
        ),
    )
    p.add_argument(
        "-m",
        "--mode",
        default=None,
        help="encode or decode (aliases: enc, dec); defaults to cli.default_mode",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to a woofwoof.yaml config file",
    )
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARN", "ERROR"],
        default=None,
        help="Minimum log level for stderr output (overrides config)",
    )
    p.add_argument(
        "--log-dir",
        default=None,
        help="Write JSONL logs to this directory (overrides config)",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("text", nargs="*", help="Text to transcode; joined with spaces")
    return p


# ──────────────────────────────────────────────────────────────
# Main
# ──────────────────────────────────────────────────────────────

def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[BinaryIO | TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Application entry point. Returns process exit code."""
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    args = _build_parser().parse_intermixed_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as exc:
        print(f"config error: {exc}", file=stderr)
        return 1

    set_stderr_level(args.log_level or config.logging.level)
    log = configure_logger(args.log_dir or config.logging.resolved_log_dir)

    command, words = _split_command(list(args.text))
    mode = command or args.mode or config.cli.default_mode
    if words:
        text, source = " ".join(words), "args"
    else:
        text, source = read_stream(stdin), "stdin"

    try:
        request = CodecRequest(mode=mode, text=text, source=source)
    except ValidationError as exc:
        message = _validation_message(exc)
        log.error("cli", "bad_request", {"mode": str(mode), "message": message}, mirror=False)
        print(message, file=stderr)
        return 1

    name = request.mode.value
    log.info("cli", "args_parsed", {
        "mode": name,
        "source": request.source,
        "input_chars": len(request.text),
    })

    start = time.perf_counter()
    try:
        output = run(request)
    except WoofCodecError as exc:
        log.error("codec", f"{name}_failed", exc.details, mirror=False)
        print(f"{name} error: {exc}", file=stderr)
        return 1
    latency_ms = (time.perf_counter() - start) * 1000.0

    log.perf("codec", f"{name}_done", latency_ms, {
        "input_chars": len(request.text),
        "output_chars": len(output),
    })

    stdout.write(output + ("\n" if config.cli.trailing_newline else ""))
    stdout.flush()
    log.flush()
    return 0
