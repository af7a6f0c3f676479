"""CLI entrypoint: submit one recording and print the speaker-attributed transcript."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Sequence

from speakerline import __version__
from speakerline.analysis.machine import AnalysisStateMachine
from speakerline.analysis.state import Succeeded
from speakerline.client.base import UploadClient, UploadedFile
from speakerline.client.http import HttpUploadClient
from speakerline.config import get_settings
from speakerline.errors import ValidationError
from speakerline.logging_setup import configure_logging
from speakerline.schemas.view import build_view
from speakerline.transcript.writer import format_transcript, write_transcript


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="speakerline",
        description="Send audio to the analysis service and print the diarized transcript.",
    )
    parser.add_argument("audio", nargs="?", help="Audio file (mp3, wav, ...)")
    parser.add_argument("--rttm", dest="rttm_path", help="Reference RTTM file; enables DER scoring")
    parser.add_argument("--url", help="Analysis endpoint (default: ANALYZER_URL)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--out", dest="out_path", help="Also write the text transcript to this file")
    parser.add_argument("--json", dest="as_json", action="store_true", help="Print the JSON view instead of text")
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    parser.add_argument("--version", action="store_true")
    return parser


async def run(
    args: argparse.Namespace,
    client: UploadClient,
    audio: UploadedFile | None,
    reference: UploadedFile | None,
) -> int:
    machine = AnalysisStateMachine(client, max_upload_bytes=get_settings().MAX_UPLOAD_BYTES)
    machine.select_audio(audio)
    machine.select_reference(reference)
    try:
        state = await machine.submit()
    except ValidationError as exc:
        print(f"ERROR: {exc.message}", file=sys.stderr)
        return 1
    finally:
        await client.close()

    if args.as_json:
        print(json.dumps(build_view(machine).model_dump(), indent=2, ensure_ascii=False))
    elif isinstance(state, Succeeded):
        print(format_transcript(state.result))
    elif machine.notice is not None:
        print(f"ERROR: {machine.notice.message}", file=sys.stderr)

    if not isinstance(state, Succeeded):
        return 1
    if args.out_path:
        write_transcript(state.result, args.out_path)
    return 0


def main(argv: Sequence[str] | None = None, client: UploadClient | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.version:
        print(f"speakerline {__version__}")
        return 0

    configure_logging(level=args.log_level)
    try:
        audio = UploadedFile.from_path(args.audio) if args.audio else None
        reference = UploadedFile.from_path(args.rttm_path, default_type="text/plain") if args.rttm_path else None
    except OSError as exc:
        print(f"ERROR: cannot read {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1

    if client is None:
        client = HttpUploadClient(url=args.url, timeout=args.timeout)
    return asyncio.run(run(args, client, audio, reference))


if __name__ == "__main__":
    raise SystemExit(main())
