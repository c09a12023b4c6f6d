#!/usr/bin/env python3
"""
Generate an HTML app from a prompt and/or a file, without the HTTP server.

Usage:
    python scripts/generate_artifact.py --prompt "A retro pomodoro timer"
    python scripts/generate_artifact.py --file sketch.png --prompt "Make it dark mode" --out app.html
"""
import argparse
import asyncio
import logging
import mimetypes
import sys
from pathlib import Path

# Adjust path so imports resolve when running from project root
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from app.ai.errors import GenerationError, InvalidAttachmentError
from app.ai.artifact.contracts import AttachedFile
from app.ai.artifact.generator import ArtifactGenerator
from app.services.attachments import INVALID_ATTACHMENT_NOTICE, is_empty_submission, validate_attachment

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("generate_artifact")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Bring a sketch, photo or prompt to life as HTML.")
    parser.add_argument("--prompt", default="", help="Instruction text")
    parser.add_argument("--file", type=Path, help="Image or PDF to analyze")
    parser.add_argument("--out", type=Path, default=Path("artifact.html"), help="Where to write the HTML")
    return parser.parse_args(argv)


async def run(args) -> int:
    attached = None
    if args.file:
        media_type, _ = mimetypes.guess_type(args.file.name)
        attached = AttachedFile(
            data=args.file.read_bytes(),
            media_type=media_type or "",
            filename=args.file.name,
        )
        try:
            validate_attachment(attached)
        except InvalidAttachmentError as e:
            logger.error(f"{INVALID_ATTACHMENT_NOTICE} ({e})")
            return 2

    if is_empty_submission(args.prompt, attached):
        logger.info("Nothing to generate: pass --prompt and/or --file")
        return 0

    generator = ArtifactGenerator()
    try:
        html = await generator.generate(
            args.prompt,
            file_bytes=attached.data if attached else None,
            media_type=attached.media_type if attached else None,
        )
    except GenerationError as e:
        logger.error(f"Generation failed: {e}")
        return 1

    args.out.write_text(html, encoding="utf-8")
    logger.info(f"Wrote {len(html)} chars to {args.out}")
    return 0


if __name__ == '__main__':
    sys.exit(asyncio.run(run(parse_args())))
