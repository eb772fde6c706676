"""CLI entrypoint for fricatives."""

import argparse
import logging
import sys
from pathlib import Path

from fricatives.symbols import DEFAULT_FRICATIVES, DEFAULT_PAUSES, parse_symbols


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="fricatives",
        description="Extract per-fricative acoustic and positional features "
                    "from WAV + TextGrid pairs",
    )
    parser.add_argument("input_dir",
                        help="Directory containing audio files")
    parser.add_argument("--output", default="./fricatives-output/fricatives.tsv",
                        help="Output TSV file (default: ./fricatives-output/fricatives.tsv)")
    parser.add_argument("--annotation-dir", default=None,
                        help="Directory containing TextGrids (default: same as audio)")
    parser.add_argument("--suffix", default="",
                        help="Appended to the audio stem to name its TextGrid (default: none)")
    parser.add_argument("--audio-ext", default=".wav",
                        help="Audio file extension (default: .wav)")
    parser.add_argument("--annotation-ext", default=".TextGrid",
                        help="Annotation file extension (default: .TextGrid)")
    parser.add_argument("--word-tier", type=int, default=1,
                        help="1-based index of the word tier (default: 1)")
    parser.add_argument("--phoneme-tier", type=int, default=2,
                        help="1-based index of the phoneme tier (default: 2)")
    parser.add_argument("--fricatives", default=",".join(sorted(DEFAULT_FRICATIVES)),
                        help="Comma-separated fricative symbols (default: SAMPA f,v,s,S,z,Z)")
    parser.add_argument("--pauses", default=",".join(sorted(DEFAULT_PAUSES)),
                        help="Comma-separated pause symbols (default: <p:>)")
    parser.add_argument("--cog-power", type=float, default=2.0,
                        help="Spectral weighting exponent for centre of gravity (default: 2)")
    parser.add_argument("--jobs", type=int, default=1,
                        help="Worker processes (default: 1)")
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Log every fricative's measurements")

    args = parser.parse_args(argv)

    if args.word_tier < 1 or args.phoneme_tier < 1:
        parser.error("tier indices are 1-based")
    if args.jobs < 1:
        parser.error("--jobs must be at least 1")
    try:
        args.fricatives = parse_symbols(args.fricatives)
        args.pauses = parse_symbols(args.pauses)
    except ValueError as e:
        parser.error(str(e))

    return args


def _run(args: argparse.Namespace) -> int:
    """Run the extraction; returns the process exit code."""
    from fricatives import process
    from fricatives.extract import ExtractionConfig

    input_dir = Path(args.input_dir)
    if not input_dir.is_dir():
        print(f"Error: directory not found: {input_dir}", file=sys.stderr)
        return 1

    config = ExtractionConfig(
        fricatives=args.fricatives,
        pauses=args.pauses,
        cog_power=args.cog_power,
        word_tier=args.word_tier,
        phoneme_tier=args.phoneme_tier,
        annotation_suffix=args.suffix,
        annotation_ext=args.annotation_ext,
        audio_ext=args.audio_ext,
    )
    result = process(
        input_dir=input_dir,
        output_path=args.output,
        config=config,
        annotation_dir=args.annotation_dir,
        jobs=args.jobs,
    )

    print(f"Processed {len(result.processed)} file(s)")
    print(f"Fricatives: {len(result.records)}")
    print(f"Output: {args.output}")
    if result.failures:
        print(f"Failed: {len(result.failures)} file(s)", file=sys.stderr)
        for failure in result.failures:
            print(f"  {failure.pair.name}: {failure.error}", file=sys.stderr)
        return 1
    if result.interrupted:
        return 130
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(name)s %(levelname)s: %(message)s")

    sys.exit(_run(args))


if __name__ == "__main__":
    main()
