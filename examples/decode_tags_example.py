#!/usr/bin/env python
"""
Tag Decoding Example.

This example decodes a handful of SBL MorphGNT tags and prints the
grammatical description of each, then checks a small corpus file.
"""

from pathlib import Path

from gntparse import TagError, parse
from gntparse.core.formatting import english_name
from gntparse.processing.batch import decode_file

SAMPLE_TAGS = [
    "V- 1AAI-S--",
    "A- ----DPM-",
    "V- -PAPNSM-",
    "RX ----DPM-",
    "N- ----DSF-",
    "ZZ ----DSF-",
]


def main():
    """Run the example."""
    for tag in SAMPLE_TAGS:
        try:
            parsing = parse(tag)
        except TagError as e:
            print(f"{tag!r}: {e.kind} ({e.message})")
            continue

        print(f"{tag!r}: {parsing.string()} - {english_name(parsing)}")
        fields = parsing.model_dump(mode="json", exclude_defaults=True)
        for name, value in fields.items():
            print(f"    {name}: {value}")

    sample = Path(__file__).resolve().parents[1] / "tests" / "data" / "morphgnt_sample.txt"
    if sample.exists():
        report = decode_file(sample)
        print(f"\n{sample.name}: {report.decoded}/{report.total} decoded")
        for pos, count in report.part_of_speech_counts.items():
            print(f"    {pos}: {count}")


if __name__ == "__main__":
    main()
