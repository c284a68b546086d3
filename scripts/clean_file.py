#!/usr/bin/env python3
"""
Clean an HTML file with the full normalization pipeline and print the result.

Runs the NormalizationPipeline:
- Tree Sanitizer (attributes, comments, heading markers, span emphasis)
- List Item Normalizer (paragraph unwrapping, "Label:" emphasis)
- Empty Element Pruner
- Auto-Linker (phone numbers, email addresses)

Usage:
    python scripts/clean_file.py FILE [--minify] [--save]

Example:
    python scripts/clean_file.py exports/google-doc.html
    python scripts/clean_file.py exports/word.html --minify --save
"""
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from markup_cleaner.formatter import format_markup
from markup_cleaner.pipeline import normalization_pipeline


def clean_file(path: Path, mode: str = "beautify", save: bool = False) -> None:
    """Normalize one file and print or save the formatted markup."""
    print(f"\n{'=' * 60}")
    print(f"🧼 Cleaning: {path}")
    print(f"{'=' * 60}\n")

    raw = path.read_text(encoding="utf-8")
    result = normalization_pipeline.process(raw)
    formatted = format_markup(result.markup, mode)

    print("📊 Statistics:")
    print(f"   - Input length: {len(raw)} characters")
    print(f"   - Output length: {len(result.markup)} characters")
    print(f"   - Pipeline steps: {', '.join(result.steps_applied) or 'none'}")

    if save:
        target = path.with_name(f"{path.stem}.clean.html")
        target.write_text(formatted + "\n", encoding="utf-8")
        print(f"\n💾 Saved: {target}")
    else:
        print(f"\n{'─' * 60}")
        print("📄 CLEAN HTML:")
        print(f"{'─' * 60}\n")
        print(formatted)


def main():
    args = sys.argv[1:]
    save = "--save" in args
    mode = "minify" if "--minify" in args else "beautify"
    args = [a for a in args if a not in ("--save", "--minify")]
    if not args:
        print(__doc__)
        sys.exit(1)

    path = Path(args[0])
    if not path.exists():
        print(f"❌ File not found: {path}")
        sys.exit(1)

    clean_file(path, mode=mode, save=save)


if __name__ == "__main__":
    main()
