"""Utility for determining the output file path for a page."""

from pathlib import Path


def output_file_for_page(out_root: Path, page_path: str) -> Path:
    """Determine the output file for a root-relative page path."""
    # module/pkg/-foo/index.md -> out_root/module/pkg/-foo/index.md
    p = out_root / page_path.lstrip("/")
    p.parent.mkdir(parents=True, exist_ok=True)
    return p
