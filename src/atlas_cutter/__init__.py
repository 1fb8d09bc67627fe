"""Top-level package for the atlas cutter.

Provides subpackages:
- atlas_cutter.core – Part/Atlas models and their drafts
- atlas_cutter.parsing – line-oriented .atlas text parser
- atlas_cutter.cutting – crop/rotate engine and image writer
- atlas_cutter.controller – file-to-files conversion pipeline
- atlas_cutter.cli – command line entry point
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("atlas-cutter")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
