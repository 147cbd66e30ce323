"""Top-level package for yomiage, the mental-calculation drill generator.

Provides:
- yomiage.config – GenerationConfig and the configuration validator
- yomiage.generation – the problem generation algorithm
- yomiage.problem – Problem, the generated drill with its announcer scripts
- yomiage.drill – seeded batches of problems
- yomiage.output – PDF worksheet rendering
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as pkg_version
from pathlib import Path


def _get_version() -> str:
    """Get version from importlib.metadata (installed) or pyproject.toml (dev)."""
    try:
        return pkg_version("yomiage")
    except PackageNotFoundError:
        pass

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.0.0"


__version__ = _get_version()

from .config import ConfigurationError, GenerationConfig, validate_config  # noqa: E402
from .generation import GenerationError, generate  # noqa: E402
from .problem import Problem  # noqa: E402
from .drill import DrillConfig, DrillResult, build_drill  # noqa: E402

__all__: list[str] = [
    "__version__",
    "ConfigurationError",
    "GenerationConfig",
    "validate_config",
    "GenerationError",
    "generate",
    "Problem",
    "DrillConfig",
    "DrillResult",
    "build_drill",
]
