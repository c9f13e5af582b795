"""
Source-tree alias for the predarg package.

Checkouts that have not been installed still resolve `predarg.graph`,
`predarg.predicate_argument` and the other submodules: the package path is
pointed at `src/predarg`. Only submodule imports resolve this way; the
top-level re-exports in `src/predarg/__init__.py` need an install
(`pip install -e .`).
"""

from __future__ import annotations

from pathlib import Path
from pkgutil import extend_path

__path__ = extend_path(__path__, __name__)  # type: ignore[name-defined]

_SRC_PATH = Path(__file__).resolve().parent.parent / "src" / "predarg"
if _SRC_PATH.exists():
    _src_str = str(_SRC_PATH)
    if _src_str not in __path__:
        __path__.append(_src_str)
