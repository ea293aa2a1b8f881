"""
Inventory the HTTP routes of the affiliate API.

Imports the application, walks the routing table and writes a tab-separated
list to docs/route_inventory.txt (or the path given as the first argument).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterable, Tuple

from fastapi.routing import APIRoute


ROOT = Path(__file__).resolve().parents[1]

# Settings need a database URL even though nothing is queried here.
os.environ.setdefault("DATABASE_URL", f"sqlite:///{(ROOT / 'backend' / 'affiliates.db').as_posix()}")
os.environ.setdefault("SKIP_MIGRATIONS", "1")

sys.path.append(str(ROOT / "backend"))

from app.main import app  # type: ignore  # noqa: E402


def iter_routes() -> Iterable[Tuple[str, str, str]]:
    """Yield (methods, path, endpoint) for every API route."""
    for route in app.routes:
        if not isinstance(route, APIRoute):
            continue
        methods = sorted(m for m in route.methods or [] if m not in {"HEAD", "OPTIONS"})
        endpoint = getattr(route.endpoint, "__name__", route.name or "")
        yield (",".join(methods) or "GET", route.path, endpoint)


def write_routes(out_path: Path) -> list[str]:
    lines = [f"{methods}\t{path}\t{endpoint}" for methods, path, endpoint in iter_routes()]
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text("\n".join(lines), encoding="utf-8")
    return lines


def main() -> None:
    out_path = Path(sys.argv[1]) if len(sys.argv) > 1 else ROOT / "docs" / "route_inventory.txt"
    lines = write_routes(out_path)
    print(f"Wrote {len(lines)} routes to {out_path}")


if __name__ == "__main__":
    main()
