"""Emit sampled iterations as ``.sql`` files."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List


def write_sql_dir(
    directory: str | Path,
    iterations: Iterable[Dict[str, object]],
    prefix: str = "q_",
) -> List[Path]:
    """
    Write each iteration to a sequentially numbered ``.sql`` file.

    An iteration drawn from a query group holds several statements; they are
    written in order, each terminated by ``;``.
    """

    output_dir = Path(directory)
    output_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for idx, entry in enumerate(iterations, start=1):
        statements = entry.get("queries") or []
        filename = output_dir / f"{prefix}{idx:03d}.sql"
        with filename.open("w", encoding="utf-8") as handle:
            handle.write("".join(f"{sql};\n" for sql in statements))
        written.append(filename)
    return written
