from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from printbuf import BufferedFailure, lift as L  # noqa: E402


class LoadFail(BufferedFailure):
    pass


class ParseFail(BufferedFailure):
    pass


def load(path: Path) -> Result[str, LoadFail]:
    if not path.exists():
        return L.fail(LoadFail("Load failed: ").sprintf("file %s", path.name))
    return Ok(path.read_text())


async def main() -> None:  # pragma: no cover (examples only)
    print("\n== 01_quickstart: buffered failures ==")

    match load(Path("missing.json")):
        case Ok(raw):
            print(raw)
        case Error(err):
            print(f"error: {err}")

    parsed = await L.catching_async(
        lambda: asyncio.to_thread(json.loads, "{broken"),
        failure=lambda: ParseFail("Bad payload: ").sprintln("source", "inline"),
    )
    print(L.describe(parsed), end="")


if __name__ == "__main__":
    asyncio.run(main())
