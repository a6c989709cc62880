from __future__ import annotations

import time
from typing import Any, Callable, Iterator


def flash(message: Any, clear_after: float, cleared: Any = '', sleep: Callable[[float], None] = time.sleep) -> Iterator[Any]:
    """Yield `message`, wait `clear_after` seconds, then yield `cleared`.

    Each flash clears only its own output; a newer flash is not cancelled by
    an older one finishing.
    """
    yield message
    if clear_after and clear_after > 0:
        sleep(clear_after)
    yield cleared
