"""Per-session terminal environment.

Holds the values commands read from "outside" the tree: the user name shown
by `whoami`, the clock used by `date` and `ls -l`, and the random source for
the synthetic file sizes of `ls -l`.

Values left unset are read from environment variables when the model is
constructed:

    VTS_USERNAME     user name reported by whoami (default: "user")
    VTS_RANDOM_SEED  integer seed for the ls -l size generator (default: unseeded)
"""

import os
import random
from datetime import datetime, timezone
from typing import Callable, Optional

from pydantic import BaseModel, Field, PrivateAttr

DEFAULT_USERNAME = "user"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TerminalEnvironment(BaseModel):
    """Session-level settings and services available to every command.

    Args:
        username: Name reported by `whoami`.
        random_seed: Seed for the pseudo-random generator, or None.
        clock: Callable returning the current time.
    """

    username: str = Field(default=DEFAULT_USERNAME, description="Name reported by whoami")
    random_seed: Optional[int] = Field(
        default=None, description="Seed for the ls -l size generator"
    )
    clock: Callable[[], datetime] = Field(default=_utc_now, exclude=True)

    _rng: random.Random = PrivateAttr(default_factory=random.Random)

    class Config:
        """Pydantic configuration."""

        arbitrary_types_allowed = True

    def __init__(self, **data):
        """Initialize the environment, filling unset values from os.environ.

        Args:
            **data: Keyword arguments for Pydantic model initialization.

        Raises:
            ValueError: If VTS_RANDOM_SEED is set but not an integer.
        """
        if data.get("username") is None:
            data["username"] = os.environ.get("VTS_USERNAME") or DEFAULT_USERNAME
        if data.get("random_seed") is None:
            seed = os.environ.get("VTS_RANDOM_SEED")
            if seed:
                try:
                    data["random_seed"] = int(seed)
                except ValueError:
                    raise ValueError(f"VTS_RANDOM_SEED must be an integer, got {seed!r}")
        super().__init__(**data)
        self._rng = random.Random(self.random_seed)

    @property
    def rng(self) -> random.Random:
        """Random source for synthetic values."""
        return self._rng

    def now(self) -> datetime:
        """Current time according to the configured clock."""
        return self.clock()
