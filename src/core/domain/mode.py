"""Output modes for sw-append.

The mode is the single switch of the tool: it picks the build environment
handed to the bundler and the destination the Output Router writes to.
Keeping it in the domain layer lets the CLI, the pipeline and the adapters
share one closed set of values.
"""

from __future__ import annotations

from enum import Enum


class OutputMode(str, Enum):
    """Closed set of output modes.

    `APPEND` is the explicit fallback for an omitted or unrecognised
    `--mode` value.
    """

    DEV = "dev"
    BUILD = "build"
    REPLACE = "replace"
    APPEND = "append"

    @classmethod
    def default(cls) -> "OutputMode":
        return cls.APPEND

    @classmethod
    def from_option(cls, value: str | None) -> "OutputMode":
        """Map a raw `--mode` value to a mode.

        Only the exact values `dev`, `build` and `replace` are selectable
        from the command line; anything else (`DEV` included) falls back to
        `APPEND`.
        """

        if not value:
            return cls.default()
        for mode in (cls.DEV, cls.BUILD, cls.REPLACE):
            if value == mode.value:
                return mode
        return cls.default()

    @property
    def is_development(self) -> bool:
        return self is OutputMode.DEV

    @property
    def node_env(self) -> str:
        """Value for `NODE_ENV` / `BABEL_ENV`."""

        return "development" if self.is_development else "production"

    @property
    def webpack_mode(self) -> str:
        return "development" if self.is_development else "production"

    def label(self) -> str:
        """Human readable label for the CLI output."""

        if self is OutputMode.APPEND:
            return "append (default)"
        return self.value
