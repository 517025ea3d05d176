"""junit2md.wiring

This module is the **composition root** for the command-line runtime.

It is the single place where we assemble the running application:

- load configuration / environment variables (optional ``.env``)
- configure logging
- build the immutable render options

Keeping this wiring in one place prevents configuration setup from being
duplicated across entrypoints (CLI, scripts, CI helpers).
"""

from __future__ import annotations

import logging
import os
import re
import sys
from pathlib import Path
from typing import Mapping, Optional

from junit2md.render.report_md import RenderOptions

ENV_VERBOSE = "JUNIT2MD_VERBOSE"
ENV_LOG_LEVEL = "JUNIT2MD_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s: %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


def load_dotenv_if_present(dotenv_path: Optional[Path] = None) -> None:
    """Minimal .env loader.

    Loads KEY=VALUE lines into ``os.environ`` if the key is not already set.
    Defaults to ``.env`` in the current working directory.

    - ignores comments and blank lines
    - supports quoted values
    - strips inline comments of the form ``VALUE   # comment``
    """

    path = Path(dotenv_path) if dotenv_path is not None else Path.cwd() / ".env"
    if not path.is_file():
        return

    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, val = line.split("=", 1)
        key = key.strip()
        raw_val = val.strip()

        # Quoted value
        if (raw_val.startswith('"') and raw_val.endswith('"')) or (
            raw_val.startswith("'") and raw_val.endswith("'")
        ):
            parsed_val = raw_val[1:-1]
        else:
            parsed_val = re.split(r"\s+#", raw_val, maxsplit=1)[0].strip()
            parsed_val = parsed_val.strip('"').strip("'")

        parsed_val = parsed_val.replace("\r", "")
        if key and key not in os.environ:
            os.environ[key] = parsed_val


def env_flag(name: str, *, environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return str(env.get(name) or "").strip().lower() in _TRUTHY


def configure_logging(level: Optional[str] = None) -> None:
    """Send diagnostics to stderr.

    ``level`` falls back to ``$JUNIT2MD_LOG_LEVEL`` and then ``WARNING``.
    Unknown level names fall back to the default instead of failing the run.
    """

    name = (level or os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip().upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.getLevelName(DEFAULT_LOG_LEVEL)

    logging.basicConfig(level=numeric, format=LOG_FORMAT, stream=sys.stderr)


def build_render_options(*, verbose: bool) -> RenderOptions:
    return RenderOptions(verbose=bool(verbose))
