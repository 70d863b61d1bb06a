"""Runtime state persisted between CLI invocations.

Stored in .jestrunner/state.yaml (auto-generated, not user-editable). It
remembers the last dispatched command so `jestrunner previous` can replay it.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from jestrunner.core.logging import get_logger

log = get_logger("config.state")


class PreviousDebug(BaseModel):
    """A debug launch that can be replayed."""

    document_path: str
    config: dict[str, Any] = Field(default_factory=dict)


class RuntimeState(BaseModel):
    """Auto-generated runtime state. NOT user-editable."""

    previous_command: str | None = Field(
        default=None,
        description="Last shell command sent to a terminal.",
    )
    previous_debug: PreviousDebug | None = Field(
        default=None,
        description="Last debug launch configuration.",
    )
    previous_cwd: str | None = Field(
        default=None,
        description="Directory the last command or launch ran from.",
    )


STATE_HEADER = """\
# AUTO-GENERATED - DO NOT EDIT MANUALLY
# Remembers the last jest command for 'jestrunner previous'.
# Safe to delete.

"""


def write_runtime_state(path: Path, state: RuntimeState) -> None:
    """Write runtime state file with warning header."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = state.model_dump(exclude_none=True)
    content = STATE_HEADER + yaml.dump(data, default_flow_style=False, sort_keys=False)
    path.write_text(content)


def load_runtime_state(path: Path) -> RuntimeState | None:
    """Load runtime state from YAML file. Unreadable state is treated as absent."""
    if not path.exists():
        return None
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
        return RuntimeState(**data)
    except Exception as e:
        log.warning("state_unreadable", path=str(path), error=str(e))
        return None
