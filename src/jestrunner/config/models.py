"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (JESTRUNNER__SECTION__KEY)
3. Repo YAML (.jestrunner/config.yaml)
4. Global YAML (~/.config/jestrunner/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    JESTRUNNER__<SECTION>__<KEY>=<VALUE>

Examples:
    JESTRUNNER__LOGGING__LEVEL=DEBUG
    JESTRUNNER__RUNNER__JEST_COMMAND="npm test --"
    JESTRUNNER__RUNNER__RUN_OPTIONS='["--watch"]'
    JESTRUNNER__TERMINAL__RUN_IN_EXTERNAL_NATIVE_TERMINAL=true
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        JESTRUNNER__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. The CLI -v flag switches to DEBUG.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class RunnerConfig(BaseModel):
    """How jest is located and invoked.

    Env vars:
        JESTRUNNER__RUNNER__JEST_COMMAND: Full command used to start jest
        JESTRUNNER__RUNNER__JEST_PATH: Path to the jest binary (debugging)
        JESTRUNNER__RUNNER__CONFIG_PATH: Jest config file, relative to the workspace
        JESTRUNNER__RUNNER__PROJECT_PATH: Project directory, relative to the workspace
        JESTRUNNER__RUNNER__RUN_OPTIONS: JSON list of extra jest CLI options
    """

    jest_command: str | None = Field(
        default=None,
        description="Command used to run jest, e.g. 'npm test --'. "
        "Default: node <jest binary>, or 'yarn jest' with Yarn PnP.",
    )
    jest_path: str | None = Field(
        default=None,
        description="Path to the jest binary used as the debug program. "
        "Default: node_modules/.bin/jest or node_modules/jest/bin/jest.js under cwd.",
    )
    config_path: str | None = Field(
        default=None,
        description="Jest config file relative to the workspace root. "
        "Default: nearest jest.config.* above the test file.",
    )
    use_nearest_config: bool = Field(
        default=False,
        description="Search upward from the test file for a file named like config_path "
        "before falling back to the configured path.",
    )
    project_path: str | None = Field(
        default=None,
        description="Project directory relative to the workspace root. "
        "Default: nearest package.json directory above the test file.",
    )
    run_options: list[str] | None = Field(
        default=None,
        description="Extra jest options appended to every run, e.g. ['--coverage'].",
    )
    debug_options: dict[str, Any] = Field(
        default_factory=dict,
        description="Keys merged into the generated debugger launch configuration.",
    )
    enable_yarn_pnp_support: bool = Field(
        default=False,
        description="Run jest through Yarn Plug'n'Play.",
    )
    yarn_pnp_command: str | None = Field(
        default=None,
        description="Yarn release script under .yarn/releases, e.g. yarn-4.1.0.cjs. "
        "Default: first *.cjs found there.",
    )

    @field_validator("run_options", mode="before")
    @classmethod
    def validate_run_options(cls, v: Any) -> Any:
        if v is not None and not isinstance(v, list):
            raise ValueError("run_options must be a list of strings")
        return v


class TerminalConfig(BaseModel):
    """Where commands are dispatched.

    Env vars:
        JESTRUNNER__TERMINAL__CHANGE_DIRECTORY_TO_WORKSPACE_ROOT: cd before each run
        JESTRUNNER__TERMINAL__RUN_IN_EXTERNAL_NATIVE_TERMINAL: Use ttab
    """

    change_directory_to_workspace_root: bool = Field(
        default=True,
        description="Send 'cd <cwd>' before every jest command.",
    )
    run_in_external_native_terminal: bool = Field(
        default=False,
        description="Open a native terminal tab via ttab instead of the current shell. "
        "Requires ttab on PATH (macOS).",
    )
    external_terminal_title: str = Field(
        default="jest-runner",
        description="Tab title passed to ttab.",
    )


class JestRunnerConfig(BaseModel):
    """Root configuration for jestrunner.

    All settings can be configured via:
    1. Environment variables: JESTRUNNER__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    terminal: TerminalConfig = Field(default_factory=TerminalConfig)
