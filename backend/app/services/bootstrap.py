"""
Service Skeleton Backend — Bootstrap Runner
=============================================

What:  Performs the one side-effecting diagnostic action the skeleton ships:
       ensure the working-data directory exists, then append a single
       timestamped line naming the invoking user to var/test.log.
Why:   Acts as a smoke test that the runtime environment is wired correctly
       (filesystem permissions, working directory resolution, process identity).
Who:   Invoked by GET / (HTTP front controller), by `python -m app`, and by tests.
When:  Once per invocation; the data directory is also ensured at startup.

Log Line Format:
    "<YYYY-MM-DD HH:MM:SS>  - Test log entry from user <username>\\n"

    Note the two spaces before the dash. The line is never read back by the
    service; it only has to be well-formed and appended.

Concurrency:
    Several requests or processes may append to the same file at once. Each
    line goes out as a single write on a file opened in append mode, so the
    OS append guarantee keeps lines whole. There is no application-level lock.

Testability:
    Wall clock and OS identity are injected (Clock, IdentityProvider), which
    makes LogEntry.compose() a pure function of the two and lets tests pin
    both without patching the OS globally.
"""

import getpass
import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional, Protocol

import aiofiles

from app.config import Settings, settings
from app.exceptions import BootstrapError, DataDirectoryError, LogWriteError

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
ENTRY_LABEL = "Test log entry from user"
UNKNOWN_USER = "unknown"


# ══════════════════════════════════════════════════════════════════════════
# Injectable Capabilities
# ══════════════════════════════════════════════════════════════════════════


class Clock(Protocol):
    def now(self) -> datetime: ...


class IdentityProvider(Protocol):
    def current_user(self) -> str: ...


class SystemClock:
    """Local wall-clock time, as the log line is meant for humans on the host."""

    def now(self) -> datetime:
        return datetime.now()


class SystemIdentity:
    """
    Name of the OS user the process runs as.

    Containers often run under a UID with no passwd entry; getpass then
    raises and the entry is attributed to "unknown" instead of failing.
    """

    def current_user(self) -> str:
        try:
            name = getpass.getuser()
        except (KeyError, OSError) as e:
            logger.debug("Could not resolve process user: %s", e)
            return UNKNOWN_USER
        # A username must stay a single token in the log line
        name = "_".join(name.split())
        return name or UNKNOWN_USER


class FixedClock:
    """Clock that always returns the same instant."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


class StaticIdentity:
    """Identity provider that always reports the same user."""

    def __init__(self, username: str):
        self.username = username

    def current_user(self) -> str:
        return self.username


# ══════════════════════════════════════════════════════════════════════════
# Log Entry & Outcome
# ══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class LogEntry:
    """One diagnostic line. Created per invocation, appended, never read back."""

    timestamp: datetime
    username: str

    @classmethod
    def compose(cls, clock: Clock, identity: IdentityProvider) -> "LogEntry":
        return cls(timestamp=clock.now(), username=identity.current_user())

    @property
    def formatted_timestamp(self) -> str:
        return self.timestamp.strftime(TIMESTAMP_FORMAT)

    def render(self) -> str:
        return f"{self.formatted_timestamp}  - {ENTRY_LABEL} {self.username}\n"


class BootstrapStatus(str, Enum):
    OK = "ok"
    DIRECTORY_CREATE_FAILED = "directory_create_failed"
    WRITE_FAILED = "write_failed"


@dataclass(frozen=True)
class BootstrapOutcome:
    """
    Result of one runner invocation.

    Lets callers and tests assert on what happened without inspecting the
    filesystem. `entry` is set once the line was composed, so it is also
    present on a write failure.
    """

    status: BootstrapStatus
    log_path: Path
    entry: Optional[LogEntry] = None
    error: Optional[BootstrapError] = None

    @property
    def ok(self) -> bool:
        return self.status is BootstrapStatus.OK

    def raise_for_status(self) -> "BootstrapOutcome":
        if self.error is not None:
            raise self.error
        return self


# ══════════════════════════════════════════════════════════════════════════
# Runner
# ══════════════════════════════════════════════════════════════════════════


class ApplicationRunner:
    """
    Ensures the data directory exists and appends one diagnostic line.

    Sequence per invocation:
        1. Create data_dir if missing (single level, no parents)
        2. Compose the entry from the injected clock and identity
        3. Append the rendered line to data_dir/log_filename
    """

    def __init__(
        self,
        data_dir: Path,
        log_filename: str = "test.log",
        clock: Optional[Clock] = None,
        identity: Optional[IdentityProvider] = None,
    ):
        self.data_dir = Path(data_dir)
        self.log_path = self.data_dir / log_filename
        self.clock = clock or SystemClock()
        self.identity = identity or SystemIdentity()

    @classmethod
    def from_settings(cls, config: Settings) -> "ApplicationRunner":
        return cls(data_dir=config.var_dir, log_filename=config.log_filename)

    def ensure_data_directory(self) -> Path:
        """
        Creates the working-data directory if it does not exist yet.

        Idempotent: an existing directory is left untouched. A concurrent
        creator winning the race is not an error either.

        Raises:
            DataDirectoryError: the directory could not be created, or the
                path is taken by something that is not a directory.
        """
        if self.data_dir.is_dir():
            return self.data_dir
        try:
            self.data_dir.mkdir(exist_ok=True)
        except OSError as e:
            logger.error("Cannot create data directory %s: %s", self.data_dir, e)
            raise DataDirectoryError(path=str(self.data_dir), reason=str(e)) from e
        logger.info("Created data directory %s", self.data_dir)
        return self.data_dir

    async def _append(self, line: str) -> None:
        # One write on an O_APPEND handle keeps concurrent lines from interleaving
        async with aiofiles.open(self.log_path, mode="a", encoding="utf-8") as f:
            await f.write(line)

    async def attempt(self) -> BootstrapOutcome:
        """
        Runs the bootstrap action and reports what happened.

        Never raises for filesystem failures; the outcome names the failing
        step and carries the matching BootstrapError.
        """
        try:
            self.ensure_data_directory()
        except DataDirectoryError as e:
            return BootstrapOutcome(
                status=BootstrapStatus.DIRECTORY_CREATE_FAILED,
                log_path=self.log_path,
                error=e,
            )

        entry = LogEntry.compose(self.clock, self.identity)
        try:
            await self._append(entry.render())
        except OSError as e:
            logger.error("Cannot append to %s: %s", self.log_path, e)
            return BootstrapOutcome(
                status=BootstrapStatus.WRITE_FAILED,
                log_path=self.log_path,
                entry=entry,
                error=LogWriteError(path=str(self.log_path), reason=str(e)),
            )

        logger.debug("Wrote diagnostic entry for user %s to %s", entry.username, self.log_path)
        return BootstrapOutcome(status=BootstrapStatus.OK, log_path=self.log_path, entry=entry)

    async def run(self) -> BootstrapOutcome:
        """
        Runs the bootstrap action; any filesystem failure is fatal.

        Raises:
            DataDirectoryError: data directory could not be created.
            LogWriteError: the line could not be appended.
        """
        outcome = await self.attempt()
        return outcome.raise_for_status()


def get_runner() -> ApplicationRunner:
    """
    FastAPI dependency providing a runner bound to the current settings.

    Tests replace it via app.dependency_overrides to pin clock and identity.
    """
    return ApplicationRunner.from_settings(settings)
