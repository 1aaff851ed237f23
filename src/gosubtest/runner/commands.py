"""Build `go test` and `dlv test` command lines for a located test.

Nothing here starts a process. Callers (an editor integration, a shell
alias, the CLI) decide how to execute the returned argv.
"""

from __future__ import annotations

import re
import shlex
from dataclasses import dataclass
from pathlib import Path

from gosubtest.config.models import GoSubtestConfig
from gosubtest.core.errors import InternalError, LocateError
from gosubtest.core.logging import get_logger
from gosubtest.locator.document import TextDocument
from gosubtest.locator.models import TestInfo
from gosubtest.locator.naming import build_test_function_name, build_test_name
from gosubtest.locator.scan import find_test_info

log = get_logger(__name__)

# Characters Go's regexp.QuoteMeta escapes
_RE2_META = re.compile(r"([\\.+*?()|\[\]{}^$])")


@dataclass(frozen=True, slots=True)
class TestTarget:
    """A test name plus the package directory it must run from."""

    name: str
    package_dir: Path
    file_path: Path
    info: TestInfo

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "package_dir": str(self.package_dir),
            "file_path": str(self.file_path),
            **self.info.to_dict(),
        }


def resolve_target(
    path: Path,
    line: int,
    config: GoSubtestConfig,
    *,
    whole_function: bool = False,
) -> TestTarget:
    """Resolve the test at a 1-based ``line`` of ``path``.

    Raises:
        LocateError: The file is not a test file, the line is outside the
            file, or no test encloses the line.
        InternalError: The file could not be read.
    """
    path = path.resolve()
    suffix = config.locator.test_file_suffix
    if config.locator.require_test_file and not path.name.endswith(suffix):
        raise LocateError.not_a_test_file(str(path), suffix)

    try:
        document = TextDocument.from_path(path)
    except OSError as e:
        raise InternalError.unexpected(f"cannot read {path}: {e}", path=str(path)) from e
    if not 1 <= line <= document.line_count:
        raise LocateError.line_out_of_range(str(path), line, document.line_count)

    info = find_test_info(document, line - 1)
    build = build_test_function_name if whole_function else build_test_name
    name = build(info)
    if info is None or name is None:
        raise LocateError.no_test_at_cursor(str(path), line)

    log.debug("target.resolved", name=name, path=str(path), line=line)
    return TestTarget(name=name, package_dir=path.parent, file_path=path, info=info)


def run_pattern(name: str) -> str:
    """Turn a test name into a ``-run`` pattern that selects exactly that test.

    ``go test`` splits ``-run`` on ``/`` and matches each element as an
    unanchored regexp against one level of the test name, so every element
    is escaped and anchored. An empty element (``Runner/Method/``) stays
    empty, which matches every subtest at that level.
    """
    return "/".join(_anchor(element) for element in name.split("/"))


def _anchor(element: str) -> str:
    if not element:
        return ""
    return "^" + _RE2_META.sub(r"\\\1", element) + "$"


def build_go_test_command(target: TestTarget, config: GoSubtestConfig) -> list[str]:
    """``go test -timeout <t> -run <pattern> [-v] [extra...] <package_dir>``."""
    runner = config.runner
    cmd = [runner.go_binary, "test", "-timeout", runner.timeout]
    cmd.extend(["-run", run_pattern(target.name)])
    if runner.verbose:
        cmd.append("-v")
    cmd.extend(runner.extra_args)
    cmd.append(str(target.package_dir))
    return cmd


def build_dlv_command(
    target: TestTarget,
    config: GoSubtestConfig,
    port: int | None = None,
) -> list[str]:
    """``dlv test`` listening on host:port, to be run from ``package_dir``."""
    debugger = config.debugger
    listen_port = debugger.port if port is None else port
    cmd = [debugger.dlv_binary, "test"]
    if debugger.headless:
        cmd.append("--headless")
    cmd.append(f"--listen={debugger.host}:{listen_port}")
    cmd.append(f"--api-version={debugger.api_version}")
    if debugger.accept_multiclient:
        cmd.append("--accept-multiclient")
    cmd.extend(["--", "-test.run", run_pattern(target.name)])
    return cmd


def format_command(argv: list[str]) -> str:
    """Shell-quoted rendering, safe to paste into a terminal."""
    return shlex.join(argv)
