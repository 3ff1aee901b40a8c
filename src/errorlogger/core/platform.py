"""Platform probing.

Resolves the runtime target from ``sys.platform`` and asks a host probe for
the version string that belongs to it. The default probe reads the standard
``platform`` module; tests and embedders can pass their own.
"""
from __future__ import annotations

import platform as _platform
import subprocess
import sys
from typing import Callable, Dict, Protocol, Tuple

from .errors import PlatformProbeError
from .models import PlatformDescriptor
from .utils.logging import get_logger

logger = get_logger("errorlogger.platform")

WEB = "web"
ANDROID = "android"
IOS = "ios"
MACOS = "macos"
LINUX = "linux"
WINDOWS = "windows"

TARGETS: Tuple[str, ...] = (WEB, ANDROID, IOS, MACOS, LINUX, WINDOWS)

EMPTY = PlatformDescriptor("", "")


class HostProbe(Protocol):
    def web_version(self) -> str:
        ...

    def android_version(self) -> str:
        ...

    def ios_version(self) -> str:
        ...

    def macos_version(self) -> str:
        ...

    def linux_version(self) -> str:
        ...

    def windows_version(self) -> str:
        ...


def _join(*parts: str) -> str:
    return " ".join(p for p in parts if p)


class SystemHostProbe:
    """Reads version details of the running interpreter's host."""

    def web_version(self) -> str:
        # emscripten/WASI runtime release; the browser user agent is not visible here
        return _platform.release()

    def android_version(self) -> str:
        android_ver = getattr(_platform, "android_ver", None)
        if android_ver is None:
            return _platform.release()
        return android_ver().release

    def ios_version(self) -> str:
        ios_ver = getattr(_platform, "ios_ver", None)
        if ios_ver is None:
            return _platform.release()
        info = ios_ver()
        return _join(info.model, info.release)

    def macos_model(self) -> str:
        """Hardware model identifier, e.g. ``MacBookPro18,3``; CPU architecture if unavailable."""
        try:
            result = subprocess.run(
                ["sysctl", "-n", "hw.model"],
                capture_output=True,
                text=True,
                timeout=2,
                check=True,
            )
        except (OSError, subprocess.SubprocessError):
            return _platform.machine()
        return result.stdout.strip() or _platform.machine()

    def macos_version(self) -> str:
        release = _platform.mac_ver()[0]
        major = release.split(".")[0] if release else ""
        return _join(self.macos_model(), major)

    def linux_version(self) -> str:
        try:
            info = _platform.freedesktop_os_release()
        except OSError as exc:
            raise PlatformProbeError(f"os-release is not readable: {exc}") from exc
        return _join(info.get("NAME", ""), info.get("VERSION_ID", ""))

    def windows_version(self) -> str:
        release = _platform.win32_ver()[0]
        return _join("Windows", release, _platform.win32_edition() or "")


def current_target(sys_platform: str | None = None) -> str | None:
    """Map ``sys.platform`` onto one of :data:`TARGETS` (``None`` if unknown)."""
    value = sys_platform if sys_platform is not None else sys.platform
    if value in ("emscripten", "wasi"):
        return WEB
    if value == "android":
        return ANDROID
    if value == "ios":
        return IOS
    if value == "darwin":
        return MACOS
    if value.startswith("linux"):
        return LINUX
    if value in ("win32", "cygwin"):
        return WINDOWS
    return None


_BRANCHES: Dict[str, Tuple[str, Callable[[HostProbe], str]]] = {
    WEB: ("Web", lambda probe: probe.web_version()),
    ANDROID: ("Android", lambda probe: probe.android_version()),
    IOS: ("IOS", lambda probe: probe.ios_version()),
    MACOS: ("MacOS", lambda probe: probe.macos_version()),
    LINUX: ("Linux", lambda probe: probe.linux_version()),
    WINDOWS: ("Windows", lambda probe: probe.windows_version()),
}


def detect_platform(target: str | None = None, probe: HostProbe | None = None) -> PlatformDescriptor:
    """Return ``(name, version)`` for the runtime target.

    An unrecognised target yields the empty descriptor. A probe failure keeps
    the platform name and leaves the version empty; nothing is raised.
    """
    resolved = target if target is not None else current_target()
    branch = _BRANCHES.get(resolved) if resolved else None
    if branch is None:
        logger.debug("Unrecognised platform target: %s", resolved)
        return EMPTY

    name, read_version = branch
    try:
        version = read_version(probe or SystemHostProbe())
    except PlatformProbeError as exc:
        logger.warning("Platform probe failed for %s: %s", name, exc)
        version = ""
    return PlatformDescriptor(name, version or "")
