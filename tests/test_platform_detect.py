import pytest

from workstation_setup.errors import PreconditionError
from workstation_setup.lib.platform_detect import (
    Platform,
    detect_platform,
    normalize_arch,
    platform_identifier,
)
from workstation_setup.main import main


@pytest.mark.parametrize(
    "identifier, expected",
    [
        ("darwin", Platform.MACOS),
        ("darwin23", Platform.MACOS),
        ("linux-gnu", Platform.LINUX),
        ("linux-gnueabihf", Platform.LINUX),
    ],
)
def test_detect_supported(identifier, expected):
    assert detect_platform(identifier) is expected


@pytest.mark.parametrize("identifier", ["msys", "cygwin", "freebsd13.2", "linux-musl", ""])
def test_detect_unsupported(identifier):
    with pytest.raises(PreconditionError, match="Unsupported OS"):
        detect_platform(identifier)


def test_unsupported_os_exits_1_before_any_command(shell, environ, tmp_path):
    environ["OSTYPE"] = "msys"
    code = main(["--log", str(tmp_path / "setup.log")], environ=environ)
    assert code == 1
    assert shell.calls == []


def test_identifier_prefers_ostype(monkeypatch):
    assert platform_identifier({"OSTYPE": "darwin22"}) == "darwin22"


def test_identifier_falls_back_to_sys_platform(monkeypatch):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setattr("platform.libc_ver", lambda: ("glibc", "2.39"))
    assert platform_identifier({}) == "linux-gnu"
    monkeypatch.setattr("sys.platform", "darwin")
    assert platform_identifier({}) == "darwin"


@pytest.mark.parametrize("libc", [("", ""), ("musl", "1.2.4")])
def test_non_glibc_linux_is_unsupported(monkeypatch, libc):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setattr("platform.libc_ver", lambda: libc)
    assert platform_identifier({}) == "linux"
    with pytest.raises(PreconditionError):
        detect_platform(platform_identifier({}))


@pytest.mark.parametrize(
    "machine, arch",
    [("x86_64", "x86_64"), ("AMD64", "x86_64"), ("aarch64", "arm64"), ("arm64", "arm64"), ("ppc64le", "ppc64le")],
)
def test_normalize_arch(machine, arch):
    assert normalize_arch(machine) == arch
