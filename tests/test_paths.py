import os
import pathlib
import sys
from unittest.mock import patch

from dockman.util.paths import local_ip, persistent_volume_path


def test_persistent_volume_path_linux(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    result = persistent_volume_path()
    assert os.path.isabs(result)
    assert result.replace("\\", "/").endswith("data/dockman")


def test_persistent_volume_path_darwin_uses_home(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setattr(pathlib.Path, "home", classmethod(lambda cls: tmp_path))
    assert persistent_volume_path() == os.path.abspath(
        os.path.join(str(tmp_path), ".dockman")
    )


def test_persistent_volume_path_darwin_without_home(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")

    def no_home(cls):
        raise RuntimeError("no home")

    monkeypatch.setattr(pathlib.Path, "home", classmethod(no_home))
    assert persistent_volume_path() == "./dockman"


def test_local_ip_reports_socket_address():
    with patch("socket.socket") as socket_cls:
        sock = socket_cls.return_value.__enter__.return_value
        sock.getsockname.return_value = ("192.0.2.10", 5000)
        assert local_ip() == "192.0.2.10"
        assert sock.connect.call_args.args[0] == ("8.8.8.8", 80)


def test_local_ip_empty_on_error():
    with patch("socket.socket", side_effect=OSError("no network")):
        assert local_ip() == ""