"""Tests for archive packaging."""

import io
import os
import tarfile

import pytest

from deb_tool.api.exceptions import ArchiveError, PublishError
from deb_tool.core.archive import read_ar, write_ar
from deb_tool.core.packager import package, publish
from deb_tool.core.workspace import workspace


def members_of(data):
    return dict(read_ar(data))


def open_tar(blob):
    return tarfile.open(fileobj=io.BytesIO(blob), mode="r:gz")


@pytest.fixture
def populated(config):
    with workspace(config) as ws:
        (ws.control_dir / "control").write_text("Package: demo\n")
        app = ws.root_dir / "usr" / "bin" / "demo"
        app.parent.mkdir(parents=True)
        app.write_text("#!/bin/sh\necho demo\n")
        os.chmod(app, 0o755)
        yield ws


def test_archive_has_three_members_in_order(populated, config):
    data = package(populated, config)

    assert data.startswith(b"!<arch>\n")
    assert [name for name, _ in read_ar(data)] == [
        "debian-binary",
        "control.tar.gz",
        "data.tar.gz",
    ]


def test_debian_binary_content(populated, config):
    members = members_of(package(populated, config))

    assert members["debian-binary"] == b"2.0\n"


def test_data_tar_is_owned_by_root(populated, config):
    members = members_of(package(populated, config))

    with open_tar(members["data.tar.gz"]) as tar:
        entries = tar.getmembers()
        names = [entry.name for entry in entries]
        assert "./usr/bin/demo" in names
        assert all(entry.uid == 0 and entry.gid == 0 for entry in entries)
        assert all(entry.uname == "root" for entry in entries)
        assert tar.getmember("./usr/bin/demo").mode == 0o755


def test_control_tar_keeps_owner(populated, config):
    members = members_of(package(populated, config))

    with open_tar(members["control.tar.gz"]) as tar:
        control = tar.getmember("./control")
        assert control.uid == os.getuid()
        assert tar.extractfile(control).read() == b"Package: demo\n"


def test_members_are_staged_in_pkg_dir(populated, config):
    package(populated, config)

    assert sorted(p.name for p in populated.pkg_dir.iterdir()) == [
        "control.tar.gz",
        "data.tar.gz",
        "debian-binary",
    ]


def test_source_date_epoch_clamps_timestamps(populated, config):
    pinned = config.with_overrides(source_date_epoch=1000000000)

    members = members_of(package(populated, pinned))

    with open_tar(members["data.tar.gz"]) as tar:
        assert all(entry.mtime <= 1000000000 for entry in tar.getmembers())
    assert package(populated, pinned) == package(populated, pinned)


def test_missing_control_dir_raises_archive_error(config):
    with workspace(config) as ws:
        ws.control_dir.rmdir()
        with pytest.raises(ArchiveError):
            package(ws, config)


def test_publish_replaces_existing_file(tmp_path):
    output = tmp_path / "dist" / "demo.deb"
    output.parent.mkdir()
    output.write_bytes(b"old")

    published = publish(b"new", output)

    assert published == output
    assert output.read_bytes() == b"new"
    assert list(output.parent.iterdir()) == [output]


def test_publish_failure_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(PublishError):
        publish(b"data", blocker / "demo.deb")


def test_ar_round_trip_with_odd_sizes():
    buffer = io.BytesIO()
    write_ar(buffer, [("a", b"odd"), ("b", b"even")], mtime=0)

    assert read_ar(buffer.getvalue()) == [("a", b"odd"), ("b", b"even")]


def test_ar_rejects_long_member_names():
    with pytest.raises(ValueError):
        write_ar(io.BytesIO(), [("x" * 17, b"")], mtime=0)


def test_build_time_clamps_timestamps(populated, config):
    members = members_of(package(populated, config, build_time=1000000000))

    for member in ("control.tar.gz", "data.tar.gz"):
        with open_tar(members[member]) as tar:
            assert all(entry.mtime == 1000000000 for entry in tar.getmembers())


def test_source_date_epoch_wins_over_build_time(populated, config):
    pinned = config.with_overrides(source_date_epoch=900000000)

    members = members_of(package(populated, pinned, build_time=1000000000))

    with open_tar(members["data.tar.gz"]) as tar:
        assert all(entry.mtime == 900000000 for entry in tar.getmembers())
