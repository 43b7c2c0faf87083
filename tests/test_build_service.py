"""End-to-end tests for the build workflow."""

import gzip
import io
import os
import stat
import tarfile
from datetime import datetime

import pytest

from deb_tool.api.builder import Builder, build
from deb_tool.api.exceptions import ArchiveError, InvalidTargetError
from deb_tool.core.archive import read_ar
from deb_tool.models import BuildConfig, BuildRequest, BuildResult
from deb_tool.services import build_service
from deb_tool.services.build_service import BuildService


def read_deb(path):
    members = dict(read_ar(path.read_bytes()))
    data = tarfile.open(fileobj=io.BytesIO(members["data.tar.gz"]), mode="r:gz")
    control = tarfile.open(fileobj=io.BytesIO(members["control.tar.gz"]), mode="r:gz")
    return members, data, control


@pytest.fixture
def project(tree_factory):
    return tree_factory("proj", {"bin/app": 0o755, "data/x.txt": None})


@pytest.fixture
def service(config, fixed_now):
    return BuildService(config, clock=lambda: fixed_now)


def test_build_with_inferred_metadata(project, service, tmp_path):
    output = tmp_path / "out.deb"

    result = service.build(BuildRequest(target=project, output=output))

    assert result.success
    assert result.package_name == "app"
    assert result.version == "1.0-261019-143005"
    assert result.package_path == str(output)
    assert result.package_size == output.stat().st_size

    members, data, control = read_deb(output)
    names = data.getnames()
    assert "./bin/app" in names
    assert "./data/x.txt" in names
    assert "./usr/share/doc/app/copyright" in names
    assert "./usr/share/doc/app/changelog.Debian.gz" in names
    assert data.getmember("./bin/app").mode == 0o755
    assert data.getmember("./data/x.txt").mode == 0o644

    control_text = control.extractfile("./control").read().decode()
    assert "Package: app\n" in control_text
    assert "Version: 1.0-261019-143005\n" in control_text
    assert "Maintainer: Test User <test@example.com>\n" in control_text
    assert "Description: app rolling release\n" in control_text
    assert "./md5sums" in control.getnames()


def test_default_output_name_in_working_directory(project, service, tmp_path, monkeypatch):
    out_dir = tmp_path / "dist"
    out_dir.mkdir()
    monkeypatch.chdir(out_dir)

    result = service.build(BuildRequest(target=project, name="demo", version="2.0"))

    assert result.package_path == str(out_dir / "demo-2.0.deb")
    assert (out_dir / "demo-2.0.deb").is_file()


def test_documentation_overrides_target_copies(tree_factory, service, tmp_path):
    target = tree_factory("proj", {"usr/share/doc/demo/copyright": None})
    output = tmp_path / "demo.deb"

    service.build(BuildRequest(target=target, name="demo", version="1.0", output=output))

    _, data, _ = read_deb(output)
    copyright_text = data.extractfile("./usr/share/doc/demo/copyright").read().decode()
    assert "License: MIT" in copyright_text
    changelog = data.extractfile("./usr/share/doc/demo/changelog.Debian.gz").read()
    assert b"* Release." in gzip.decompress(changelog)


def test_install_prefix(project, service, tmp_path):
    output = tmp_path / "out.deb"

    service.build(BuildRequest(target=project, output=output, install_prefix="/opt/app"))

    _, data, _ = read_deb(output)
    names = data.getnames()
    assert "./opt/app/bin/app" in names
    assert "./bin/app" not in names
    assert "./usr/share/doc/app/copyright" in names


def test_identical_requests_give_identical_packages(project, config, fixed_now, tmp_path):
    pinned = config.with_overrides(source_date_epoch=1700000000)
    service = BuildService(pinned, clock=lambda: fixed_now)
    request = dict(target=project, name="demo", version="1.0")

    first = tmp_path / "first.deb"
    second = tmp_path / "second.deb"
    service.build(BuildRequest(output=first, **request))
    service.build(BuildRequest(output=second, **request))

    assert first.read_bytes() == second.read_bytes()


def test_invalid_target_creates_no_workspace(tmp_path, service, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("workspace must not be created")

    monkeypatch.setattr(build_service, "workspace", fail)

    with pytest.raises(InvalidTargetError):
        service.build(BuildRequest(target=tmp_path / "missing"))


def test_failed_packaging_leaves_nothing_behind(project, service, config, tmp_path,
                                                monkeypatch):
    def broken_package(ws, cfg, build_time):
        raise ArchiveError("gzip exploded")

    monkeypatch.setattr(build_service, "package", broken_package)
    output = tmp_path / "out.deb"

    with pytest.raises(ArchiveError):
        service.build(BuildRequest(target=project, output=output))

    assert not output.exists()
    assert list(config.work_dir.iterdir()) == []


def test_workspace_removed_after_success(project, service, config, tmp_path):
    service.build(BuildRequest(target=project, output=tmp_path / "out.deb"))

    assert list(config.work_dir.iterdir()) == []


def test_multiline_short_description_is_rejected(project, service, tmp_path):
    request = BuildRequest(target=project, output=tmp_path / "out.deb",
                           short_description=" two\nlines")

    result = Builder(service.config).build(request)

    assert not result.success
    assert result.stage == "control"


def test_builder_reports_failing_stage(tmp_path, config):
    result = Builder(config).build(BuildRequest(target=tmp_path / "missing"))

    assert not result.success
    assert result.stage == "validate"
    assert result.error_code == "DT002"
    assert "missing" in result.error


def test_build_function(project, config, tmp_path):
    output = tmp_path / "pkg.deb"

    result = build(project, config=config, name="demo", version="3.1", output=str(output))

    assert result.success
    assert result.version == "3.1"
    assert output.is_file()


def test_maintainer_from_request_overrides_config(project, service):
    plan = service.plan(BuildRequest(target=project, author_name="Someone",
                                     author_email="someone@example.org"))

    assert plan.metadata.maintainer == "Someone <someone@example.org>"


def test_maintainer_falls_back_to_login(project, config):
    anonymous = BuildService(BuildConfig(git_executable=config.git_executable))

    name, email = anonymous.default_maintainer(project)

    assert name == build_service.login_name()
    assert email.startswith(f"{name}@")


def test_symlinked_doc_dir_in_target_is_not_written_through(tree_factory, service, tmp_path):
    outside = tmp_path / "host_doc"
    outside.mkdir()
    target = tree_factory("proj", {"usr/bin/demo": 0o755})
    (target / "usr" / "share").mkdir()
    (outside / "demo").mkdir()
    os.symlink(outside, target / "usr" / "share" / "doc")
    os.symlink(outside / "demo" / "copyright", outside / "demo" / "link")
    output = tmp_path / "demo.deb"

    service.build(BuildRequest(target=target, name="demo", version="1.0", output=output))

    assert list((outside / "demo").iterdir()) == [outside / "demo" / "link"]
    _, data, _ = read_deb(output)
    assert data.getmember("./usr/share/doc").isdir()
    assert data.getmember("./usr/share/doc/demo/copyright").isfile()
    assert data.getmember("./usr/share/doc/demo/changelog.Debian.gz").isfile()


def test_symlinked_copyright_file_is_replaced(tree_factory, service, tmp_path):
    outside = tmp_path / "host_copyright"
    outside.write_text("host file\n")
    target = tree_factory("proj", {"usr/bin/demo": 0o755})
    doc_dir = target / "usr" / "share" / "doc" / "demo"
    doc_dir.mkdir(parents=True)
    os.symlink(outside, doc_dir / "copyright")
    output = tmp_path / "demo.deb"

    service.build(BuildRequest(target=target, name="demo", version="1.0", output=output))

    assert outside.read_text() == "host file\n"
    _, data, _ = read_deb(output)
    assert data.getmember("./usr/share/doc/demo/copyright").isfile()


def test_symlinked_binary_dir_keeps_host_modes(tree_factory, service, tmp_path):
    outside = tree_factory("host_bin", {"sudo": 0o700})
    target = tree_factory("proj", {"etc/demo.conf": None})
    os.symlink(outside, target / "bin")

    service.build(BuildRequest(target=target, name="demo", version="1.0",
                               output=tmp_path / "demo.deb"))

    assert stat.S_IMODE(os.lstat(outside / "sudo").st_mode) == 0o700


def test_unpinned_builds_with_same_clock_are_identical(project, config, tmp_path):
    # A clock older than every file on disk, so all entries are clamped
    build_time = datetime(2020, 1, 1, 12, 0, 0)
    service = BuildService(config, clock=lambda: build_time)
    request = dict(target=project, name="demo", version="1.0")

    first = tmp_path / "first.deb"
    second = tmp_path / "second.deb"
    service.build(BuildRequest(output=first, **request))
    service.build(BuildRequest(output=second, **request))

    assert first.read_bytes() == second.read_bytes()
    _, data, control = read_deb(first)
    epoch = int(build_time.timestamp())
    assert all(entry.mtime == epoch for entry in data.getmembers())
    assert all(entry.mtime == epoch for entry in control.getmembers())


def test_result_to_dict():
    failed = BuildResult(success=False, error="boom", error_code="DT006", stage="package")

    data = failed.to_dict()

    assert data["success"] is False
    assert data["stage"] == "package"
    assert data["error_code"] == "DT006"
    assert "metadata" not in data
    assert "error" not in BuildResult(success=True, package_name="demo").to_dict()
