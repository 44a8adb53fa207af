import json
import subprocess
from pathlib import Path
from unittest import mock

from drillkit.project import Crate, RustAnalyzerProject


def test_new_project_is_empty():
    project = RustAnalyzerProject()
    assert project.to_dict() == {"sysroot_src": "", "crates": []}


def test_path_to_json_adds_rust_file():
    project = RustAnalyzerProject()
    project.path_to_json("exercises/quiz1.rs")
    assert project.crates == [Crate(root_module="exercises/quiz1.rs")]
    crate = project.crates[0]
    assert crate.edition == "2021"
    assert crate.cfg == ["test"]
    assert crate.deps == []


def test_path_to_json_skips_other_files():
    project = RustAnalyzerProject()
    for path in ["exercises/README.md", "exercises/clippy", "exercises/a.b.rs"]:
        project.path_to_json(path)
    assert project.crates == []


def test_exercises_to_json(tmp_path):
    root = tmp_path / "exercises"
    (root / "intro").mkdir(parents=True)
    (root / "quiz1.rs").write_text("")
    (root / "intro" / "intro1.rs").write_text("")
    (root / "intro" / "README.md").write_text("")
    project = RustAnalyzerProject()
    project.exercises_to_json(root)
    modules = sorted(Path(c.root_module).name for c in project.crates)
    assert modules == ["intro1.rs", "quiz1.rs"]


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/src")
    project.path_to_json("exercises/quiz1.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    loaded = json.loads(target.read_text())
    assert loaded == project.to_dict()
    assert loaded["crates"][0]["root_module"] == "exercises/quiz1.rs"


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/src")
    project = RustAnalyzerProject()
    with mock.patch("drillkit.project.subprocess.run") as run:
        result = project.get_sysroot_src()
    assert run.call_count == 0
    assert project.sysroot_src == "/custom/src"
    assert result == "/custom/src"


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    done = subprocess.CompletedProcess([], 0, stdout=b"/opt/toolchain\n", stderr=b"")
    project = RustAnalyzerProject()
    with mock.patch("drillkit.project.subprocess.run", return_value=done) as run:
        project.get_sysroot_src()
    assert run.call_args.args[0] == ["rustc", "--print", "sysroot"]
    parts = Path(project.sysroot_src).parts
    assert parts[-5:] == ("lib", "rustlib", "src", "rust", "library")
    assert Path(project.sysroot_src).parents[4] == Path("/opt/toolchain")
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out