import io
import pytest
from pathlib import Path
from unittest.mock import patch

from rich.console import Console

from react_testgen.config import Config
from react_testgen.core.application import ReactTestgenApp
from react_testgen.exceptions import ConfigurationError, FileOperationError
from react_testgen.utils.user_feedback import UserFeedback


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def feedback(output):
    return UserFeedback(console=Console(file=output, width=500, color_system=None),
                        error_console=Console(file=io.StringIO(), width=500, color_system=None))


@pytest.fixture
def project(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    return tmp_path


def make_app(project, feedback, root="src", config=None):
    return ReactTestgenApp(root, config or Config(None), feedback, cwd=project)


class TestReactTestgenApp:
    """Test ReactTestgenApp orchestration."""

    def test_root_is_resolved_against_cwd(self, project, feedback):
        # Act
        app = make_app(project, feedback)

        # Assert
        assert app.root_dir == project / "src"
        assert app.root_dir.is_absolute()

    def test_creates_stem_for_default_function_component(self, project, feedback, output):
        # Arrange
        (project / "src" / "Button.tsx").write_text(
            "export default function Button() { return <button />; }\n"
        )

        # Act
        summary = make_app(project, feedback).run()

        # Assert
        test_file = project / "src" / "Button.test.tsx"
        content = test_file.read_text()
        assert 'import Button from "./Button";' in content
        assert 'describe("Button", () => {' in content
        assert "render(<Button />);" in content
        assert summary.created == [str(test_file)]
        lines = output.getvalue().splitlines()
        assert lines[0] == f'react-testgen: scanning "{project / "src"}"'
        assert f"Created: {Path('src') / 'Button.test.tsx'}" in lines
        assert lines[-1] == "react-testgen: done."

    def test_only_test_and_stories_files_reports_nothing_found(self, project, feedback, output):
        # Arrange
        (project / "src" / "Button.stories.tsx").write_text("export default {};")
        (project / "src" / "Button.test.tsx").write_text("// existing")

        # Act
        summary = make_app(project, feedback).run()

        # Assert
        assert summary.files_found == 0
        assert "No component files found." in output.getvalue()
        assert (project / "src" / "Button.test.tsx").read_text() == "// existing"

    def test_missing_root_reports_nothing_found(self, project, feedback, output):
        # Act
        summary = make_app(project, feedback, root="nope").run()

        # Assert
        assert summary.files_found == 0
        assert "No component files found." in output.getvalue()

    def test_existing_test_is_left_untouched_without_force(self, project, feedback):
        # Arrange
        (project / "src" / "Foo.tsx").write_text("export function Foo() {}")
        existing = project / "src" / "Foo.test.tsx"
        existing.write_bytes(b"// hand written\r\n")

        # Act
        with patch("react_testgen.core.application.infer_export_info") as mock_infer:
            summary = make_app(project, feedback).run()

        # Assert
        assert existing.read_bytes() == b"// hand written\r\n"
        assert summary.skipped == [str(existing)]
        mock_infer.assert_not_called()

    def test_force_overwrites_existing_test(self, project, feedback, output):
        # Arrange
        (project / "src" / "Foo.tsx").write_text("export function Foo() {}")
        existing = project / "src" / "Foo.test.tsx"
        existing.write_text("// hand written")

        # Act
        summary = make_app(project, feedback).run(force=True)

        # Assert
        content = existing.read_text()
        assert 'import { Foo } from "./Foo";' in content
        assert summary.overwritten == [str(existing)]
        assert f"Overwrote: {Path('src') / 'Foo.test.tsx'}" in output.getvalue()

    def test_dry_run_writes_nothing(self, project, feedback, output):
        # Arrange
        (project / "src" / "New.tsx").write_text("export const New = () => null;")
        (project / "src" / "Old.tsx").write_text("export const Old = () => null;")
        (project / "src" / "Old.test.tsx").write_text("// keep")

        # Act
        summary = make_app(project, feedback).run(dry_run=True, force=True)

        # Assert
        assert not (project / "src" / "New.test.tsx").exists()
        assert (project / "src" / "Old.test.tsx").read_text() == "// keep"
        text = output.getvalue()
        assert f"[DRY RUN] Would create: {project / 'src' / 'New.test.tsx'}" in text
        assert f"[DRY RUN] Would overwrite: {project / 'src' / 'Old.test.tsx'}" in text
        assert sorted(summary.planned) == sorted([
            str(project / "src" / "New.test.tsx"),
            str(project / "src" / "Old.test.tsx"),
        ])
        assert summary.written == 0

    def test_second_run_is_idempotent(self, project, feedback):
        # Arrange
        (project / "src" / "A.tsx").write_text("export default function A() {}")
        nested = project / "src" / "nested"
        nested.mkdir()
        (nested / "b.tsx").write_text("const b = 1;")
        app = make_app(project, feedback)

        # Act
        first = app.run()
        snapshot = {p: p.read_bytes() for p in project.rglob("*.test.tsx")}
        second = app.run()

        # Assert
        assert first.written == 2
        assert second.written == 0
        assert len(second.skipped) == 2
        assert {p: p.read_bytes() for p in project.rglob("*.test.tsx")} == snapshot
        assert 'import B from "./b";' in (nested / "b.test.tsx").read_text()

    def test_excluded_directories_are_not_processed(self, project, feedback):
        # Arrange
        modules = project / "src" / "node_modules" / "lib"
        modules.mkdir(parents=True)
        (modules / "Dep.tsx").write_text("export default function Dep() {}")

        # Act
        summary = make_app(project, feedback).run()

        # Assert
        assert summary.files_found == 0
        assert not (modules / "Dep.test.tsx").exists()

    def test_read_failure_aborts_run(self, project, feedback):
        # Arrange
        (project / "src" / "Bad.tsx").write_bytes(b"\xff\xfe\x80")

        # Act & Assert
        with pytest.raises(FileOperationError):
            make_app(project, feedback).run()

        assert not (project / "src" / "Bad.test.tsx").exists()

    def test_uses_configured_policy(self, project, feedback, tmp_path):
        # Arrange
        config_file = tmp_path / "config.yml"
        config_file.write_text(
            "discovery:\n"
            "  component_extensions: ['.jsx']\n"
            "  exclude_suffixes: ['.spec.jsx']\n"
            "generation:\n"
            "  test_suffix: '.spec.jsx'\n"
        )
        (project / "src" / "card.jsx").write_text("// no export")

        # Act
        summary = make_app(project, feedback, config=Config(str(config_file))).run()

        # Assert
        test_file = project / "src" / "card.spec.jsx"
        assert summary.created == [str(test_file)]
        assert 'import Card from "./card";' in test_file.read_text()

    def test_created_path_is_relative_when_root_is_outside_cwd(self, tmp_path, feedback, output):
        # Arrange
        workdir = tmp_path / "work"
        workdir.mkdir()
        lib = tmp_path / "lib"
        lib.mkdir()
        (lib / "Button.tsx").write_text("export default function Button() {}")

        # Act
        make_app(workdir, feedback, root="../lib").run()

        # Assert
        assert f"Created: {Path('..') / 'lib' / 'Button.test.tsx'}" in output.getvalue().splitlines()

    def test_skipped_file_is_reported_in_verbose_mode(self, project, output):
        # Arrange
        verbose = UserFeedback(verbose=True, console=Console(file=output, width=500, color_system=None),
                               error_console=Console(file=io.StringIO(), width=500, color_system=None))
        (project / "src" / "Foo.tsx").write_text("export function Foo() {}")
        (project / "src" / "Foo.test.tsx").write_text("// keep")

        # Act
        make_app(project, verbose).run()

        # Assert
        assert f"Skipped (test exists): {project / 'src' / 'Foo.test.tsx'}" in output.getvalue()


class TestConfigValidation:
    """Test how ReactTestgenApp reads discovery and generation settings."""

    def test_scalar_exclude_dirs_is_a_single_name(self, project, feedback, tmp_path):
        # Arrange
        config_file = tmp_path / "config.yml"
        config_file.write_text("discovery:\n  exclude_dirs: node_modules\n")
        node = project / "src" / "node"
        node.mkdir()
        (node / "Tree.tsx").write_text("export function Tree() {}")
        modules = project / "src" / "node_modules"
        modules.mkdir()
        (modules / "Dep.tsx").write_text("export function Dep() {}")

        # Act
        app = make_app(project, feedback, config=Config(str(config_file)))
        summary = app.run()

        # Assert
        assert app.exclude_dirs == ["node_modules"]
        assert summary.created == [str(node / "Tree.test.tsx")]

    def test_scalar_extension_and_suffix_are_single_values(self, project, feedback, tmp_path):
        # Arrange
        config_file = tmp_path / "config.yml"
        config_file.write_text(
            "discovery:\n"
            "  component_extensions: .jsx\n"
            "  exclude_suffixes: .spec.jsx\n"
            "generation:\n"
            "  test_suffix: .spec.jsx\n"
        )

        # Act
        app = make_app(project, feedback, config=Config(str(config_file)))

        # Assert
        assert app.extensions == [".jsx"]
        assert app.exclude_suffixes == [".spec.jsx"]

    def test_test_suffix_equal_to_component_extension_is_rejected(self, project, feedback, tmp_path):
        # Arrange
        config_file = tmp_path / "config.yml"
        config_file.write_text("generation:\n  test_suffix: .tsx\n")
        component = project / "src" / "Button.tsx"
        component.write_text("export default function Button() {}")

        # Act & Assert
        with pytest.raises(ConfigurationError) as exc_info:
            make_app(project, feedback, config=Config(str(config_file))).run()

        assert "test_suffix" in exc_info.value.message
        assert component.read_text() == "export default function Button() {}"

    def test_test_suffix_not_excluded_from_discovery_is_rejected(self, project, feedback, tmp_path):
        # Arrange
        config_file = tmp_path / "config.yml"
        config_file.write_text("generation:\n  test_suffix: .spec.tsx\n")

        # Act & Assert
        with pytest.raises(ConfigurationError):
            make_app(project, feedback, config=Config(str(config_file)))

    def test_non_string_list_entries_are_rejected(self, project, feedback, tmp_path):
        # Arrange
        config_file = tmp_path / "config.yml"
        config_file.write_text("discovery:\n  exclude_dirs: {vendor: true}\n")

        # Act & Assert
        with pytest.raises(ConfigurationError):
            make_app(project, feedback, config=Config(str(config_file)))
