import dataclasses

import pytest

from react_testgen.models.data_models import (
    CliOptions,
    ComponentExportInfo,
    ExportKind,
    GenerationSummary,
)


class TestCliOptions:
    """Test CliOptions dataclass."""

    def test_defaults(self):
        """Test default option values."""
        # Act
        options = CliOptions()

        # Assert
        assert options.root_dir == "src"
        assert options.dry_run is False
        assert options.force is False
        assert options.config_file == ".react-testgen.yml"

    def test_is_immutable(self):
        """Test that options cannot be changed after creation."""
        # Arrange
        options = CliOptions(root_dir="app")

        # Act & Assert
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.root_dir = "other"


class TestExportKind:
    """Test ExportKind enum."""

    @pytest.mark.parametrize("kind", [ExportKind.FUNCTION_DEFAULT, ExportKind.BARE_DEFAULT, ExportKind.FALLBACK])
    def test_default_import_kinds(self, kind):
        assert kind.is_default_import is True

    @pytest.mark.parametrize("kind", [ExportKind.NAMED_FUNCTION, ExportKind.NAMED_CONST])
    def test_named_import_kinds(self, kind):
        assert kind.is_default_import is False


class TestComponentExportInfo:
    """Test ComponentExportInfo dataclass."""

    def test_kind_defaults_to_fallback(self):
        # Act
        info = ComponentExportInfo("Button", 'import Button from "./Button";', "<Button />")

        # Assert
        assert info.kind is ExportKind.FALLBACK


class TestGenerationSummary:
    """Test GenerationSummary dataclass."""

    def test_written_counts_created_and_overwritten(self):
        # Arrange
        summary = GenerationSummary(
            files_found=4,
            created=["a.test.tsx"],
            overwritten=["b.test.tsx", "c.test.tsx"],
            skipped=["d.test.tsx"],
        )

        # Act & Assert
        assert summary.written == 3

    def test_lists_are_not_shared_between_instances(self):
        # Arrange
        first = GenerationSummary()
        second = GenerationSummary()

        # Act
        first.created.append("x.test.tsx")

        # Assert
        assert second.created == []
