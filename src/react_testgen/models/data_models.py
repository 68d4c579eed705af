"""Data models for react-testgen."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from react_testgen.config import DEFAULT_CONFIG_FILE
from react_testgen.utils.file_utils import FileUtils

DEFAULT_ROOT_DIR = FileUtils.DEFAULT_ROOT_DIR


@dataclass(frozen=True)
class CliOptions:
    """Options for a single run, built once from the command line."""
    root_dir: str = DEFAULT_ROOT_DIR
    dry_run: bool = False
    force: bool = False
    verbose: bool = False
    quiet: bool = False
    config_file: str = DEFAULT_CONFIG_FILE
    init_config: bool = False


class ExportKind(Enum):
    """Export shape detected in a component file."""
    FUNCTION_DEFAULT = "function_default"  # export default function Name
    BARE_DEFAULT = "bare_default"          # export default Name;
    NAMED_FUNCTION = "named_function"      # export function Name
    NAMED_CONST = "named_const"            # export const Name = (
    FALLBACK = "fallback"                  # nothing matched

    @property
    def is_default_import(self) -> bool:
        return self not in (ExportKind.NAMED_FUNCTION, ExportKind.NAMED_CONST)


@dataclass
class ComponentExportInfo:
    """How a test stem imports and renders one component."""
    import_name: str
    import_line: str
    jsx_tag: str
    kind: ExportKind = ExportKind.FALLBACK


@dataclass
class GenerationSummary:
    """Outcome of one generation run."""
    files_found: int = 0
    created: List[str] = field(default_factory=list)
    overwritten: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    planned: List[str] = field(default_factory=list)

    @property
    def written(self) -> int:
        return len(self.created) + len(self.overwritten)
