"""Infer how a component file exports its component.

This is a heuristic, not a parser. Re-exports, several exports per file,
renamed exports, wrapped components and class exports all end up in the
fallback, which guesses a default export named after the file.
"""

import logging
import os
import re
from pathlib import Path
from typing import List, Optional, Pattern, Tuple, Union

from react_testgen.config import DEFAULT_FALLBACK_NAME
from react_testgen.models.data_models import ComponentExportInfo, ExportKind
from react_testgen.utils.file_utils import FileUtils

logger = logging.getLogger(__name__)

# Evaluated in order; the first match wins.
EXPORT_RULES: List[Tuple[ExportKind, Pattern[str]]] = [
    # export default function Button() { ... }
    (ExportKind.FUNCTION_DEFAULT, re.compile(r"export\s+default\s+function\s+([A-Za-z0-9_]+)")),
    # export default Button;
    (ExportKind.BARE_DEFAULT,
     re.compile(r"export\s+default\s+([A-Za-z0-9_]+)[ \t]*;?[ \t]*(?://.*)?$", re.MULTILINE)),
    # export function Button(props) { ... }
    (ExportKind.NAMED_FUNCTION, re.compile(r"export\s+function\s+([A-Za-z0-9_]+)")),
    # export const Button = (props) => { ... }
    (ExportKind.NAMED_CONST, re.compile(r"export\s+const\s+([A-Za-z0-9_]+)\s*=\s*\(")),
]


def match_export(source: str) -> Optional[Tuple[ExportKind, str]]:
    """Return the kind and name of the first rule matching ``source``."""
    for kind, pattern in EXPORT_RULES:
        match = pattern.search(source)
        if match:
            return kind, match.group(1)
    return None


def fallback_name(base_name: str, placeholder: str = DEFAULT_FALLBACK_NAME) -> str:
    """Capitalize the first character of a file base name."""
    # Names starting with a digit or underscore are left unchanged.
    return base_name[:1].upper() + base_name[1:] or placeholder


def relative_import_path(file_path: Union[str, Path], test_suffix: str = FileUtils.DEFAULT_TEST_SUFFIX) -> str:
    """Module specifier for ``file_path`` as seen from its test file."""
    file_path = Path(file_path)
    test_dir = FileUtils.get_test_path(file_path, test_suffix).parent

    relative = os.path.relpath(file_path, test_dir).replace(os.sep, '/').replace('\\', '/')
    if file_path.suffix and relative.endswith(file_path.suffix):
        relative = relative[:-len(file_path.suffix)]
    if not relative.startswith('.'):
        relative = f"./{relative}"
    return relative


def build_import_line(name: str, kind: ExportKind, module_path: str) -> str:
    if kind.is_default_import:
        return f'import {name} from "{module_path}";'
    return f'import {{ {name} }} from "{module_path}";'


def infer_export_info_from_source(source: str, file_path: Union[str, Path],
                                  test_suffix: str = FileUtils.DEFAULT_TEST_SUFFIX,
                                  placeholder: str = DEFAULT_FALLBACK_NAME) -> ComponentExportInfo:
    """
    Describe how a test should import and render the component in ``source``.

    Args:
        source: Full text of the component file
        file_path: Path of the component file, used for naming and the import path
        test_suffix: Suffix of the generated test file
        placeholder: Name used when the fallback has an empty base name

    Returns:
        ComponentExportInfo for the first matching rule, or the fallback
    """
    file_path = Path(file_path)
    module_path = relative_import_path(file_path, test_suffix)

    matched = match_export(source)
    if matched:
        kind, name = matched
    else:
        kind, name = ExportKind.FALLBACK, fallback_name(file_path.stem, placeholder)
        logger.debug(f"No export pattern matched in {file_path}, assuming default export {name}")

    return ComponentExportInfo(
        import_name=name,
        import_line=build_import_line(name, kind, module_path),
        jsx_tag=f"<{name} />",
        kind=kind,
    )


def infer_export_info(file_path: Union[str, Path],
                      test_suffix: str = FileUtils.DEFAULT_TEST_SUFFIX,
                      placeholder: str = DEFAULT_FALLBACK_NAME) -> ComponentExportInfo:
    """Read a component file and infer its export info.

    Raises:
        FileOperationError: If the file cannot be read
    """
    source = FileUtils.read_file_safely(Path(file_path))
    return infer_export_info_from_source(source, file_path, test_suffix, placeholder)
