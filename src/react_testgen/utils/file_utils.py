"""File system utilities for react-testgen."""

import os
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from react_testgen.exceptions import FileOperationError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileUtils:
    """Utility functions for file system operations."""

    DEFAULT_ROOT_DIR = 'src'

    DEFAULT_COMPONENT_EXTENSIONS = ['.tsx']

    DEFAULT_EXCLUDE_DIRS = [
        # Package managers
        'node_modules',
        # Build output
        'dist', 'build',
        # Version control
        '.git',
    ]

    DEFAULT_EXCLUDE_SUFFIXES = ['.test.tsx', '.stories.tsx']

    DEFAULT_TEST_SUFFIX = '.test.tsx'

    @staticmethod
    def is_excluded_directory(dir_name: str, exclude_dirs: Optional[Iterable[str]] = None) -> bool:
        """Check if a directory name is in the exclusion set."""
        if exclude_dirs is None:
            exclude_dirs = FileUtils.DEFAULT_EXCLUDE_DIRS
        return dir_name in exclude_dirs

    @staticmethod
    def is_component_file(filename: str,
                          extensions: Optional[Iterable[str]] = None,
                          exclude_suffixes: Optional[Iterable[str]] = None) -> bool:
        """
        Check if a file name denotes a component source file.

        Test files, stories files and hidden files are rejected before the
        extension is looked at.

        Args:
            filename: Bare file name, without directories
            extensions: Allowed component extensions
            exclude_suffixes: Name suffixes that disqualify a file

        Returns:
            True if the file should get a test stem
        """
        if extensions is None:
            extensions = FileUtils.DEFAULT_COMPONENT_EXTENSIONS
        if exclude_suffixes is None:
            exclude_suffixes = FileUtils.DEFAULT_EXCLUDE_SUFFIXES

        if filename.startswith('.'):
            return False
        if any(filename.endswith(suffix) for suffix in exclude_suffixes):
            return False

        return os.path.splitext(filename)[1] in extensions

    @staticmethod
    def find_component_files(root_dir: PathLike,
                             extensions: Optional[List[str]] = None,
                             exclude_dirs: Optional[List[str]] = None,
                             exclude_suffixes: Optional[List[str]] = None) -> List[Path]:
        """
        Recursively find component files under a root directory.

        Excluded directories are pruned without descending. A root or
        subdirectory that cannot be listed contributes no files.

        Args:
            root_dir: Root directory to search
            extensions: Allowed component extensions
            exclude_dirs: Directory names to skip
            exclude_suffixes: File name suffixes to skip

        Returns:
            Matching file paths in directory listing order
        """
        matching_files = []

        def _on_error(error: OSError) -> None:
            logger.debug(f"Skipping unreadable directory {error.filename}: {error}")

        for root, dirs, files in os.walk(root_dir, onerror=_on_error):
            root_path = Path(root)

            # Prune in place so os.walk never descends into excluded directories
            kept_dirs = []
            for d in dirs:
                if FileUtils.is_excluded_directory(d, exclude_dirs):
                    logger.debug(f"Excluding directory: {root_path / d}")
                else:
                    kept_dirs.append(d)
            dirs[:] = kept_dirs

            for filename in files:
                if FileUtils.is_component_file(filename, extensions, exclude_suffixes):
                    matching_files.append(root_path / filename)

        return matching_files

    @staticmethod
    def get_test_path(file_path: PathLike, test_suffix: str = DEFAULT_TEST_SUFFIX) -> Path:
        """
        Get the test file path that sits beside a component file.

        Args:
            file_path: Component source file
            test_suffix: Suffix replacing the source extension

        Returns:
            Path of the test file in the same directory
        """
        file_path = Path(file_path)
        return file_path.with_name(f"{file_path.stem}{test_suffix}")

    @staticmethod
    def get_relative_path(file_path: Path, base_path: Path) -> str:
        """
        Get relative path from base path.

        Paths outside the base climb out of it with `..` segments.

        Args:
            file_path: File path to convert
            base_path: Base path for relative conversion

        Returns:
            Relative path as string
        """
        try:
            return os.path.relpath(file_path, base_path)
        except ValueError:
            # No relative path exists across drives on Windows
            return str(file_path)

    @staticmethod
    def read_file_safely(file_path: Path, encoding: str = 'utf-8') -> str:
        """
        Safely read file contents.

        Args:
            file_path: Path to file
            encoding: File encoding

        Returns:
            File contents

        Raises:
            FileOperationError: If file cannot be read
        """
        try:
            with open(file_path, 'r', encoding=encoding) as f:
                return f.read()
        except FileNotFoundError:
            raise FileOperationError(
                f"File not found: {file_path}",
                filepath=str(file_path),
                suggestion="Check that the file exists and the path is correct."
            )
        except PermissionError:
            raise FileOperationError(
                f"Permission denied reading file: {file_path}",
                filepath=str(file_path),
                suggestion="Check file permissions or run with appropriate privileges."
            )
        except UnicodeDecodeError as e:
            raise FileOperationError(
                f"File encoding error in {file_path}: {e}",
                filepath=str(file_path),
                suggestion="Component files are read as UTF-8; check if the file is binary."
            )
        except OSError as e:
            raise FileOperationError(
                f"Failed to read file {file_path}: {e}",
                filepath=str(file_path),
                suggestion="Check the file and try again."
            )

    @staticmethod
    def write_file_safely(file_path: Path, content: str, encoding: str = 'utf-8') -> None:
        """
        Safely write content to file, creating or truncating it.

        Args:
            file_path: Path to file
            content: Content to write
            encoding: File encoding

        Raises:
            FileOperationError: If file cannot be written
        """
        try:
            with open(file_path, 'w', encoding=encoding) as f:
                f.write(content)
        except PermissionError:
            raise FileOperationError(
                f"Permission denied writing file: {file_path}",
                filepath=str(file_path),
                suggestion="Check file and directory permissions or run with appropriate privileges."
            )
        except OSError as e:
            raise FileOperationError(
                f"Failed to write file {file_path}: {e}",
                filepath=str(file_path),
                suggestion="Check available disk space and file path validity."
            )
