"""Main application orchestrator."""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from react_testgen.analysis.export_inference import DEFAULT_FALLBACK_NAME, infer_export_info
from react_testgen.config import Config
from react_testgen.exceptions import ConfigurationError
from react_testgen.generation.template import create_test_template
from react_testgen.models.data_models import GenerationSummary
from react_testgen.utils.file_utils import FileUtils
from react_testgen.utils.user_feedback import UserFeedback

logger = logging.getLogger(__name__)

TOOL_NAME = "react-testgen"


class ReactTestgenApp:
    """Discovers component files and writes a test stem for each one missing a test."""

    def __init__(self, root_dir: Union[str, Path], config: Optional[Config] = None,
                 feedback: Optional[UserFeedback] = None, cwd: Optional[Path] = None):
        self.cwd = Path(cwd) if cwd else Path.cwd()
        self.root_dir = Path(os.path.abspath(self.cwd / root_dir))
        self.config = config or Config(None)
        self.feedback = feedback or UserFeedback()

        self.extensions = self.config.get_list('discovery.component_extensions', FileUtils.DEFAULT_COMPONENT_EXTENSIONS)
        self.exclude_dirs = self.config.get_list('discovery.exclude_dirs', FileUtils.DEFAULT_EXCLUDE_DIRS)
        self.exclude_suffixes = self.config.get_list('discovery.exclude_suffixes', FileUtils.DEFAULT_EXCLUDE_SUFFIXES)
        self.test_suffix = self.config.get('generation.test_suffix', FileUtils.DEFAULT_TEST_SUFFIX)
        self.fallback_name = self.config.get('generation.fallback_name', DEFAULT_FALLBACK_NAME)
        self._validate_test_suffix()

    def _validate_test_suffix(self):
        """Reject a test suffix whose output would itself be picked up as a component."""
        if not isinstance(self.test_suffix, str) or not self.test_suffix:
            raise ConfigurationError(
                f"Invalid generation.test_suffix: {self.test_suffix!r}",
                suggestion=f"Use a non-empty suffix such as '{FileUtils.DEFAULT_TEST_SUFFIX}'."
            )

        # A component "Foo" would get "Foo<suffix>"; that name must not be a component
        if FileUtils.is_component_file(f"Component{self.test_suffix}", self.extensions, self.exclude_suffixes):
            raise ConfigurationError(
                f"generation.test_suffix '{self.test_suffix}' produces files that are also component files",
                suggestion="Pick a test suffix that is not a component extension, "
                           "or add it to discovery.exclude_suffixes."
            )

    def find_component_files(self) -> List[Path]:
        return FileUtils.find_component_files(
            self.root_dir,
            extensions=self.extensions,
            exclude_dirs=self.exclude_dirs,
            exclude_suffixes=self.exclude_suffixes,
        )

    def render_test(self, file_path: Path) -> str:
        """Infer the export shape of a component file and render its stem."""
        export_info = infer_export_info(file_path, self.test_suffix, self.fallback_name)
        logger.debug(f"{file_path}: {export_info.kind.value} export {export_info.import_name}")
        return create_test_template(file_path, export_info)

    def run(self, dry_run: bool = False, force: bool = False) -> GenerationSummary:
        """
        Generate test stems for every component under the root.

        Existing test files are left alone unless ``force`` is set. Any read
        or write failure propagates and stops the run; files already written
        stay in place.

        Args:
            dry_run: Report intended writes without touching the file system
            force: Overwrite test files that already exist

        Returns:
            GenerationSummary describing what was (or would be) written
        """
        self.feedback.plain(f'{TOOL_NAME}: scanning "{self.root_dir}"')

        files = self.find_component_files()
        summary = GenerationSummary(files_found=len(files))
        if not files:
            self.feedback.plain("No component files found.")
            return summary

        for file_path in files:
            test_path = FileUtils.get_test_path(file_path, self.test_suffix)
            test_exists = test_path.exists()

            if test_exists and not force:
                logger.debug(f"Skipping {file_path}: {test_path} already exists")
                self.feedback.debug(f"Skipped (test exists): {test_path}")
                summary.skipped.append(str(test_path))
                continue

            content = self.render_test(file_path)

            if dry_run:
                action = "overwrite" if test_exists else "create"
                self.feedback.plain(f"[DRY RUN] Would {action}: {test_path}")
                summary.planned.append(str(test_path))
                continue

            FileUtils.write_file_safely(test_path, content)
            display_path = FileUtils.get_relative_path(test_path, self.cwd)
            if test_exists:
                self.feedback.plain(f"Overwrote: {display_path}")
                summary.overwritten.append(str(test_path))
            else:
                self.feedback.plain(f"Created: {display_path}")
                summary.created.append(str(test_path))

        self.feedback.plain(f"{TOOL_NAME}: done.")
        return summary
