"""Test stem template."""

from pathlib import Path
from typing import Union

from react_testgen.models.data_models import ComponentExportInfo

TEST_TEMPLATE = """import {{ render, screen }} from "@testing-library/react";
import "@testing-library/jest-dom";
{import_line}

describe("{label}", () => {{
  it("renders without crashing", () => {{
    render({jsx_tag});
    // TODO: replace this with meaningful assertions
    // Example:
    // expect(screen.getByText(/some text/i)).toBeInTheDocument();
  }});
}});
"""


def create_test_template(file_path: Union[str, Path], export_info: ComponentExportInfo) -> str:
    """Render the smoke-test stem for a component file."""
    return TEST_TEMPLATE.format(
        import_line=export_info.import_line,
        label=Path(file_path).stem,
        jsx_tag=export_info.jsx_tag,
    )
