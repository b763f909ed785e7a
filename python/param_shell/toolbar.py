"""Bottom toolbar for the shell prompt."""
import os

from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.formatted_text.html import html_escape


def _file_label(path, loaded):
    if not path:
        return "none"
    name = html_escape(os.path.basename(path))
    return name if loaded else f"{name} (not loaded)"


def get_toolbar(config, validator):
    data = _file_label(validator.data_path, validator.data is not None)
    conditions = _file_label(validator.conditions_path, bool(validator.conditions))

    return HTML(
        f"  <b>Data:</b> {data}  |  "
        f"<b>Conditions:</b> {conditions}  |  "
        f"<b>Properties:</b> {len(validator.properties)}  |  "
        f"<b>Parameters:</b> {len(validator.conditions)}  |  "
        f"<b>Output:</b> {config.output_format}"
    )
