"""Color scheme for the shell."""
from prompt_toolkit.styles import Style


def get_style():
    return Style.from_dict({
        # Prompt
        "prompt": "bold #00afaf",
        # Bottom toolbar
        "bottom-toolbar": "bg:#1c1c1c #ffffff",
        "bottom-toolbar.text": "#00afaf",
        # Completion menu
        "completion-menu.completion": "bg:#1c1c1c #ffffff",
        "completion-menu.completion.current": "bg:#00afaf #000000",
        # Pygments token styles
        "pygments.keyword": "bold #00afaf",
        "pygments.name.variable": "#fd971f",
        "pygments.name.attribute": "#a6e22e",
        "pygments.literal.string": "#e6db74",
    })
