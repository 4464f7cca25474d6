from typing import Any, Mapping


def render_prompt(template: str, values: Mapping[str, Any]) -> str:
    """
    Substitute `{name}` placeholders literally.

    str.format is not used because the templates embed JSON examples with
    their own braces.
    """
    prompt = template
    for name, value in values.items():
        prompt = prompt.replace("{" + name + "}", str(value))
    return prompt
