"""Fill ``{key}`` placeholders in a URI template from query parameter examples."""

from apidoc_gen.model.base import QueryParameter


def format_example(value: str | int | float) -> str:
    """Textual form of an example value; integral floats lose their ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def substitute_uri(uri: str, query_parameters: list[QueryParameter] | None) -> str:
    """Replace the first ``{key}`` of each parameter, in parameter order.

    Tokens are matched literally, so keys must not overlap (``{id}`` vs ``{pid}``
    is fine, a key containing another key's braces is not). Parameters that do
    not appear in the template are left alone.
    """
    for param in query_parameters or []:
        uri = uri.replace(f"{{{param.key}}}", format_example(param.example), 1)
    return uri
