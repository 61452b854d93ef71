from .fields import Field, Many, Single
from .sanitize import prep_output


def format_element(field: Field) -> str:
    """Render one field as tab-indented elements, one line per value."""
    if isinstance(field, Many):
        values: tuple[str, ...] = field.values
    elif isinstance(field, Single):
        values = (field.value,)
    else:
        raise TypeError(f"Unsupported field type: {type(field).__name__}")
    return "".join(f"\t<{field.name}>{prep_output(v)}</{field.name}>\n" for v in values)
