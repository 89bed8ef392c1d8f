"""Syntax checks for generated test files before they are written."""

import ast


def validate_python(files: dict[str, str]) -> dict[str, str]:
    """Check generated Python test files for syntax errors.

    Returns dict of {filename: error_message} for files with errors.
    """
    errors = {}
    for filename, content in files.items():
        if not filename.endswith(".py"):
            continue
        try:
            ast.parse(content, filename=filename)
        except SyntaxError as e:
            errors[filename] = f"SyntaxError: {e.msg} (line {e.lineno})"
    return errors


def validate_structure(files: dict[str, str]) -> dict[str, str]:
    """Check that each Python file holds a ``Test*`` class with ``test_*`` methods.

    Files that do not parse are skipped; ``validate_python`` reports those.
    """
    errors = {}
    for filename, content in files.items():
        if not filename.endswith(".py"):
            continue
        try:
            tree = ast.parse(content, filename=filename)
        except SyntaxError:
            continue
        classes = [n for n in tree.body if isinstance(n, ast.ClassDef) and n.name.startswith("Test")]
        if not classes:
            errors[filename] = "No Test* class found"
        elif not any(
            isinstance(n, ast.FunctionDef) and n.name.startswith("test_") for c in classes for n in c.body
        ):
            errors[filename] = "Test class has no test_* methods"
    return errors


def validate_files(files: dict[str, str]) -> dict[str, str]:
    """Run all validations on generated files.

    Returns dict of {filename: error_message} for all files with errors.
    TypeScript output is not parsed here; only Python files are checked.
    """
    errors = {}
    errors.update(validate_python(files))
    errors.update(validate_structure(files))
    return errors
