"""Consistency checks for a generated OpenAPI document."""

import re

TEMPLATE_PARAM_PATTERN = re.compile(r"\{([^}]+)\}")


def validate_operation_ids(doc: dict) -> dict[str, str]:
    """Check that every operationId is unique.

    Returns dict of {"METHOD path": error_message} for duplicated ids.
    """
    errors = {}
    owners: dict[str, str] = {}
    for path, methods in doc.get("paths", {}).items():
        for method, operation in methods.items():
            location = f"{method.upper()} {path}"
            op_id = operation.get("operationId")
            if op_id in owners:
                errors[location] = f"Duplicate operationId {op_id!r} (also used by {owners[op_id]})"
            else:
                owners[op_id] = location
    return errors


def validate_path_parameters(doc: dict) -> dict[str, str]:
    """Check that path templates and declared path parameters agree.

    Returns dict of {"METHOD path": error_message} for mismatches.
    """
    errors = {}
    for path, methods in doc.get("paths", {}).items():
        expected = TEMPLATE_PARAM_PATTERN.findall(path)
        for method, operation in methods.items():
            declared = [
                p["name"] for p in operation.get("parameters", []) if p.get("in") == "path"
            ]
            if sorted(declared) != sorted(expected):
                errors[f"{method.upper()} {path}"] = (
                    f"Path parameters {declared} do not match template {expected}"
                )
    return errors


def validate_document(doc: dict) -> dict[str, str]:
    """Run all validations on a generated document.

    Returns dict of {location: error_message} for all findings.
    """
    errors = {}
    errors.update(validate_operation_ids(doc))
    errors.update(validate_path_parameters(doc))
    return errors
