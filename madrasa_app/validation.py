from collections import namedtuple

ValidationResult = namedtuple('ValidationResult', ['success', 'data', 'error'])


def flatten_errors(errors, prefix=''):
    """Turn nested serializer errors into ['name.hi: Hindi text is required', ...]"""
    messages = []
    if isinstance(errors, dict):
        for field, detail in errors.items():
            path = field if field != 'non_field_errors' else ''
            if prefix:
                path = f"{prefix}.{path}" if path else prefix
            messages.extend(flatten_errors(detail, path))
    elif isinstance(errors, (list, tuple)):
        for detail in errors:
            messages.extend(flatten_errors(detail, prefix))
    else:
        messages.append(f"{prefix}: {errors}" if prefix else str(errors))
    return messages


def validate(serializer_class, data, partial=False):
    """
    Run a serializer over raw input without touching the database.

    Returns ValidationResult(success=True, data=<validated data>, error=None)
    or ValidationResult(success=False, data=None, error='field.path: message, ...').
    """
    if not isinstance(data, dict):
        return ValidationResult(False, None, 'Request body must be a JSON object')

    serializer = serializer_class(data=data, partial=partial)
    if serializer.is_valid():
        return ValidationResult(True, serializer.validated_data, None)
    return ValidationResult(False, None, ', '.join(flatten_errors(serializer.errors)))
