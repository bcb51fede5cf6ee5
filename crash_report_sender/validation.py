from typing import Mapping


def is_valid_parameter_name(name: str) -> bool:
    if not name:
        return False
    return all(" " <= c <= "~" and c != '"' for c in name)


def check_parameters(parameters: Mapping[str, str]) -> bool:
    """Check that every parameter name can be embedded in a part header.

    Names must be non-empty, printable ASCII and free of '"'. Values are
    not checked.
    """
    for name in parameters:
        if not is_valid_parameter_name(name):
            return False
    return True
