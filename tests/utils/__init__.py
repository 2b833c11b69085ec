"""
Test utilities package for the i18n JavaScript export tests.

### test_helpers.py
- `write_properties()`: Write a .properties file without newline translation
- `create_temp_config_file()`: Context manager for temporary YAML config files
- `read_script()`: Read a generated messages_<locale>.js back
- `assignment_lines()`: Extract the m["key"] = ... lines of a script
"""

from .test_helpers import (
    assignment_lines,
    create_temp_config_file,
    read_script,
    write_properties,
)

__all__ = [
    "assignment_lines",
    "create_temp_config_file",
    "read_script",
    "write_properties",
]
