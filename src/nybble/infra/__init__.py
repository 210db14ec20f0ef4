"""Infrastructure layer — filesystem access.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~nybble.exceptions.FileAccessError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from nybble.infra.files import read_file, write_file

__all__: list[str] = [
    "read_file",
    "write_file",
]
