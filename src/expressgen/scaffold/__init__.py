"""Project bootstrapper and resource generator.

Exports:
    create_project: Backend of ``expressgen new``.
    generate_resource: Backend of ``expressgen generate-resource``.
"""

from expressgen.scaffold.project import create_project
from expressgen.scaffold.resource import generate_resource

__all__ = ["create_project", "generate_resource"]
