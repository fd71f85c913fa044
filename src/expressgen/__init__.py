"""expressgen -- scaffold minimal Express projects and wire new resources into them.

This package generates a small Node.js/Express server skeleton and, inside an
existing generated project, appends *resources* (a controller and a route
file) while patching the shared router file ``src/routes/index.js`` so that
each resource is imported and mounted exactly once.

Typical workflow::

    expressgen new demo --firebase      # create ./demo
    cd demo
    expressgen generate-resource user   # add src/{controllers,routes}/user.js

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models shared across the package.
    config: XDG-aware global configuration.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
    patcher: Router-file anchor parser and idempotent patcher.
    scaffold: Project bootstrapper and resource generator.
    templates: Jinja2 rendering of generated file bodies.
"""

__version__ = "0.1.0"
