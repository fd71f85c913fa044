"""Built-in CLI sub-commands for expressgen.

* :mod:`~expressgen.commands.new` -- scaffold a new project.
* :mod:`~expressgen.commands.generate` -- add a resource to a project.
* :mod:`~expressgen.commands.config` -- view and modify global settings.

Single commands export a plain callback registered on the root app;
command groups export a :class:`typer.Typer` sub-application.
"""
