"""Generator orchestration core.

``errors`` (failure taxonomy), ``package_manager`` (command tables),
``services`` (process, filesystem and progress collaborators), ``context``
(the per-run execution context) and ``generator`` (the registry and
fail-fast pipeline).  Import from the submodules directly.
"""
