"""Library layer shared by the CLI.

- ``yshell.lib.shell``: the command engine (tokenizer, registry, dispatch)
- ``yshell.lib.core``: paths and global configuration
- ``yshell.lib._util``: helpers with no yshell service dependencies
"""
