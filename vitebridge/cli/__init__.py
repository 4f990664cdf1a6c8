"""
vitebridge CLI.

Usage:
    vitebridge check <root>
    vitebridge resolve <root> <entry>...
"""

__cli_name__ = "vitebridge"
