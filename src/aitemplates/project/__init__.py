"""Project bootstrap: tool registry, template copying, git setup.

Creates a new project directory populated with the rule, command and
workflow templates for the selected AI coding assistants.
"""
