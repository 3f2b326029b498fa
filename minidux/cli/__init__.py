"""
minidux CLI

Commands:
- minidux replay - Dispatch actions to a reference app and report the result
- minidux apps - List reference apps
- minidux version - Show version
"""
