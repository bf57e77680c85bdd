"""
weekrunner: weekly availability calendar + monitored shell-script tasks.

Components:
- availability/: free/busy grid per weekday at a fixed minute granularity
- tasks/: Runnable tasks (BashScriptTask) and small helpers around them
- config.py / logging_setup.py: settings and logging for the CLI
"""

__version__ = "0.1.0"
