"""
Task subsystem.

Components:
- task_models.py: RunState, RunnableStatus
- bash_task.py: BashScriptTask, a Runnable backed by a shell script
- task_api.py: small helpers (output sinks, async wait) used by the CLI and tests
"""
