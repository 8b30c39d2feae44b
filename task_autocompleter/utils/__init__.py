# task_autocompleter/utils/__init__.py
# logging, config, metrics and task persistence helpers
